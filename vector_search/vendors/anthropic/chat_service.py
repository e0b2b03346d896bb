"""
vendors/anthropic/chat_service.py
===================================
ChatService implementation using Anthropic Claude models.

Implements the same interface as vendors/openai/chat_service.py so the
factory can swap providers transparently.

Key difference from OpenAI:
  Anthropic separates the system prompt from the messages array and
  messages must only contain "user" and "assistant" roles.

This class handles that conversion internally: callers always pass messages
in the standard OpenAI format (system role inside messages array).
"""

# Python Packages
from typing import List, Dict, Optional, Tuple
import anthropic

# Client
from .anthropic_client import AnthropicClient

# Constants
from ...base import constants

# Exceptions & messages
from ...util.exceptions import ProviderError, ProviderTimeout
from ...util import messages as error_messages





class ChatService:
    """
    Anthropic Claude implementation of ChatService.
    Drop-in replacement for vendors/openai/chat_service.py.
    """

    def __init__(self, client: Optional[AnthropicClient] = None, model: Optional[str] = None):
        self.client        = (client or AnthropicClient()).get_client()
        self.default_model = model or constants.ANTHROPIC_DEFAULT_MODEL


    def generate_response(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.0,
        max_tokens: int = 1024
    ) -> str:
        """
        Generate a response using the Anthropic Claude API.

        Args:
            messages:    List of message dicts with 'role' and 'content'.
            model:       Claude model string. Defaults to ANTHROPIC_DEFAULT_MODEL.
            temperature: Sampling temperature (0.0 – 1.0).
            max_tokens:  Maximum tokens in response.

        Returns:
            Generated response text as a string.

        Raises:
            ProviderTimeout: the call exceeded PROVIDER_TIMEOUT
            ProviderError: non-success status or no text block returned
        """

        system_prompt, conversation = self._split_messages(messages)

        kwargs = dict(
            model       = model or self.default_model,
            max_tokens  = max_tokens,
            temperature = temperature,
            messages    = conversation,
        )

        # Anthropic rejects empty system strings — only pass if present
        if system_prompt:
            kwargs["system"] = system_prompt

        try:
            response = self.client.messages.create(**kwargs)

        except anthropic.APITimeoutError as exc:
            raise ProviderTimeout(error_messages.ERROR["COMPLETION_FAILED"], details = str(exc)) from exc

        except anthropic.APIStatusError as exc:
            raise ProviderError(
                error_messages.ERROR["COMPLETION_FAILED"],
                details = {"status": exc.status_code, "body": exc.body}
            ) from exc

        except anthropic.APIError as exc:
            raise ProviderError(error_messages.ERROR["COMPLETION_FAILED"], details = str(exc)) from exc

        texts = [block.text for block in (response.content or []) if getattr(block, "type", None) == "text"]

        answer = "".join(texts)

        if not answer:
            raise ProviderError(error_messages.ERROR["COMPLETION_EMPTY"], details = repr(response))

        return answer



    # ── Private ────────────────────────────────────────────────────────────────
    @staticmethod
    def _split_messages(messages: List[Dict[str, str]]) -> Tuple[str, List[Dict[str, str]]]:
        """
        Return (system_prompt, conversation) for the Anthropic API.

        System messages seen before the first user/assistant turn form the
        top-level prompt; a later system message is folded into the user
        turn that follows it.
        """
        leading_system = []
        carried_system = []
        turns          = []

        for message in messages:
            role = message.get("role", "user")
            text = message.get("content", "")

            if role == "system":
                (carried_system if turns else leading_system).append(text)
                continue

            if role == "user" and carried_system:
                text = "\n\n".join(carried_system + [text])
                carried_system = []

            if role in ("user", "assistant"):
                turns.append({"role": role, "content": text})

        return "\n\n".join(leading_system), turns
