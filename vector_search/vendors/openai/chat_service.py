"""OpenAI Chat/Completion Service"""
from typing import List, Dict, Optional

import openai

from .openai_client import OpenAIClient
from ...base import constants
from ...util.exceptions import ProviderError, ProviderTimeout
from ...util import messages as error_messages


class ChatService:
    """Service for chat completions using OpenAI"""

    def __init__(self, client: Optional[OpenAIClient] = None, model: Optional[str] = None):
        """Initialize chat service"""
        self.client = (client or OpenAIClient()).get_client()
        self.default_model = model or constants.OPENAI_CHAT_MODEL

    def generate_response(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.0,
        max_tokens: int = 1024
    ) -> str:
        """
        Generate a chat completion response. Streaming is off: the whole
        answer is awaited and returned as one string.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: OpenAI model to use
            temperature: Sampling temperature (0-2)
            max_tokens: Maximum tokens in response

        Returns:
            Generated response text

        Raises:
            ProviderTimeout: the call exceeded PROVIDER_TIMEOUT
            ProviderError: non-success status, no choices or empty content
        """
        try:
            response = self.client.chat.completions.create(
                model=model or self.default_model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
                stream=False
            )
        except openai.APITimeoutError as exc:
            raise ProviderTimeout(error_messages.ERROR["COMPLETION_FAILED"], details=str(exc)) from exc
        except openai.APIStatusError as exc:
            raise ProviderError(
                error_messages.ERROR["COMPLETION_FAILED"],
                details={"status": exc.status_code, "body": exc.body}
            ) from exc
        except openai.APIError as exc:
            raise ProviderError(error_messages.ERROR["COMPLETION_FAILED"], details=str(exc)) from exc

        if not response.choices:
            raise ProviderError(error_messages.ERROR["COMPLETION_EMPTY"], details=repr(response))

        content = response.choices[0].message.content
        if not content:
            raise ProviderError(error_messages.ERROR["COMPLETION_EMPTY"], details=repr(response))

        return content
