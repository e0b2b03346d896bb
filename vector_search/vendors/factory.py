"""
vendors/factory.py — AI Provider Factory
==========================================
Single place that decides which AI provider answers completions.

How to switch providers
------------------------
In your .env file, set:

    AI_PROVIDER=openai       ← GPT models (default)
    AI_PROVIDER=anthropic    ← Claude models

Why embeddings are always OpenAI
----------------------------------
Anthropic does not offer an embedding API, and the stored page_section and
chat_history vectors were produced by the OpenAI embedding model. Switching
embedding models would invalidate every stored vector.
"""

# Constants
from ..base import constants

# Logging
from ..config.logging_config import get_logger

logger = get_logger(__name__)





def get_chat_service(provider: str = None, openai_client = None):
    """
    Return the ChatService for the configured provider.

    Args:
        provider: "openai" or "anthropic" (default: constants.AI_PROVIDER)
        openai_client: Shared OpenAIClient to reuse when provider is openai

    Returns:
        ChatService with a generate_response(messages, temperature, max_tokens) method.

    Raises:
        ValueError: If the provider is not supported.
    """

    provider = (provider or constants.AI_PROVIDER).lower().strip()

    if provider == "anthropic":
        from .anthropic.chat_service import ChatService
        logger.info(f"🤖 LLM Provider: Anthropic ({constants.ANTHROPIC_DEFAULT_MODEL})")
        return ChatService()

    elif provider == "openai":
        from .openai.chat_service import ChatService
        logger.info(f"🤖 LLM Provider: OpenAI ({constants.OPENAI_CHAT_MODEL})")
        return ChatService(client = openai_client)

    else:
        raise ValueError(
            f"Unsupported AI_PROVIDER='{provider}'. "
            f"Allowed values: 'anthropic', 'openai'. "
            f"Check your .env file."
        )


def get_embedding_service(openai_client = None):
    """
    Always returns the OpenAI EmbeddingService.
    """

    from .openai.embedding_service import EmbeddingService
    return EmbeddingService(client = openai_client)
