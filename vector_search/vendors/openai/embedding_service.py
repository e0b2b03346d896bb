""" OpenAI Embedding Service... """

# Python Packages
from typing import List, Optional
import openai

# Client
from .openai_client import OpenAIClient

# Constants
from ...base import constants

# Exceptions & messages
from ...util.exceptions import UserError, ProviderError, ProviderTimeout
from ...util import messages

# Logging
from ...config.logging_config import get_logger

logger = get_logger(__name__)





class EmbeddingService:
    """ Service for generating embeddings using OpenAI... """

    def __init__(self, client: Optional[OpenAIClient] = None, model: Optional[str] = None):
        """
        Args:
            client: Shared OpenAIClient (a new one is built when omitted)
            model: Embedding model (default: constants.OPENAI_EMBEDDING_MODEL)
        """

        self.client = (client or OpenAIClient()).get_client()
        self.default_model = model or constants.OPENAI_EMBEDDING_MODEL



    def generate_embedding(self, text: str, model: str = None) -> List[float]:
        """
        Generate embedding for a single text.

        Line breaks hurt embedding quality, so every "\\n" is sent as a space.
        No retries beyond the SDK transport retry; callers decide.

        Args:
            text: Text to embed (must not be empty)
            model: OpenAI embedding model (default: self.default_model)

        Returns:
            List of floats representing the embedding

        Raises:
            UserError: text is empty
            ProviderTimeout: the call exceeded PROVIDER_TIMEOUT
            ProviderError: non-success status or malformed payload
        """

        if not text or not text.strip():
            raise UserError(messages.ERROR["EMPTY_EMBEDDING_INPUT"])

        normalized = text.replace("\n", " ")

        try:
            response = self.client.embeddings.create(
                model = model or self.default_model,
                input = normalized
            )

        except openai.APITimeoutError as exc:
            raise ProviderTimeout(messages.ERROR["EMBEDDING_FAILED"], details = str(exc)) from exc

        except openai.APIStatusError as exc:
            raise ProviderError(
                messages.ERROR["EMBEDDING_FAILED"],
                details = {"status": exc.status_code, "body": exc.body}
            ) from exc

        except openai.APIError as exc:
            raise ProviderError(messages.ERROR["EMBEDDING_FAILED"], details = str(exc)) from exc

        data = getattr(response, "data", None)
        embedding = getattr(data[0], "embedding", None) if data else None

        if not embedding:
            raise ProviderError(messages.ERROR["EMBEDDING_MALFORMED"], details = repr(response))

        logger.debug(f"🧮 Embedded query ({len(embedding)} dims)")
        return list(embedding)



    def get_embedding_dimension(self, model: str = None) -> int:
        """
        Get the dimension of embeddings for a given model

        Args:
            model: OpenAI embedding model

        Returns:
            Embedding dimension
        """

        model = model or self.default_model

        # Model dimension mapping
        dimensions = {
            "text-embedding-3-small": 1536,
            "text-embedding-3-large": 3072,
            "text-embedding-ada-002": 1536
        }

        return dimensions.get(model, constants.EMBEDDING_DIMENSION)
