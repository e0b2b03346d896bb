""" OpenAI Client Configuration... """

# Python Packages
from openai import OpenAI
from typing import Optional

# Constants
from ...base import constants





class OpenAIClient:
    """
    Builds the OpenAI SDK client used by the embedding and chat services.

    The SDK client is thread-safe, so the app factory builds one and shares
    it between services. Every request is bounded by PROVIDER_TIMEOUT and
    retried at most PROVIDER_MAX_RETRIES times (SDK backoff with jitter).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None
    ):
        self._client = OpenAI(
            api_key = api_key or constants.OPENAI_API_KEY,
            timeout = timeout if timeout is not None else constants.PROVIDER_TIMEOUT,
            max_retries = max_retries if max_retries is not None else constants.PROVIDER_MAX_RETRIES
        )



    @property
    def client(self) -> OpenAI:
        """ Get the OpenAI client instance... """

        return self._client


    def get_client(self) -> OpenAI:
        """Get the OpenAI client instance (alternative method)"""

        return self.client
