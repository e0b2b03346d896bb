"""
vendors/anthropic/anthropic_client.py
======================================
Anthropic SDK client builder.
Reads ANTHROPIC_API_KEY from environment via base/constants.py.
"""

# Python Packages
from anthropic import Anthropic
from typing import Optional

# Constants
from ...base import constants





class AnthropicClient:
    """
    Wraps one Anthropic SDK client, bounded by PROVIDER_TIMEOUT and
    PROVIDER_MAX_RETRIES. Built once by the app factory and shared.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None
    ):
        self._client = Anthropic(
            api_key     = api_key or constants.ANTHROPIC_API_KEY,
            timeout     = timeout if timeout is not None else constants.PROVIDER_TIMEOUT,
            max_retries = max_retries if max_retries is not None else constants.PROVIDER_MAX_RETRIES
        )


    def get_client(self) -> Anthropic:
        return self._client
