"""
vendors/__init__.py
====================
Public surface of the vendors package.

    from ...vendors import get_chat_service       ← switches via AI_PROVIDER in .env
    from ...vendors import get_embedding_service  ← always OpenAI
"""

from .factory import get_chat_service, get_embedding_service

__all__ = ["get_chat_service", "get_embedding_service"]
