"""
Search Services Package

Service responsibilities:
  QueryService       — RAG pipeline orchestrator (main entry point)
  DocumentStore      — Postgres/pgvector queries and writes
  RetrievalService   — Similarity search with whole-corpus fallback
  ContextBuilder     — Budgets retrieved sections into the context block
  HistoryService     — Relevant prior conversation turns
  PromptComposer     — System / history / user message assembly
  PersistenceWriter  — Fire-and-forget turn recording
"""

from .document_store import DocumentStore
from .retrieval_service import RetrievalService
from .context_builder import ContextBuilder
from .history_service import HistoryService
from .prompt_composer import PromptComposer
from .persistence_service import PersistenceWriter
from .query_service import QueryService

__all__ = [
    "DocumentStore",
    "RetrievalService",
    "ContextBuilder",
    "HistoryService",
    "PromptComposer",
    "PersistenceWriter",
    "QueryService",
]
