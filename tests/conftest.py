"""Shared fakes and fixtures. Nothing here touches the network or a database."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

import pytest

from vector_search.app import SearchServices, create_app
from vector_search.search.services import (
    ContextBuilder,
    HistoryService,
    PersistenceWriter,
    PromptComposer,
    QueryService,
    RetrievalService,
)
from vector_search.search.types import ConversationTurn, PassageMatch

FIXED_DATE = date(2026, 10, 17)
FAKE_VECTOR = [0.1, 0.2, 0.3]


class FakeStore:
    """In-memory stand-in for DocumentStore that records every call."""

    def __init__(
        self,
        passages: Optional[List[PassageMatch]] = None,
        corpus: str = "",
        sections: Optional[List[str]] = None,
        history: Optional[List[ConversationTurn]] = None,
        fail_insert: bool = False,
    ):
        self.passages = passages or []
        self.corpus = corpus
        self.sections = sections or []
        self.history = history or []
        self.fail_insert = fail_insert
        self.calls: List[tuple] = []
        self.inserted: List[tuple] = []

    def match_passages(self, embedding, threshold, count, min_length):
        self.calls.append(("match_passages", threshold, count, min_length))
        return list(self.passages)

    def combine_all_content(self):
        self.calls.append(("combine_all_content",))
        return self.corpus

    def all_sections(self):
        self.calls.append(("all_sections",))
        return list(self.sections)

    def match_history(self, embedding, limit, threshold=0.0):
        self.calls.append(("match_history", limit, threshold))
        return list(self.history[:limit])

    def recent_history(self, limit):
        self.calls.append(("recent_history", limit))
        return list(self.history[-limit:])

    def insert_turns(self, turns, exchange_id, topic=None):
        self.calls.append(("insert_turns", exchange_id))
        if self.fail_insert:
            raise RuntimeError("connection reset while writing chat_history")
        self.inserted.append((tuple(turns), exchange_id, topic))


class FakeEmbeddingService:
    def __init__(self, vector=None, error: Optional[Exception] = None):
        self.vector = vector or list(FAKE_VECTOR)
        self.error = error
        self.inputs: List[str] = []

    def generate_embedding(self, text, model=None):
        self.inputs.append(text)
        if self.error is not None:
            raise self.error
        return list(self.vector)


class FakeChatService:
    def __init__(self, answer: str = "Milestone 3 is due next Friday.", error: Optional[Exception] = None):
        self.answer = answer
        self.error = error
        self.requests: List[dict] = []

    def generate_response(self, messages, model=None, temperature=0.0, max_tokens=1024):
        self.requests.append({"messages": messages, "temperature": temperature, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.answer


def build_query_service(
    store: FakeStore,
    embedding_service: Optional[FakeEmbeddingService] = None,
    chat_service: Optional[FakeChatService] = None,
    budget: int = 1500,
) -> QueryService:
    return QueryService(
        embedding_service=embedding_service or FakeEmbeddingService(),
        retrieval_service=RetrievalService(store),
        context_builder=ContextBuilder(budget=budget, unit="characters"),
        history_service=HistoryService(store, strategy="similarity"),
        prompt_composer=PromptComposer(),
        chat_service=chat_service or FakeChatService(),
        persistence_writer=PersistenceWriter(store, asynchronous=False),
        clock=lambda: FIXED_DATE,
    )


def build_app(query_service: QueryService):
    services = SearchServices(
        query_service=query_service,
        persistence_writer=query_service.persistence_writer,
    )
    return create_app(
        test_config={"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://"},
        services=services,
    )


@pytest.fixture
def two_passages() -> List[PassageMatch]:
    return [
        PassageMatch(content="Milestone 3 (design review) is due Friday October 23.", similarity=0.91),
        PassageMatch(content="Late submissions lose 10% per day.", similarity=0.82),
    ]
