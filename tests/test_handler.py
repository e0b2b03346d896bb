"""End-to-end tests for the HTTP surface, with fake providers and store."""

from __future__ import annotations

import logging

import pytest

from conftest import (
    FakeChatService,
    FakeEmbeddingService,
    FakeStore,
    build_app,
    build_query_service,
)
from vector_search.util.exceptions import ProviderError, ProviderTimeout

GENERIC = {"error": "There was an error processing your request"}


def _client(store, **kwargs):
    return build_app(build_query_service(store, **kwargs)).test_client()


class TestSuccess:
    def test_answer_is_plain_text_with_cors(self, two_passages):
        client = _client(FakeStore(passages=two_passages))
        response = client.get("/vector-search", query_string={"query": "What is due next week?"})

        assert response.status_code == 200
        assert response.mimetype == "text/plain"
        assert response.get_data(as_text=True) == "Milestone 3 is due next Friday."
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert "content-type" in response.headers["Access-Control-Allow-Headers"]

    def test_name_parameter_reaches_prompt(self, two_passages):
        chat = FakeChatService()
        client = _client(FakeStore(passages=two_passages), chat_service=chat)
        client.get("/vector-search", query_string={"query": "q", "name": "CS 499"})

        assert "CS 499" in chat.requests[0]["messages"][0]["content"]

    def test_fallback_still_answers(self):
        store = FakeStore(passages=[], corpus="Syllabus\n---\nSchedule")
        chat = FakeChatService()
        response = _client(store, chat_service=chat).get("/vector-search", query_string={"query": "Anything?"})

        assert response.status_code == 200
        assert [c[0] for c in store.calls].count("combine_all_content") == 1
        assert "Syllabus\n---\nSchedule" in chat.requests[0]["messages"][-1]["content"]

    def test_persistence_failure_keeps_200(self, two_passages):
        response = _client(FakeStore(passages=two_passages, fail_insert=True)).get(
            "/vector-search", query_string={"query": "q"}
        )

        assert response.status_code == 200


class TestUserErrors:
    @pytest.mark.parametrize("query_string", [{}, {"query": ""}, {"query": "   "}])
    def test_missing_query_is_400(self, query_string):
        embedder = FakeEmbeddingService()
        client = _client(FakeStore(), embedding_service=embedder)
        response = client.get("/vector-search", query_string=query_string)

        assert response.status_code == 400
        assert response.get_json() == {"error": "Missing query in request data"}
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert embedder.inputs == []


class TestProviderErrors:
    def test_embedding_failure_is_generic_500(self, caplog):
        payload = {"status": 503, "body": {"error": "upstream secret-diagnostic-token"}}
        embedder = FakeEmbeddingService(
            error=ProviderError("Failed to create embedding for question", details=payload)
        )
        client = _client(FakeStore(), embedding_service=embedder)

        with caplog.at_level(logging.ERROR):
            response = client.get("/vector-search", query_string={"query": "What is due?"})

        assert response.status_code == 500
        assert response.get_json() == GENERIC
        assert "secret-diagnostic-token" not in response.get_data(as_text=True)
        assert any("secret-diagnostic-token" in r.getMessage() for r in caplog.records)

    def test_empty_completion_is_generic_500(self, two_passages):
        chat = FakeChatService(error=ProviderError("Completion provider returned no choices"))
        response = _client(FakeStore(passages=two_passages), chat_service=chat).get(
            "/vector-search", query_string={"query": "q"}
        )

        assert response.status_code == 500
        assert response.get_json() == GENERIC

    def test_timeout_is_504(self, two_passages):
        chat = FakeChatService(error=ProviderTimeout("Failed to generate completion", details="read timeout"))
        response = _client(FakeStore(passages=two_passages), chat_service=chat).get(
            "/vector-search", query_string={"query": "q"}
        )

        assert response.status_code == 504
        assert "read timeout" not in response.get_data(as_text=True)

    def test_unexpected_error_is_generic_500(self, two_passages):
        chat = FakeChatService(error=RuntimeError("Traceback: internal detail"))
        response = _client(FakeStore(passages=two_passages), chat_service=chat).get(
            "/vector-search", query_string={"query": "q"}
        )

        assert response.status_code == 500
        assert response.get_json() == GENERIC


class TestPreflightAndHealth:
    def test_options_returns_ok_with_cors(self):
        response = _client(FakeStore()).options("/vector-search")

        assert response.status_code == 200
        assert response.get_data(as_text=True) == "ok"
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_health(self):
        response = _client(FakeStore()).get("/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "ok"}


class TestAppFactory:
    def test_persistence_writer_shutdown_registered(self, monkeypatch):
        from vector_search import app as app_module

        registered = []
        monkeypatch.setattr(app_module.atexit, "register", registered.append)
        query_service = build_query_service(FakeStore())
        build_app(query_service)

        assert registered == [query_service.persistence_writer.shutdown]
