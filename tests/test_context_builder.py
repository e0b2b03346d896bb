"""Tests for ContextBuilder budgeting."""

from __future__ import annotations

import pytest

from vector_search.search.services import ContextBuilder
from vector_search.search.types import PassageMatch, RetrievalResult

SEPARATOR = "\n---\n"


class WordEncoding:
    """Tokenizer stand-in: one token per whitespace-separated word."""

    def encode(self, content: str) -> list:
        return content.split()


def _passages(*contents: str) -> list:
    return [PassageMatch(content=c, similarity=0.9 - i * 0.01) for i, c in enumerate(contents)]


def _ranked(*contents: str) -> RetrievalResult:
    return RetrievalResult(passages=_passages(*contents))


def _token_builder(budget: int, **kwargs) -> ContextBuilder:
    builder = ContextBuilder(budget=budget, unit="tokens", **kwargs)
    builder._encoding = WordEncoding()
    return builder


class TestBudgetLaw:
    def test_all_passages_fit(self):
        builder = ContextBuilder(budget=100, unit="characters")
        context = builder.assemble(_ranked("alpha", "beta"))

        assert context.text == "alpha" + SEPARATOR + "beta" + SEPARATOR
        assert context.size == len(context.text) == 19
        assert len(context.passages) == 2
        assert context.used_fallback is False

    def test_separator_counts_against_budget(self):
        builder = ContextBuilder(budget=10, unit="characters")
        context = builder.assemble(_ranked("12345", "67890"))

        assert context.text == "12345" + SEPARATOR
        assert builder.measure(context.text) == context.size == 10

    def test_overflowing_passage_is_dropped_whole(self):
        builder = ContextBuilder(budget=15, unit="characters")
        context = builder.assemble(_ranked("12345", "1234567", "12"))

        # "12" would fit on its own, but only a prefix is ever kept
        assert context.text == "12345" + SEPARATOR
        assert context.size == 10
        assert [p.content for p in context.passages] == ["12345"]

    def test_exact_budget_is_allowed(self):
        builder = ContextBuilder(budget=20, unit="characters")
        context = builder.assemble(_ranked("12345", "67890", "x"))

        assert context.size == 20
        assert len(context.passages) == 2

    def test_first_passage_too_large_gives_empty_context(self):
        builder = ContextBuilder(budget=3, unit="characters")
        context = builder.assemble(_ranked("too long"))

        assert context.text == ""
        assert context.size == 0
        assert context.passages == []

    @pytest.mark.parametrize(
        "sizes,budget",
        [
            ([4, 4, 4], 27),
            ([4, 4, 4], 26),
            ([1, 20, 1], 10),
            ([7], 0),
            ([3, 3, 3, 3, 3], 24),
        ],
    )
    def test_longest_fitting_prefix(self, sizes, budget):
        contents = [chr(ord("a") + i) * size for i, size in enumerate(sizes)]
        builder = ContextBuilder(budget=budget, unit="characters")
        context = builder.assemble(_ranked(*contents))

        expected, running = [], 0
        for content in contents:
            if running + len(content + SEPARATOR) > budget:
                break
            running += len(content + SEPARATOR)
            expected.append(content)

        assert builder.measure(context.text) == context.size <= budget
        assert [p.content for p in context.passages] == expected
        assert [part for part in context.text.split(SEPARATOR) if part] == expected

    def test_passages_are_measured_after_strip(self):
        builder = ContextBuilder(budget=10, unit="characters")
        context = builder.assemble(_ranked("  abcde \n"))

        assert context.text == "abcde" + SEPARATOR
        assert context.size == 10

    def test_explicit_budget_overrides_default(self):
        builder = ContextBuilder(budget=1000, unit="characters")
        context = builder.assemble(_ranked("abc", "def"), budget=8)

        assert context.budget == 8
        assert len(context.passages) == 1


class TestTokenBudget:
    # With WordEncoding each passage costs its word count plus one for "---".

    def test_passages_fit_in_tokens(self):
        builder = _token_builder(budget=6)
        context = builder.assemble(_ranked("due on friday", "late policy"))

        assert [p.content for p in context.passages] == ["due on friday"]
        assert context.size == 4
        assert context.unit == "tokens"

    def test_overflow_drops_rest_in_tokens(self):
        builder = _token_builder(budget=7)
        context = builder.assemble(_ranked("one two", "three four five six", "seven"))

        # "seven" would fit on its own, but the prefix stops at the overflow
        assert [p.content for p in context.passages] == ["one two"]
        assert context.text == "one two" + SEPARATOR

    def test_measured_text_never_exceeds_token_budget(self):
        builder = _token_builder(budget=9)
        context = builder.assemble(_ranked("a b", "c d", "e f", "g h"))

        assert [p.content for p in context.passages] == ["a b", "c d", "e f"]
        assert builder.measure(context.text) == context.size == 9

    def test_encoding_loaded_once_and_reused(self, monkeypatch):
        from vector_search.search.services import context_builder as module

        loads = []

        def fake_get_encoding(name):
            loads.append(name)
            return WordEncoding()

        monkeypatch.setattr(module.tiktoken, "get_encoding", fake_get_encoding)
        builder = ContextBuilder(budget=50, unit="tokens")

        builder.assemble(_ranked("first question"))
        builder.assemble(_ranked("second question"))

        assert loads == ["cl100k_base"]

    def test_real_tokenizer_respects_budget(self):
        pytest.importorskip("tiktoken")
        builder = ContextBuilder(budget=20, unit="tokens")
        try:
            context = builder.assemble(_ranked(
                "Milestone 3 is due Friday.",
                "Late submissions lose ten percent per day.",
            ))
        except Exception as exc:  # encoding files need a download on first use
            pytest.skip(f"cl100k_base unavailable: {exc}")

        assert context.size <= 20
        assert len(context.passages) >= 1
        assert context.size == sum(builder.measure(p.content + SEPARATOR) for p in context.passages)


class TestFallback:
    def test_fallback_used_verbatim(self):
        corpus = "  Syllabus\n---\nWeek 1: kickoff  \n"
        builder = ContextBuilder(budget=5, unit="characters")
        context = builder.assemble(
            RetrievalResult(passages=[], fallback_content=corpus, used_fallback=True)
        )

        assert context.text == corpus
        assert context.used_fallback is True
        assert context.size == len(corpus)

    def test_fallback_budget_enforced_on_store_sections(self):
        sections = ("Syllabus", "Week 1: kickoff", "Week 2")
        builder = ContextBuilder(budget=20, unit="characters", enforce_fallback_budget=True)
        context = builder.assemble(RetrievalResult(
            passages=[],
            fallback_content=SEPARATOR.join(sections),
            used_fallback=True,
            fallback_sections=sections,
        ))

        assert context.text == "Syllabus" + SEPARATOR
        assert context.used_fallback is True
        assert builder.measure(context.text) == context.size <= 20

    def test_section_with_horizontal_rule_is_kept_whole(self):
        section_a = "Intro" + SEPARATOR + "Details of section A"
        sections = (section_a, "Section B")
        builder = ContextBuilder(budget=40, unit="characters", enforce_fallback_budget=True)
        context = builder.assemble(RetrievalResult(
            passages=[],
            fallback_content=SEPARATOR.join(sections),
            used_fallback=True,
            fallback_sections=sections,
        ))

        assert context.text == section_a + SEPARATOR
        assert [p.content for p in context.passages] == [section_a]

    def test_section_with_horizontal_rule_dropped_rather_than_cut(self):
        sections = ("Intro" + SEPARATOR + "Details of section A", "Section B")
        builder = ContextBuilder(budget=6, unit="characters", enforce_fallback_budget=True)
        context = builder.assemble(RetrievalResult(
            passages=[],
            fallback_content=SEPARATOR.join(sections),
            used_fallback=True,
            fallback_sections=sections,
        ))

        assert context.text == ""
        assert context.passages == []

    def test_joined_corpus_without_sections_is_not_resplit(self):
        corpus = "Intro" + SEPARATOR + "Details"
        builder = ContextBuilder(budget=100, unit="characters", enforce_fallback_budget=True)
        context = builder.assemble(
            RetrievalResult(passages=[], fallback_content=corpus, used_fallback=True)
        )

        assert [p.content for p in context.passages] == [corpus]

    def test_missing_fallback_content_is_empty(self):
        builder = ContextBuilder(budget=5, unit="characters")
        context = builder.assemble(RetrievalResult(passages=[], used_fallback=True))

        assert context.text == ""


class TestConfiguration:
    def test_unknown_unit_rejected(self):
        with pytest.raises(ValueError):
            ContextBuilder(unit="words")

    def test_character_measure(self):
        assert ContextBuilder(unit="characters").measure("hello") == 5
