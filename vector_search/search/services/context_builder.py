"""
Service: ContextBuilder
========================
Turns a RetrievalResult into the context block injected into the prompt,
keeping it under a size budget.

Budget rule
-----------
Passages are taken in the order received (already similarity-ranked). Each
is measured after stripping whitespace; the first passage that would push
the running size past the budget is dropped whole, and so is everything after
it. The context is therefore the longest prefix that fits, and no passage is
ever cut mid-text.

Every included passage is followed by PASSAGE_SEPARATOR ("\\n---\\n"), a
delimiter line consumers can split on. The separator is charged to the
passage it follows, so the measured size of the context text never exceeds
the budget.

Fallback
--------
When retrieval fell back to the whole corpus the text is used verbatim,
without budget enforcement, unless FALLBACK_ENFORCE_BUDGET is set; then the
store's individual sections are budgeted like ranked passages.
"""

# Python Packages
from typing import Callable, List

import tiktoken

# Types
from ..types import PassageMatch, PromptContext, RetrievalResult

# Config
from ..config import search_config

# Logging
from ...config.logging_config import get_logger

logger = get_logger(__name__)


class ContextBuilder:
    """
    Builds PromptContext objects. Stateless apart from the tokenizer,
    which is loaded on first use; safe to reuse across requests.
    """

    UNITS = ("tokens", "characters")

    def __init__(
        self,
        budget: int = search_config.CONTEXT_BUDGET,
        unit: str = search_config.CONTEXT_BUDGET_UNIT,
        separator: str = search_config.PASSAGE_SEPARATOR,
        enforce_fallback_budget: bool = search_config.FALLBACK_ENFORCE_BUDGET
    ):
        if unit not in self.UNITS:
            raise ValueError(f"Unsupported budget unit '{unit}'. Allowed: {self.UNITS}")

        self.budget = budget
        self.unit = unit
        self.separator = separator
        self.enforce_fallback_budget = enforce_fallback_budget
        self._encoding = None


    def measure(self, content: str) -> int:
        """Size of *content* in the configured unit."""
        return self._sizer()(content)


    def assemble(self, retrieval: RetrievalResult, budget: int = None) -> PromptContext:
        """
        Build the context block for one request.

        Args:
            retrieval: Output of RetrievalService.retrieve().
            budget:    Max context size (default: self.budget).

        Returns:
            PromptContext with text, size and the passages that made it in.
        """
        budget = self.budget if budget is None else budget

        if retrieval.used_fallback:
            return self._assemble_fallback(retrieval, budget)

        context = self._assemble_passages(retrieval.passages, budget)

        logger.info(
            f"📦 Context: {len(context.passages)}/{len(retrieval.passages)} sections, "
            f"{context.size}/{budget} {self.unit}"
        )
        return context


    # ── Private ────────────────────────────────────────────────────────────────

    def _assemble_passages(self, passages: List[PassageMatch], budget: int) -> PromptContext:
        context = PromptContext(budget=budget, unit=self.unit)
        measure = self._sizer()
        parts = []

        for passage in passages:
            part = passage.content.strip() + self.separator
            size = measure(part)

            if context.size + size > budget:
                break

            context.size += size
            context.passages.append(passage)
            parts.append(part)

        context.text = "".join(parts)
        return context


    def _assemble_fallback(self, retrieval: RetrievalResult, budget: int) -> PromptContext:
        fallback_content = retrieval.fallback_content or ""

        if not self.enforce_fallback_budget:
            return PromptContext(
                budget=budget,
                unit=self.unit,
                text=fallback_content,
                size=self.measure(fallback_content),
                used_fallback=True
            )

        # Sections come from the store; a corpus joined into one string is
        # treated as a single section rather than re-split.
        if retrieval.fallback_sections is not None:
            raw_sections = retrieval.fallback_sections
        else:
            raw_sections = [fallback_content]

        sections = [
            PassageMatch(content=section, similarity=0.0)
            for section in raw_sections
            if section and section.strip()
        ]

        context = self._assemble_passages(sections, budget)
        context.used_fallback = True
        return context


    def _sizer(self) -> Callable[[str], int]:
        if self.unit == "characters":
            return len

        if self._encoding is None:
            self._encoding = tiktoken.get_encoding(search_config.TOKENIZER_ENCODING)

        encoding = self._encoding
        return lambda content: len(encoding.encode(content))
