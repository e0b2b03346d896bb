"""
Service: RetrievalService

Similarity retrieval over documentation sections, with the whole-corpus
fallback used when nothing clears the similarity threshold.

The fallback is never silent: the returned RetrievalResult has
used_fallback=True and a warning is logged, so a fallback answer can be told
apart from a normal answer built on a small context.
"""

# Python Packages
from typing import Sequence

# Types
from ..types import RetrievalResult

# Config
from ..config import search_config

# Logging
from ...config.logging_config import get_logger

logger = get_logger(__name__)


class RetrievalService:
    """
    Runs match_passages() against the store and falls back to
    combine_all_content() on an empty match, or to all_sections() when
    section_fallback is set. Store errors propagate unchanged
    (StoreError / ProviderTimeout); nothing is retried.
    """

    def __init__(self, store, section_fallback: bool = search_config.FALLBACK_ENFORCE_BUDGET):
        self.store = store
        self.section_fallback = section_fallback

    def retrieve(
        self,
        embedding: Sequence[float],
        threshold: float = search_config.MATCH_THRESHOLD,
        count: int = search_config.MATCH_COUNT,
        min_content_length: int = search_config.MIN_CONTENT_LENGTH
    ) -> RetrievalResult:
        """
        Find documentation sections similar to *embedding*.

        Args:
            embedding:          Query embedding.
            threshold:          Minimum similarity; enforced by the store.
            count:              Max sections returned.
            min_content_length: Sections shorter than this are skipped.

        Returns:
            RetrievalResult with the ranked passages, or with the whole
            corpus in fallback_content when no passage matched.
        """
        logger.info(
            f"🔍 Matching sections (threshold={threshold}, count={count}, "
            f"min_length={min_content_length})"
        )

        passages = self.store.match_passages(
            embedding,
            threshold=threshold,
            count=count,
            min_length=min_content_length
        )

        if passages:
            return RetrievalResult(passages=list(passages))

        logger.warning("⚠️  No section cleared the threshold, falling back to the whole corpus")
        if self.section_fallback:
            sections = tuple(self.store.all_sections())
            return RetrievalResult(
                passages=[],
                fallback_content=search_config.PASSAGE_SEPARATOR.join(sections),
                used_fallback=True,
                fallback_sections=sections
            )

        return RetrievalResult(
            passages=[],
            fallback_content=self.store.combine_all_content(),
            used_fallback=True
        )
