"""
Service: HistoryService

Picks the past conversation turns that go into the prompt.

Strategies (HISTORY_STRATEGY):
  similarity → turns whose stored embedding is closest to the query,
               in store order (most similar first, user before assistant
               within one exchange)
  recency    → the latest turns, oldest → newest so the LLM reads them
               in conversation order

When nothing is stored yet the history is a single synthetic user turn
holding the current query, so the message list always has the same shape.
"""

# Python Packages
from typing import List, Sequence

# Types
from ..types import ConversationTurn

# Config
from ..config import search_config

# Logging
from ...config.logging_config import get_logger

logger = get_logger(__name__)


class HistoryService:
    """
    Reads history through the store. Store errors propagate
    (StoreError / ProviderTimeout).
    """

    STRATEGIES = ("similarity", "recency")

    def __init__(
        self,
        store,
        strategy: str = search_config.HISTORY_STRATEGY,
        threshold: float = search_config.HISTORY_MATCH_THRESHOLD
    ):
        if strategy not in self.STRATEGIES:
            raise ValueError(f"Unsupported history strategy '{strategy}'. Allowed: {self.STRATEGIES}")

        self.store = store
        self.strategy = strategy
        self.threshold = threshold

    def fetch_relevant_history(
        self,
        embedding: Sequence[float],
        query: str,
        limit: int = search_config.HISTORY_LIMIT
    ) -> List[ConversationTurn]:
        """
        Return up to *limit* prior turns for the prompt.

        Args:
            embedding: Query embedding (used by the similarity strategy).
            query:     Current query, used for the synthetic turn.
            limit:     Max turns returned.

        Returns:
            List of ConversationTurn; never empty.
        """
        if self.strategy == "recency":
            turns = self.store.recent_history(limit)
        else:
            turns = self.store.match_history(embedding, limit, threshold=self.threshold)

        if not turns:
            logger.debug("No stored history, using the current query as the only turn")
            return [ConversationTurn(role="user", content=query)]

        logger.info(f"🗂️  Loaded {len(turns)} history turns ({self.strategy})")
        return list(turns)
