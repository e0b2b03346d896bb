"""
Service: PersistenceWriter

Records each answered exchange in chat_history so later questions can
find it through HistoryService.

Best-effort by contract: the answer is already computed when this runs, so
a failed write is logged as a warning and never reaches the caller. With
PERSIST_ASYNC the write runs on a background thread inside its own Flask
app context, off the response path.
"""

# Python Packages
import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Sequence

from flask import current_app, has_app_context

# Types
from ..types import ConversationTurn

# Config
from ..config import search_config

# Logging
from ...config.logging_config import get_logger

logger = get_logger(__name__)


class PersistenceWriter:

    def __init__(
        self,
        store,
        asynchronous: bool = search_config.PERSIST_ASYNC,
        max_workers: int = search_config.PERSIST_MAX_WORKERS
    ):
        self.store = store
        self.asynchronous = asynchronous
        self._executor = (
            ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="persist-turn")
            if asynchronous else None
        )

    def record_turn(
        self,
        query: str,
        response: str,
        embedding: Sequence[float],
        topic_label: Optional[str] = None
    ) -> Future:
        """
        Dispatch the write of one exchange (user query + assistant answer).

        Returns:
            Future resolving to True when written, False when the write
            failed. In synchronous mode the future is already resolved.
        """
        vector = tuple(embedding) if embedding else None
        turns = (
            ConversationTurn(role="user", content=query, embedding=vector),
            ConversationTurn(role="assistant", content=response, embedding=vector),
        )
        exchange_id = str(uuid.uuid4())
        app = current_app._get_current_object() if has_app_context() else None

        if self._executor is None:
            future = Future()
            future.set_result(self._write(app, turns, exchange_id, topic_label))
            return future

        return self._executor.submit(self._write, app, turns, exchange_id, topic_label)

    def shutdown(self, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)

    # ── Private ────────────────────────────────────────────────────────────────

    def _write(self, app, turns, exchange_id: str, topic_label: Optional[str]) -> bool:
        try:
            if app is not None and not has_app_context():
                with app.app_context():
                    self.store.insert_turns(turns, exchange_id=exchange_id, topic=topic_label)
            else:
                self.store.insert_turns(turns, exchange_id=exchange_id, topic=topic_label)

        except Exception as exc:
            logger.warning(f"⚠️  Could not record exchange {exchange_id}: {exc}")
            return False

        logger.debug(f"✅ Recorded exchange {exchange_id}")
        return True
