"""
Service: DocumentStore

Postgres + pgvector adapter for everything the pipeline reads or writes:

  match_passages()      cosine-similarity search over page_section
  combine_all_content() whole-corpus text for the no-match fallback
  all_sections()        the same corpus, one entry per section
  match_history()       cosine-similarity search over chat_history
  recent_history()      latest chat_history turns
  insert_turns()        append turns to chat_history

Key design decisions:
  - Every query rolls back the session on failure so a failed statement
    never poisons the session for the rest of the request.
  - Failures raise StoreError. A statement cancelled by statement_timeout
    (SQLSTATE 57014) raises ProviderTimeout instead.
  - Similarity is 1 - cosine distance (pgvector `<=>`).
"""

# Python Packages
from typing import List, Sequence, Optional

# Database
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError, OperationalError
from ...config.database import db

# Models
from ...models.page_section import PageSection
from ...models.chat_turn import ChatTurn

# Types
from ..types import PassageMatch, ConversationTurn, ROLES

# Config
from ..config import search_config

# Exceptions & messages
from ...util.exceptions import StoreError, ProviderTimeout
from ...util import messages

# Logging
from ...config.logging_config import get_logger

logger = get_logger(__name__)


QUERY_CANCELED_SQLSTATE = "57014"


def to_vector_literal(embedding: Sequence[float]) -> str:
    """Render an embedding in pgvector's text input format."""
    return "[" + ",".join(map(str, embedding)) + "]"


class DocumentStore:
    """
    Store capability used by the retrieval, history and persistence services.
    Holds no per-request state; safe to share across requests.
    """

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session or db.session

    # ── Page Sections ──────────────────────────────────────────────────────────

    def match_passages(
        self,
        embedding: Sequence[float],
        threshold: float,
        count: int,
        min_length: int
    ) -> List[PassageMatch]:
        """
        Return up to *count* sections with similarity above *threshold* and
        content at least *min_length* characters, most similar first.
        """
        sql = text(f"""
            SELECT
                ps.content,
                1 - (ps.embedding <=> CAST(:emb AS vector)) AS similarity
            FROM {PageSection.__table__.fullname} ps
            WHERE ps.embedding IS NOT NULL
              AND length(ps.content) >= :min_length
              AND (1 - (ps.embedding <=> CAST(:emb AS vector))) > :threshold
            ORDER BY ps.embedding <=> CAST(:emb AS vector)
            LIMIT :count
        """)

        rows = self._fetch(sql, {
            "emb": to_vector_literal(embedding),
            "threshold": threshold,
            "count": count,
            "min_length": min_length
        }, messages.ERROR["MATCH_SECTIONS_FAILED"])

        logger.info(f"✅ Matched {len(rows)} page sections")
        return [PassageMatch(content=row[0], similarity=float(row[1])) for row in rows]

    def combine_all_content(self) -> str:
        """All section content in id order, joined by the passage separator."""
        sql = text(f"""
            SELECT string_agg(ps.content, :separator ORDER BY ps.id)
            FROM {PageSection.__table__.fullname} ps
        """)

        rows = self._fetch(
            sql,
            {"separator": search_config.PASSAGE_SEPARATOR},
            messages.ERROR["COMBINE_CONTENT_FAILED"]
        )
        return (rows[0][0] if rows else None) or ""

    def all_sections(self) -> List[str]:
        """Every section's content in id order, one entry per section."""
        sql = text(f"""
            SELECT ps.content
            FROM {PageSection.__table__.fullname} ps
            ORDER BY ps.id
        """)

        rows = self._fetch(sql, {}, messages.ERROR["COMBINE_CONTENT_FAILED"])
        return [row[0] for row in rows if row[0] is not None]

    # ── Chat History ───────────────────────────────────────────────────────────

    def match_history(
        self,
        embedding: Sequence[float],
        limit: int,
        threshold: float = 0.0
    ) -> List[ConversationTurn]:
        """
        Most similar past turns first. Turns of one exchange share an
        embedding, so the turn_id tiebreak keeps user before assistant.
        """
        sql = text(f"""
            SELECT ch.role, ch.content
            FROM {ChatTurn.__table__.fullname} ch
            WHERE ch.embedding IS NOT NULL
              AND (1 - (ch.embedding <=> CAST(:emb AS vector))) > :threshold
            ORDER BY ch.embedding <=> CAST(:emb AS vector), ch.turn_id
            LIMIT :limit
        """)

        rows = self._fetch(sql, {
            "emb": to_vector_literal(embedding),
            "threshold": threshold,
            "limit": limit
        }, messages.ERROR["MATCH_HISTORY_FAILED"])

        return self._to_turns(rows)

    def recent_history(self, limit: int) -> List[ConversationTurn]:
        """The *limit* latest turns, oldest first."""
        sql = text(f"""
            SELECT role, content FROM (
                SELECT ch.role, ch.content, ch.turn_id
                FROM {ChatTurn.__table__.fullname} ch
                ORDER BY ch.turn_id DESC
                LIMIT :limit
            ) latest
            ORDER BY turn_id
        """)

        rows = self._fetch(sql, {"limit": limit}, messages.ERROR["MATCH_HISTORY_FAILED"])
        return self._to_turns(rows)

    def insert_turns(
        self,
        turns: Sequence[ConversationTurn],
        exchange_id: str,
        topic: Optional[str] = None
    ) -> None:
        """Append *turns* in order under one exchange id and commit."""
        try:
            for turn in turns:
                self.session.add(ChatTurn(
                    exchange_id=exchange_id,
                    role=turn.role,
                    content=turn.content,
                    topic=topic,
                    embedding=list(turn.embedding) if turn.embedding else None
                ))
            self.session.commit()

        except SQLAlchemyError as exc:
            self.session.rollback()
            raise self._map_error(messages.ERROR["INSERT_TURN_FAILED"], exc) from exc

    # ── Private ────────────────────────────────────────────────────────────────

    def _fetch(self, sql, params: dict, failure_message: str) -> list:
        try:
            return self.session.execute(sql, params).fetchall()

        except SQLAlchemyError as exc:
            self.session.rollback()
            raise self._map_error(failure_message, exc) from exc

    @staticmethod
    def _to_turns(rows) -> List[ConversationTurn]:
        turns = []
        for role, content in rows:
            if role not in ROLES:
                logger.warning(f"⚠️  Skipping chat_history row with unknown role '{role}'")
                continue
            turns.append(ConversationTurn(role=role, content=content))
        return turns

    @staticmethod
    def _map_error(failure_message: str, exc: SQLAlchemyError):
        pgcode = getattr(getattr(exc, "orig", None), "pgcode", None)

        if isinstance(exc, OperationalError) and pgcode == QUERY_CANCELED_SQLSTATE:
            return ProviderTimeout(failure_message, details=str(exc))

        return StoreError(failure_message, details=str(exc))
