"""
Query Service
Orchestrates the RAG pipeline:
    validate → embed → retrieve (+ fallback) → assemble context → history
    → compose → complete → persist (fire-and-forget) → respond

States follow PipelineState. Any step before PERSISTING may end in FAILED,
and the error propagates to the handler unchanged (AppException) or wrapped
in InternalError (anything else). Persistence never fails the request.

Steps run strictly in order; each needs the previous step's output.
"""

# Python Packages
from datetime import date, datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

# Types
from ..types import PipelineState, QueryResult

# Validations
from ..validations import SearchValidation

# Config
from ..config import search_config, llm_config

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import AppException, InternalError

# Logging
from ...config.logging_config import get_logger

logger = get_logger(__name__)


def today() -> date:
    return datetime.now(ZoneInfo(constants.APP_TIMEZONE)).date()


class QueryService:
    """
    Main orchestrator for the RAG pipeline.
    Every collaborator is injected; the service keeps no per-request state.
    """

    def __init__(
        self,
        embedding_service,
        retrieval_service,
        context_builder,
        history_service,
        prompt_composer,
        chat_service,
        persistence_writer,
        clock: Callable[[], date] = today,
        history_limit: int = search_config.HISTORY_LIMIT,
        temperature: float = llm_config.COMPLETION_TEMPERATURE,
        max_tokens: int = llm_config.COMPLETION_MAX_TOKENS
    ):
        self.embedding_service = embedding_service
        self.retrieval_service = retrieval_service
        self.context_builder = context_builder
        self.history_service = history_service
        self.prompt_composer = prompt_composer
        self.chat_service = chat_service
        self.persistence_writer = persistence_writer
        self.clock = clock
        self.history_limit = history_limit
        self.temperature = temperature
        self.max_tokens = max_tokens


    def answer_question(self, query: Optional[str], topic_label: Optional[str] = None) -> QueryResult:
        """
        Answer a question using the full RAG pipeline.

        Args:
            query: Raw question text from the caller.
            topic_label: Optional topic used only for prompt phrasing.

        Returns:
            QueryResult with the answer and retrieval diagnostics.

        Raises:
            UserError: query missing or blank (before any external call).
            ProviderError / StoreError / ProviderTimeout: a step failed.
            InternalError: anything unexpected.
        """
        state = PipelineState.VALIDATING

        try:
            query = SearchValidation.validate_query(query)
            logger.info(f"❓ Question: {query}")

            state = self._advance(state, PipelineState.EMBEDDING)
            embedding = self.embedding_service.generate_embedding(query)

            state = self._advance(state, PipelineState.RETRIEVING)
            retrieval = self.retrieval_service.retrieve(embedding)
            context = self.context_builder.assemble(retrieval)
            history = self.history_service.fetch_relevant_history(
                embedding, query = query, limit = self.history_limit
            )

            state = self._advance(state, PipelineState.COMPOSING)
            prompt = self.prompt_composer.compose(
                context_text = context.text,
                history = history,
                query = query,
                topic_label = topic_label,
                current_date = self.clock()
            )

            state = self._advance(state, PipelineState.COMPLETING)
            answer = self.chat_service.generate_response(
                messages = prompt.to_messages(),
                temperature = self.temperature,
                max_tokens = self.max_tokens
            )

        except AppException:
            logger.debug(f"Pipeline {state.value} → {PipelineState.FAILED.value}")
            raise

        except Exception as error:
            logger.debug(f"Pipeline {state.value} → {PipelineState.FAILED.value}")
            raise InternalError(details = f"{state.value}: {error!r}") from error

        state = self._advance(state, PipelineState.PERSISTING)
        try:
            self.persistence_writer.record_turn(query, answer, embedding, topic_label = topic_label)
        except Exception as error:
            logger.warning(f"⚠️  Persistence dispatch failed, answer still returned: {error}")

        state = self._advance(state, PipelineState.RESPONDING)
        result = QueryResult(
            answer = answer,
            state = PipelineState.SUCCESS,
            used_fallback = context.used_fallback,
            passages_used = len(context.passages),
            context_size = context.size
        )

        self._advance(state, PipelineState.SUCCESS)
        return result


    # ── Private ────────────────────────────────────────────────────────────────

    @staticmethod
    def _advance(current: PipelineState, target: PipelineState) -> PipelineState:
        logger.debug(f"Pipeline {current.value} → {target.value}")
        return target
