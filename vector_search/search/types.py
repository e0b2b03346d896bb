"""
Request-scoped value types shared by the search services.

Everything here lives for one request only. Turns are frozen because a
persisted turn is never edited.
"""

# Python Packages
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


EmbeddingVector = List[float]

ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class PassageMatch:
    """A corpus section returned by similarity search."""

    content: str
    similarity: float


@dataclass(frozen=True)
class ConversationTurn:
    """One role-tagged message, either stored history or a composed prompt line."""

    role: str
    content: str
    embedding: Optional[Tuple[float, ...]] = None

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Unknown role '{self.role}'")

    def to_message(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class RetrievalResult:
    """
    Outcome of similarity retrieval.

    used_fallback is True when no section cleared the threshold and
    fallback_content holds the whole-corpus text instead. fallback_sections
    is set when the corpus was fetched section by section.
    """

    passages: List[PassageMatch]
    fallback_content: Optional[str] = None
    used_fallback: bool = False
    fallback_sections: Optional[Tuple[str, ...]] = None


@dataclass
class PromptContext:
    """Context text accumulated under a size budget."""

    budget: int
    unit: str
    text: str = ""
    size: int = 0
    passages: List[PassageMatch] = field(default_factory=list)
    used_fallback: bool = False


@dataclass(frozen=True)
class ComposedPrompt:
    """Messages in send order: system, history, final user turn."""

    turns: Tuple[ConversationTurn, ...]

    def to_messages(self) -> List[Dict[str, str]]:
        return [turn.to_message() for turn in self.turns]


class PipelineState(str, Enum):
    VALIDATING = "validating"
    EMBEDDING = "embedding"
    RETRIEVING = "retrieving"
    COMPOSING = "composing"
    COMPLETING = "completing"
    PERSISTING = "persisting"
    RESPONDING = "responding"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class QueryResult:
    """What the pipeline hands back to the controller."""

    answer: str
    state: PipelineState
    used_fallback: bool
    passages_used: int
    context_size: int
