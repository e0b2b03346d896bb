"""
Service: PromptComposer
========================
Builds the message sequence sent to the completion provider:

    [system]  versioned template + topic label + today's date
    [history] role-tagged prior turns, unchanged
    [user]    context sections + the question + answer-format instruction

Pure string assembly: no I/O and no clock reads (the caller passes the
date), so identical inputs always give an identical ComposedPrompt.
"""

# Python Packages
from datetime import date
from typing import Dict, Sequence

# Types
from ..types import ComposedPrompt, ConversationTurn

# Config
from ..config import prompts


def format_prompt_date(current_date: date) -> str:
    """Render a date as "<MONTH_UPPERCASE> <DAY>", e.g. "OCTOBER 17"."""
    month_name = (
        "JANUARY", "FEBRUARY", "MARCH", "APRIL", "MAY", "JUNE", "JULY",
        "AUGUST", "SEPTEMBER", "OCTOBER", "NOVEMBER", "DECEMBER",
    )[current_date.month - 1]
    return f"{month_name} {current_date.day}"


class PromptComposer:

    def __init__(
        self,
        templates: Dict[str, str] = None,
        default_topic_label: str = prompts.DEFAULT_TOPIC_LABEL,
        version: str = prompts.PROMPT_TEMPLATE_VERSION
    ):
        if templates is None:
            if version not in prompts.PROMPT_TEMPLATES:
                raise ValueError(
                    f"Unknown prompt template version '{version}'. "
                    f"Available: {sorted(prompts.PROMPT_TEMPLATES)}"
                )
            templates = prompts.PROMPT_TEMPLATES[version]

        self.system_template = templates["system"]
        self.user_template = templates["user"]
        self.default_topic_label = default_topic_label

    def compose(
        self,
        context_text: str,
        history: Sequence[ConversationTurn],
        query: str,
        topic_label: str,
        current_date: date
    ) -> ComposedPrompt:
        """
        Compose the full message sequence for one request.

        Args:
            context_text: Assembled context block (may be empty).
            history:      Prior turns in the order they should be read.
            query:        The user's (trimmed) question.
            topic_label:  Topic phrasing; blank falls back to the default.
            current_date: Date rendered into the system message.
        """
        system_turn = ConversationTurn(
            role="system",
            content=self.system_template.format(
                topic_label=(topic_label or "").strip() or self.default_topic_label,
                current_date=format_prompt_date(current_date)
            )
        )

        user_turn = ConversationTurn(
            role="user",
            content=self.user_template.format(context_text=context_text, query=query)
        )

        history_turns = tuple(
            ConversationTurn(role=turn.role, content=turn.content) for turn in history
        )

        return ComposedPrompt(turns=(system_turn,) + history_turns + (user_turn,))
