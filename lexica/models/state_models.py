from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..config import DEFAULT_TONE
from ..services.ai.schemas import SuggestionType


class SessionStatus(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    RESULTS = "results"
    EMPTY = "empty"
    ERROR = "error"
    SUGGESTION_PENDING = "suggestion_pending"
    SUGGESTION_READY = "suggestion_ready"
    SUGGESTION_ERROR = "suggestion_error"


class SessionDisplayState(BaseModel):
    """Everything the page renders for one browser session.

    The orchestration layer returns a fresh copy on every action; callers
    send the last copy back with the next form submission.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: SessionStatus = SessionStatus.IDLE
    search_word: str | None = None
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)
    error: str | None = None
    message: str | None = None

    context_provided: str | None = None
    selected_tone: str = DEFAULT_TONE
    suggested_word: str | None = None
    suggestion_type: SuggestionType | None = None
    suggestion_explanation: str | None = None
    suggestion_error: str | None = None

    @property
    def has_results(self) -> bool:
        return bool(self.search_word) and bool(self.synonyms or self.antonyms)

    def with_suggestion_reset(self) -> "SessionDisplayState":
        return self.model_copy(
            update={
                "context_provided": None,
                "selected_tone": DEFAULT_TONE,
                "suggested_word": None,
                "suggestion_type": None,
                "suggestion_explanation": None,
                "suggestion_error": None,
            }
        )


__all__ = ["SessionStatus", "SessionDisplayState"]
