from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .state_models import SessionDisplayState

ActionType = Literal["fetchWordData", "fetchWordSuggestion"]


class _FormModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchForm(_FormModel):
    word: str | None = None
    api_key: str | None = None


class SuggestionForm(_FormModel):
    context: str | None = None
    original_word: str | None = None
    tone: str | None = None
    api_key: str | None = None


class ActionForm(_FormModel):
    action_type: str
    word: str | None = None
    context: str | None = None
    original_word: str | None = None
    tone: str | None = None
    api_key: str | None = None

    def as_search(self) -> SearchForm:
        return SearchForm(word=self.word, api_key=self.api_key)

    def as_suggestion(self) -> SuggestionForm:
        return SuggestionForm(
            context=self.context,
            original_word=self.original_word,
            tone=self.tone,
            api_key=self.api_key,
        )


class SearchRequest(SearchForm):
    state: SessionDisplayState | None = None


class SuggestionRequest(SuggestionForm):
    state: SessionDisplayState = Field(default_factory=SessionDisplayState)


class ActionRequest(ActionForm):
    state: SessionDisplayState | None = None


class ToneListResponse(BaseModel):
    tones: list[str]
    default: str


__all__ = [
    "ActionType",
    "SearchForm",
    "SuggestionForm",
    "ActionForm",
    "SearchRequest",
    "SuggestionRequest",
    "ActionRequest",
    "ToneListResponse",
]
