"""Response shapes the model must produce, plus the flow input records.

Model output is validated strictly: a list of numbers is not a list of words,
and a suggestion that names a word while claiming ``none`` is rejected.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ...config import (
    API_KEY_MAX_LENGTH,
    API_KEY_MIN_LENGTH,
    CONTEXT_MAX_LENGTH,
    CONTEXT_MIN_LENGTH,
    WORD_MAX_LENGTH,
    WORD_MIN_LENGTH,
)

SuggestionType = Literal["synonym", "antonym", "none"]
Tone = Literal["Conversational", "Formal", "Poetic", "Technical", "Humorous", "Concise"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _ModelOutput(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, strict=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class SynonymsOutput(_ModelOutput):
    synonyms: list[str] = Field(description="The list of synonyms for the word.")


class AntonymsOutput(_ModelOutput):
    antonyms: list[str] = Field(description="A list of antonyms for the given word.")


class SuggestionOutput(_ModelOutput):
    suggested_word: str | None = Field(
        default=None,
        description=(
            "The suggested word. Could be a synonym or an antonym. "
            "Omitted if no suitable word is found."
        ),
    )
    suggestion_type: SuggestionType = Field(
        description=(
            "Indicates if the suggested word is a synonym, an antonym, "
            "or if no suitable suggestion was found."
        ),
    )
    explanation: str = Field(
        description="An explanation for why the word was suggested, or why no word was suitable.",
    )

    @model_validator(mode="after")
    def check_word_matches_type(self) -> "SuggestionOutput":
        has_word = bool(self.suggested_word and self.suggested_word.strip())
        if self.suggestion_type == "none" and self.suggested_word is not None:
            raise ValueError("suggestedWord must be omitted when suggestionType is 'none'")
        if self.suggestion_type != "none" and not has_word:
            raise ValueError(f"suggestedWord is required when suggestionType is '{self.suggestion_type}'")
        return self


def _clean_text(value):
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return value


class WordQuery(_CamelModel):
    word: str = Field(..., min_length=WORD_MIN_LENGTH, max_length=WORD_MAX_LENGTH)

    @field_validator("word", mode="before")
    @classmethod
    def strip_word(cls, value):
        return _clean_text(value)


class Credential(_CamelModel):
    api_key: str = Field(..., min_length=API_KEY_MIN_LENGTH, max_length=API_KEY_MAX_LENGTH)

    @field_validator("api_key", mode="before")
    @classmethod
    def strip_api_key(cls, value):
        return _clean_text(value)


class SuggestionQuery(_CamelModel):
    # Field order is the order errors are reported in.
    context: str = Field(..., min_length=CONTEXT_MIN_LENGTH, max_length=CONTEXT_MAX_LENGTH)
    tone: Tone | None = None
    original_word: str = Field(..., min_length=WORD_MIN_LENGTH, max_length=WORD_MAX_LENGTH)
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)

    @field_validator("context", "original_word", mode="before")
    @classmethod
    def strip_text(cls, value):
        return _clean_text(value)

    @field_validator("tone", mode="before")
    @classmethod
    def blank_tone_is_unset(cls, value):
        cleaned = _clean_text(value)
        return cleaned or None

    @property
    def has_candidates(self) -> bool:
        return bool(self.synonyms or self.antonyms)


__all__ = [
    "SuggestionType",
    "Tone",
    "SynonymsOutput",
    "AntonymsOutput",
    "SuggestionOutput",
    "WordQuery",
    "Credential",
    "SuggestionQuery",
]
