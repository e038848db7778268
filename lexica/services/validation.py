from __future__ import annotations

from typing import Iterable

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_snake

from ..config import CONTEXT_MAX_LENGTH, CONTEXT_MIN_LENGTH

_WORD_MESSAGES = {
    "string_too_short": "Word cannot be empty.",
    "string_too_long": "Word is too long.",
}

FIELD_MESSAGES: dict[str, dict[str, str]] = {
    "word": _WORD_MESSAGES,
    "original_word": _WORD_MESSAGES,
    "context": {
        "string_too_short": f"Context should be at least {CONTEXT_MIN_LENGTH} characters long.",
        "string_too_long": f"Context is too long, please keep it under {CONTEXT_MAX_LENGTH} characters.",
    },
    "tone": {"literal_error": "Invalid tone selected."},
    "api_key": {
        "string_too_short": "API Key seems too short.",
        "string_too_long": "API Key seems too long.",
    },
}


def _field_name(error: dict) -> str:
    loc = error.get("loc") or ("",)
    return to_snake(str(loc[0]))


def validation_message(exc: PydanticValidationError, fields: Iterable[str] | None = None) -> str | None:
    """First user-facing message for ``exc``, limited to ``fields`` when given."""
    wanted = set(fields) if fields is not None else None
    for error in exc.errors():
        name = _field_name(error)
        if wanted is not None and name not in wanted:
            continue
        return FIELD_MESSAGES.get(name, {}).get(error["type"], error["msg"])
    return None


__all__ = ["FIELD_MESSAGES", "validation_message"]
