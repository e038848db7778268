from __future__ import annotations


class LexicaError(Exception):
    """Base for every failure the orchestration layer turns into a message."""

    kind = "LexicaError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(LexicaError):
    kind = "ValidationError"


class MissingCredential(LexicaError):
    kind = "MissingCredential"


class ProviderError(LexicaError):
    kind = "ProviderError"


class SchemaMismatch(LexicaError):
    kind = "SchemaMismatch"


class EmptyOutput(LexicaError):
    kind = "EmptyOutput"


class StaleContext(LexicaError):
    kind = "StaleContext"


__all__ = [
    "LexicaError",
    "ValidationError",
    "MissingCredential",
    "ProviderError",
    "SchemaMismatch",
    "EmptyOutput",
    "StaleContext",
]
