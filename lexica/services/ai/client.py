"""Gemini client adapter.

Each ``invoke`` performs exactly one ``generate_content`` call in JSON mode and
validates the text against a pydantic schema. Failures are raised as
``LexicaError`` subclasses and never retried here.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...config import LEXICA_MODEL
from ...errors import EmptyOutput, MissingCredential, ProviderError, SchemaMismatch

logger = logging.getLogger(__name__)

DEFAULT_MODEL = LEXICA_MODEL

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _provider_message(exc: Exception) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message.strip():
        return message.strip()
    return str(exc) or exc.__class__.__name__


def _schema_message(schema: type[BaseModel], exc: PydanticValidationError) -> str:
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ())) or "response"
    detail = first.get("msg", "invalid value")
    return f"Model output did not match the {schema.__name__} schema ({location}: {detail})."


def parse_output(text: str | None, schema: type[SchemaT]) -> SchemaT:
    if text is None or not text.strip():
        raise EmptyOutput("No output from AI.")
    try:
        return schema.model_validate_json(text)
    except PydanticValidationError as exc:
        raise SchemaMismatch(_schema_message(schema, exc)) from exc


class AIClient:
    """Binds one credential to the Gemini SDK for the lifetime of a request."""

    def __init__(self, credential: str | None, *, model: str = DEFAULT_MODEL, sdk_client: Any | None = None):
        if not credential or not credential.strip():
            raise MissingCredential("API key is required to call the language model.")
        self.model = model
        self._sdk = sdk_client if sdk_client is not None else genai.Client(api_key=credential.strip())

    async def invoke(self, prompt: str, schema: type[SchemaT], *, model: str | None = None) -> SchemaT:
        model_name = model or self.model
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema,
        )
        try:
            response = await self._sdk.aio.models.generate_content(
                model=model_name,
                contents=prompt,
                config=config,
            )
        except (genai_errors.APIError, httpx.HTTPError) as exc:
            logger.warning("Model call to %s failed: %s", model_name, exc.__class__.__name__)
            raise ProviderError(_provider_message(exc)) from exc

        return parse_output(getattr(response, "text", None), schema)


async def invoke(
    prompt: str,
    schema: type[SchemaT],
    credential: str | None,
    *,
    model: str | None = None,
    sdk_client: Any | None = None,
) -> SchemaT:
    client = AIClient(credential, model=model or DEFAULT_MODEL, sdk_client=sdk_client)
    return await client.invoke(prompt, schema)


__all__ = ["AIClient", "DEFAULT_MODEL", "invoke", "parse_output"]
