from __future__ import annotations

import logging
from typing import Protocol, TypeVar

from pydantic import BaseModel

from .prompts import build_antonyms_prompt, build_suggestion_prompt, build_synonyms_prompt, effective_tone
from .schemas import AntonymsOutput, SuggestionOutput, SuggestionQuery, SynonymsOutput

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ModelInvoker(Protocol):
    async def invoke(self, prompt: str, schema: type[SchemaT], *, model: str | None = None) -> SchemaT: ...


async def generate_synonyms(word: str, client: ModelInvoker) -> SynonymsOutput:
    return await client.invoke(build_synonyms_prompt(word), SynonymsOutput)


async def generate_antonyms(word: str, client: ModelInvoker) -> AntonymsOutput:
    return await client.invoke(build_antonyms_prompt(word), AntonymsOutput)


def no_candidates_result(word: str) -> SuggestionOutput:
    return SuggestionOutput(
        suggestion_type="none",
        explanation=(
            f'No synonyms or antonyms were provided for "{word}", '
            "so no suggestion can be made for the context."
        ),
    )


async def suggest_best_word(query: SuggestionQuery, client: ModelInvoker) -> SuggestionOutput:
    if not query.has_candidates:
        return no_candidates_result(query.original_word)

    prompt_query = query.model_copy(update={"tone": effective_tone(query.tone)})
    result = await client.invoke(build_suggestion_prompt(prompt_query), SuggestionOutput)

    # Words outside the supplied lists are accepted as-is.
    if result.suggested_word and result.suggested_word not in {*query.synonyms, *query.antonyms}:
        logger.debug("Suggested word %r was not among the supplied candidates", result.suggested_word)
    return result


__all__ = [
    "ModelInvoker",
    "generate_synonyms",
    "generate_antonyms",
    "suggest_best_word",
    "no_candidates_result",
]
