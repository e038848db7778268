from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from pydantic import ValidationError as PydanticValidationError

from ..errors import LexicaError, StaleContext
from ..models.request_models import ActionForm, ActionType, SearchForm, SuggestionForm
from ..models.state_models import SessionDisplayState, SessionStatus
from .ai.client import AIClient
from .ai.flows import ModelInvoker, generate_antonyms, generate_synonyms, suggest_best_word
from .ai.prompts import effective_tone
from .ai.schemas import Credential, SuggestionQuery, WordQuery
from .validation import validation_message

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], ModelInvoker]

FETCH_WORD_DATA: ActionType = "fetchWordData"
FETCH_WORD_SUGGESTION: ActionType = "fetchWordSuggestion"


def _enter(state: SessionDisplayState, status: SessionStatus, **updates: Any) -> SessionDisplayState:
    logger.debug("Session %s -> %s", state.status.value, status.value)
    return state.model_copy(update={"status": status, **updates})


def _search_failure(previous_state: SessionDisplayState, message: str) -> SessionDisplayState:
    # Earlier results stay on screen next to the error.
    return _enter(previous_state.with_suggestion_reset(), SessionStatus.ERROR, error=message, message=None)


def _suggestion_failure(state: SessionDisplayState, message: str) -> SessionDisplayState:
    return _enter(state, SessionStatus.SUGGESTION_ERROR, suggestion_error=message, error=None, message=None)


def _require_prior_results(previous_state: SessionDisplayState, original_word: str | None) -> None:
    if not previous_state.has_results:
        raise StaleContext("Original search data is missing. Please search for a word first.")
    if (original_word or "").strip() != previous_state.search_word:
        raise StaleContext("Mismatch in original word. Please try again.")


async def fetch_word_data(
    previous_state: SessionDisplayState | None,
    form: SearchForm,
    client_factory: ClientFactory = AIClient,
) -> SessionDisplayState:
    previous_state = previous_state or SessionDisplayState()

    try:
        word = WordQuery(word=form.word).word
    except PydanticValidationError as exc:
        return _search_failure(previous_state, validation_message(exc))

    try:
        api_key = Credential(api_key=form.api_key).api_key
    except PydanticValidationError as exc:
        return _search_failure(previous_state, f"A valid API Key is required. {validation_message(exc)}")

    searching = _enter(SessionDisplayState(), SessionStatus.SEARCHING, search_word=word)
    try:
        client = client_factory(api_key)
        synonym_result, antonym_result = await asyncio.gather(
            generate_synonyms(word, client),
            generate_antonyms(word, client),
        )
    except LexicaError as exc:
        logger.warning("Word lookup for %r failed (%s): %s", word, exc.kind, exc.message)
        return _search_failure(previous_state, f'Failed to fetch results for "{word}". Reason: {exc.message}')
    except Exception:
        logger.exception("Unexpected failure while looking up %r", word)
        return _search_failure(
            previous_state,
            f'Failed to fetch results for "{word}". '
            "Reason: An unexpected error occurred while fetching data.",
        )

    synonyms = synonym_result.synonyms
    antonyms = antonym_result.antonyms
    if not synonyms and not antonyms:
        return _enter(
            searching,
            SessionStatus.EMPTY,
            synonyms=[],
            antonyms=[],
            message=f'No synonyms or antonyms found for "{word}".',
        )
    return _enter(searching, SessionStatus.RESULTS, synonyms=synonyms, antonyms=antonyms)


async def fetch_word_suggestion(
    previous_state: SessionDisplayState | None,
    form: SuggestionForm,
    client_factory: ClientFactory = AIClient,
) -> SessionDisplayState:
    previous_state = previous_state or SessionDisplayState()

    query: SuggestionQuery | None = None
    query_error: PydanticValidationError | None = None
    try:
        query = SuggestionQuery(
            context=form.context,
            tone=form.tone,
            original_word=previous_state.search_word,
            synonyms=previous_state.synonyms,
            antonyms=previous_state.antonyms,
        )
    except PydanticValidationError as exc:
        # Context and tone are reported first; a bad original word is a stale search.
        message = validation_message(exc, fields=("context", "tone"))
        if message:
            return _suggestion_failure(previous_state, message)
        query_error = exc

    try:
        api_key = Credential(api_key=form.api_key).api_key
    except PydanticValidationError as exc:
        return _suggestion_failure(
            previous_state,
            f"A valid API Key is required for suggestions. {validation_message(exc)}",
        )

    try:
        _require_prior_results(previous_state, form.original_word)
    except StaleContext as exc:
        return _suggestion_failure(previous_state, exc.message)

    if query is None:
        return _suggestion_failure(previous_state, validation_message(query_error))

    tone = effective_tone(query.tone)
    pending = _enter(
        previous_state,
        SessionStatus.SUGGESTION_PENDING,
        context_provided=query.context,
        selected_tone=tone,
        error=None,
        message=None,
    )
    try:
        result = await suggest_best_word(query, client_factory(api_key))
    except LexicaError as exc:
        logger.warning("Suggestion for %r failed (%s): %s", query.original_word, exc.kind, exc.message)
        return _suggestion_failure(pending, f"Failed to fetch suggestion. Reason: {exc.message}")
    except Exception:
        logger.exception("Unexpected failure while suggesting a word for %r", query.original_word)
        return _suggestion_failure(
            pending,
            "Failed to fetch suggestion. Reason: An unexpected error occurred while fetching suggestion.",
        )

    return _enter(
        pending,
        SessionStatus.SUGGESTION_READY,
        suggested_word=result.suggested_word,
        suggestion_type=result.suggestion_type,
        suggestion_explanation=result.explanation,
        suggestion_error=None,
    )


async def dispatch_action(
    previous_state: SessionDisplayState | None,
    form: ActionForm,
    client_factory: ClientFactory = AIClient,
) -> SessionDisplayState:
    previous_state = previous_state or SessionDisplayState()
    if form.action_type == FETCH_WORD_DATA:
        return await fetch_word_data(previous_state, form.as_search(), client_factory)
    if form.action_type == FETCH_WORD_SUGGESTION:
        return await fetch_word_suggestion(previous_state, form.as_suggestion(), client_factory)
    logger.info("Ignoring unknown action type %r", form.action_type)
    return previous_state


__all__ = [
    "ClientFactory",
    "FETCH_WORD_DATA",
    "FETCH_WORD_SUGGESTION",
    "fetch_word_data",
    "fetch_word_suggestion",
    "dispatch_action",
]
