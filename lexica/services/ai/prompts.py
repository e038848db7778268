from __future__ import annotations

from typing import Iterable

from ...config import DEFAULT_TONE
from .schemas import SuggestionQuery


def _bullet_list(items: Iterable[str], empty_label: str) -> str:
    lines = [f"- {item}" for item in items]
    if not lines:
        return f"({empty_label})"
    return "\n".join(lines)


def effective_tone(tone: str | None) -> str:
    cleaned = (tone or "").strip()
    return cleaned or DEFAULT_TONE


def build_synonyms_prompt(word: str) -> str:
    return (
        f"You are a thesaurus. Generate a list of synonyms for the word: {word}. "
        "Return the synonyms as a JSON array of strings."
    )


def build_antonyms_prompt(word: str) -> str:
    return (
        "You are a helpful thesaurus assistant. Given a word, you will provide a list of "
        "antonyms for that word. Return the antonyms as a JSON array of strings.\n"
        "\n"
        f"Word: {word}"
    )


def build_suggestion_prompt(query: SuggestionQuery) -> str:
    tone = effective_tone(query.tone)
    word = query.original_word
    synonyms = _bullet_list(query.synonyms, "No synonyms provided")
    antonyms = _bullet_list(query.antonyms, "No antonyms provided")
    return f"""You are an expert linguistic assistant, acting as a co-pilot to a writer, helping them choose the most appropriate word while preserving their unique voice. Prioritize simplicity and clarity in your suggestions.

The user searched for the word "{word}".
They provided the following context for its use: "{query.context}"
The desired tone is: {tone}.

Available synonyms for "{word}" are:
{synonyms}

Available antonyms for "{word}" are:
{antonyms}

Based on the provided context and desired tone ({tone}), analyze the synonyms and antonyms. Consider the tone and register implied by the context.
Suggest the single best word (either one of the synonyms or one of the antonyms) that fits the context and improves the writing. Avoid jargon or overly dense suggestions unless the context and tone (e.g., Technical, Formal) specifically call for it.

If a fitting word is found, provide its type (synonym or antonym) and a concise explanation for your choice, focusing on how it enhances clarity and fits the tone.
If no word from the provided lists is suitable for the context, indicate that no suitable suggestion was found and explain why, rather than suggesting an alternative that doesn't quite fit.

Respond with the suggested word, its type, and your explanation.
If no word is suitable, set suggestionType to "none", omit suggestedWord, and provide an explanation.
"""


__all__ = [
    "build_synonyms_prompt",
    "build_antonyms_prompt",
    "build_suggestion_prompt",
    "effective_tone",
]
