from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .config import DEFAULT_TONE, GOOGLE_API_KEY, LOG_LEVEL, STORAGE_PATH, TONES
from .errors import ValidationError
from .models.request_models import SearchForm, SuggestionForm
from .models.state_models import SessionDisplayState, SessionStatus
from .services.key_gate import GateState, JsonFileStorage, KeyGate
from .services.lookup_service import fetch_word_data, fetch_word_suggestion

logger = logging.getLogger(__name__)


def _open_gate(storage_path: str) -> KeyGate:
    gate = KeyGate(JsonFileStorage(storage_path))
    gate.start()
    return gate


def _resolve_api_key(gate: KeyGate) -> str | None:
    if gate.api_key:
        return gate.api_key
    if GOOGLE_API_KEY:
        logger.debug("No stored key, using GOOGLE_API_KEY from the environment")
        return GOOGLE_API_KEY
    return None


def _print_results(state: SessionDisplayState) -> None:
    if state.message:
        print(state.message)
    print(f"Synonyms for {state.search_word}: {', '.join(state.synonyms) or '-'}")
    print(f"Antonyms for {state.search_word}: {', '.join(state.antonyms) or '-'}")


def _print_suggestion(state: SessionDisplayState) -> None:
    if state.suggestion_type == "none":
        print(f"{state.suggestion_explanation} (Tone considered: {state.selected_tone})")
        return
    print(f"Suggestion ({state.selected_tone}): {state.suggested_word} ({state.suggestion_type})")
    print(f"Reasoning: {state.suggestion_explanation}")


def _emit(state: SessionDisplayState, as_json: bool, printer) -> int:
    if as_json:
        print(state.model_dump_json(by_alias=True, indent=2))
    elif state.error:
        print(state.error, file=sys.stderr)
    elif state.suggestion_error:
        print(state.suggestion_error, file=sys.stderr)
    else:
        printer(state)
    failed = state.status in {SessionStatus.ERROR, SessionStatus.SUGGESTION_ERROR}
    return 1 if failed else 0


async def _lookup(word: str, api_key: str) -> SessionDisplayState:
    return await fetch_word_data(None, SearchForm(word=word, api_key=api_key))


async def _suggest(word: str, context: str, tone: str, api_key: str) -> SessionDisplayState:
    state = await _lookup(word, api_key)
    if state.status is not SessionStatus.RESULTS:
        return state
    form = SuggestionForm(context=context, original_word=state.search_word, tone=tone, api_key=api_key)
    return await fetch_word_suggestion(state, form)


def cmd_lookup(args: argparse.Namespace) -> int:
    api_key = _resolve_api_key(_open_gate(args.storage))
    if not api_key:
        print("No API key stored. Run `lexica key set` first.", file=sys.stderr)
        return 1
    state = asyncio.run(_lookup(args.word, api_key))
    return _emit(state, args.json, _print_results)


def cmd_suggest(args: argparse.Namespace) -> int:
    api_key = _resolve_api_key(_open_gate(args.storage))
    if not api_key:
        print("No API key stored. Run `lexica key set` first.", file=sys.stderr)
        return 1
    state = asyncio.run(_suggest(args.word, args.context, args.tone, api_key))
    printer = _print_suggestion if state.status is SessionStatus.SUGGESTION_READY else _print_results
    return _emit(state, args.json, printer)


def cmd_key(args: argparse.Namespace) -> int:
    gate = _open_gate(args.storage)
    if args.key_action == "set":
        gate.begin_entry()
        value = args.value if args.value is not None else input("Google AI Studio API key: ")
        try:
            gate.submit(value)
        except ValidationError as exc:
            print(exc.message, file=sys.stderr)
            return 1
        print(f"API key saved to {args.storage}")
        return 0
    if args.key_action == "clear":
        gate.clear()
        print("API key cleared")
        return 0
    if gate.state is GateState.READY:
        key = gate.api_key or ""
        print(f"API key stored ({key[:4]}...{key[-2:]})")
        return 0
    print("No API key stored")
    return 1


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("lexica.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lexica", description="Wordcraft Lexica thesaurus.")
    parser.add_argument("--storage", default=STORAGE_PATH, help="Where the API key is stored.")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lookup = subparsers.add_parser("lookup", help="List synonyms and antonyms for a word.")
    lookup.add_argument("word")
    lookup.add_argument("--json", action="store_true", help="Print the display state as JSON.")
    lookup.set_defaults(func=cmd_lookup)

    suggest = subparsers.add_parser("suggest", help="Pick the best replacement word for a context.")
    suggest.add_argument("word")
    suggest.add_argument("--context", required=True, help="Sentence the word will be used in.")
    suggest.add_argument("--tone", default=DEFAULT_TONE, choices=TONES)
    suggest.add_argument("--json", action="store_true", help="Print the display state as JSON.")
    suggest.set_defaults(func=cmd_suggest)

    key = subparsers.add_parser("key", help="Manage the stored API key.")
    key.add_argument("key_action", choices=["set", "show", "clear"])
    key.add_argument("value", nargs="?", help="Key to store (prompted for when omitted).")
    key.set_defaults(func=cmd_key)

    serve = subparsers.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload for development.")
    serve.set_defaults(func=cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
