from __future__ import annotations

from fastapi.testclient import TestClient

from lexica.errors import ProviderError
from lexica.main import app
from lexica.services.ai.schemas import AntonymsOutput, SynonymsOutput
from lexica.tests.fakes import VALID_KEY, FakeAIClient, FakeClientFactory

client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_tones_lists_the_fixed_set():
    payload = client.get("/tones").json()
    assert payload["default"] == "Conversational"
    assert payload["tones"] == ["Conversational", "Formal", "Poetic", "Technical", "Humorous", "Concise"]


def test_search_then_suggest_round_trip(happy_factory, override_client_factory):
    override_client_factory(happy_factory)

    search = client.post("/search", json={"word": "happy", "apiKey": VALID_KEY})
    assert search.status_code == 200
    state = search.json()
    assert state["status"] == "results"
    assert state["searchWord"] == "happy"
    assert state["synonyms"] == ["joyful", "glad"]
    assert state["selectedTone"] == "Conversational"

    suggestion = client.post(
        "/suggestion",
        json={
            "context": "She felt ___ after the news",
            "originalWord": "happy",
            "tone": "Formal",
            "apiKey": VALID_KEY,
            "state": state,
        },
    )
    assert suggestion.status_code == 200
    payload = suggestion.json()
    assert payload["status"] == "suggestion_ready"
    assert payload["suggestedWord"] == "elated"
    assert payload["suggestionType"] == "synonym"
    assert payload["selectedTone"] == "Formal"
    assert payload["antonyms"] == ["sad", "unhappy"]


def test_actions_endpoint_dispatches(happy_factory, override_client_factory):
    override_client_factory(happy_factory)

    response = client.post("/actions", json={"actionType": "fetchWordData", "word": "happy", "apiKey": VALID_KEY})
    assert response.json()["status"] == "results"

    stale = client.post(
        "/actions",
        json={
            "actionType": "fetchWordSuggestion",
            "context": "She felt ___ after the news",
            "originalWord": "glad",
            "apiKey": VALID_KEY,
            "state": response.json(),
        },
    )
    assert stale.json()["suggestionError"] == "Mismatch in original word. Please try again."


def test_validation_failure_is_reported_in_state_not_http_error(happy_factory, override_client_factory):
    override_client_factory(happy_factory)

    response = client.post("/search", json={"word": "x" * 60, "apiKey": VALID_KEY})
    assert response.status_code == 200
    assert response.json()["error"] == "Word is too long."
    assert happy_factory.client.calls == []


def test_provider_failure_is_reported_in_state(override_client_factory):
    failing = FakeAIClient({SynonymsOutput: ProviderError("API key not valid"), AntonymsOutput: AntonymsOutput(antonyms=[])})
    override_client_factory(FakeClientFactory(failing))

    response = client.post("/search", json={"word": "happy", "apiKey": VALID_KEY})
    assert response.status_code == 200
    assert response.json()["error"] == 'Failed to fetch results for "happy". Reason: API key not valid'


def test_malformed_body_is_rejected():
    response = client.post("/actions", json={"word": "happy"})
    assert response.status_code == 422
