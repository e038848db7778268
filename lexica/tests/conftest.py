from __future__ import annotations

import pytest

from lexica.api.lookup_routes import get_client_factory
from lexica.main import app
from lexica.services.ai.schemas import AntonymsOutput, SuggestionOutput, SynonymsOutput
from lexica.tests.fakes import FakeAIClient, FakeClientFactory


@pytest.fixture
def happy_client() -> FakeAIClient:
    return FakeAIClient(
        {
            SynonymsOutput: SynonymsOutput(synonyms=["joyful", "glad"]),
            AntonymsOutput: AntonymsOutput(antonyms=["sad", "unhappy"]),
            SuggestionOutput: SuggestionOutput(
                suggested_word="elated",
                suggestion_type="synonym",
                explanation="Elated conveys a heightened, formal sense of joy.",
            ),
        }
    )


@pytest.fixture
def happy_factory(happy_client: FakeAIClient) -> FakeClientFactory:
    return FakeClientFactory(happy_client)


@pytest.fixture
def override_client_factory():
    # Route tests must never build a real Gemini client.
    def _install(factory: FakeClientFactory) -> None:
        app.dependency_overrides[get_client_factory] = lambda: factory

    yield _install
    app.dependency_overrides.clear()
