from __future__ import annotations

import asyncio

import httpx
import pytest
from google.genai import errors as genai_errors

from lexica.errors import EmptyOutput, MissingCredential, ProviderError, SchemaMismatch
from lexica.services.ai.client import DEFAULT_MODEL, AIClient, invoke
from lexica.services.ai.schemas import SuggestionOutput, SynonymsOutput
from lexica.tests.fakes import VALID_KEY, make_sdk


@pytest.mark.parametrize("credential", [None, "", "   "])
def test_missing_credential_is_rejected_before_any_call(credential):
    sdk, models = make_sdk(text='{"synonyms": []}')
    with pytest.raises(MissingCredential):
        AIClient(credential, sdk_client=sdk)
    assert models.requests == []


def test_invoke_requests_json_with_schema_and_default_model():
    sdk, models = make_sdk(text='{"synonyms": ["joyful", "glad"]}')
    client = AIClient(VALID_KEY, sdk_client=sdk)

    result = asyncio.run(client.invoke("prompt text", SynonymsOutput))

    assert result == SynonymsOutput(synonyms=["joyful", "glad"])
    assert len(models.requests) == 1, "Exactly one outbound call per invocation"
    request = models.requests[0]
    assert request["model"] == DEFAULT_MODEL
    assert request["contents"] == "prompt text"
    assert request["config"].response_mime_type == "application/json"


def test_model_can_be_overridden_per_call():
    sdk, models = make_sdk(text='{"synonyms": []}')
    client = AIClient(VALID_KEY, sdk_client=sdk)
    asyncio.run(client.invoke("prompt", SynonymsOutput, model="gemini-2.5-flash"))
    assert models.requests[0]["model"] == "gemini-2.5-flash"


def test_transport_failure_becomes_provider_error_without_retry():
    sdk, models = make_sdk(error=httpx.ConnectError("connection refused"))
    with pytest.raises(ProviderError) as excinfo:
        asyncio.run(invoke("prompt", SynonymsOutput, VALID_KEY, sdk_client=sdk))
    assert "connection refused" in str(excinfo.value)
    assert len(models.requests) == 1


def test_api_error_message_is_passed_through():
    upstream = genai_errors.APIError(
        429,
        {"error": {"code": 429, "message": "quota exhausted", "status": "RESOURCE_EXHAUSTED"}},
    )
    sdk, _ = make_sdk(error=upstream)
    with pytest.raises(ProviderError) as excinfo:
        asyncio.run(invoke("prompt", SynonymsOutput, VALID_KEY, sdk_client=sdk))
    assert "quota exhausted" in str(excinfo.value)
    assert excinfo.value.__cause__ is upstream


@pytest.mark.parametrize("text", [None, "", "  \n"])
def test_blank_output_is_empty_output(text):
    sdk, _ = make_sdk(text=text)
    with pytest.raises(EmptyOutput):
        asyncio.run(invoke("prompt", SynonymsOutput, VALID_KEY, sdk_client=sdk))


@pytest.mark.parametrize(
    "text",
    [
        "not json at all",
        '{"synonyms": [1, 2, 3]}',
        '{"suggestedWord": "glad", "suggestionType": "none", "explanation": "x"}',
    ],
)
def test_nonconforming_output_is_schema_mismatch(text):
    sdk, _ = make_sdk(text=text)
    schema = SuggestionOutput if "suggestionType" in text else SynonymsOutput
    with pytest.raises(SchemaMismatch) as excinfo:
        asyncio.run(invoke("prompt", schema, VALID_KEY, sdk_client=sdk))
    assert schema.__name__ in excinfo.value.message
