from fastapi import APIRouter, Depends

from ..config import DEFAULT_TONE, TONES
from ..models.request_models import ActionRequest, SearchRequest, SuggestionRequest, ToneListResponse
from ..models.state_models import SessionDisplayState
from ..services.ai.client import AIClient
from ..services.lookup_service import ClientFactory, dispatch_action, fetch_word_data, fetch_word_suggestion

router = APIRouter(tags=["lookup"])


def get_client_factory() -> ClientFactory:
    return AIClient


@router.post("/actions", response_model=SessionDisplayState)
async def run_action(request: ActionRequest, client_factory: ClientFactory = Depends(get_client_factory)):
    return await dispatch_action(request.state, request, client_factory)


@router.post("/search", response_model=SessionDisplayState)
async def search_word(request: SearchRequest, client_factory: ClientFactory = Depends(get_client_factory)):
    return await fetch_word_data(request.state, request, client_factory)


@router.post("/suggestion", response_model=SessionDisplayState)
async def suggest_word(request: SuggestionRequest, client_factory: ClientFactory = Depends(get_client_factory)):
    return await fetch_word_suggestion(request.state, request, client_factory)


@router.get("/tones", response_model=ToneListResponse)
async def list_tones():
    return {"tones": list(TONES), "default": DEFAULT_TONE}
