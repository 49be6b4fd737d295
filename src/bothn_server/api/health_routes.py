from typing import Annotated

from fastapi import APIRouter, Depends

from .dependencies import get_assistant_state
from .models import HealthResponse
from ..engine.router import AssistantState

router = APIRouter(tags=["health"])

@router.get("/health", response_model=HealthResponse)
def health(state: Annotated[AssistantState, Depends(get_assistant_state)]):
    context = state.extraction
    return HealthResponse(
        knowledge_base_entries=len(state.knowledge_base),
        intents=len(state.intents),
        extraction_active=context is not None and context.is_active,
    )
