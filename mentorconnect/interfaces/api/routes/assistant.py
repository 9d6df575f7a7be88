"""Endpoints of the local chatbot page."""

from fastapi import APIRouter, Depends

from mentorconnect.domain.entities import User
from mentorconnect.infrastructure.llm_client import LocalChatService
from mentorconnect.interfaces.api.dependencies import get_chat_service, get_current_user
from mentorconnect.interfaces.api.schemas import (
    AssistantGenerateRequest,
    AssistantGenerateResponse,
    AssistantStatusRead,
)

router = APIRouter(prefix="/assistant", tags=["assistant"])


@router.get("/status", response_model=AssistantStatusRead)
async def read_status(
    chat_service: LocalChatService = Depends(get_chat_service),
) -> AssistantStatusRead:
    """Report whether the local model server answers."""

    available = await chat_service.is_available()
    return AssistantStatusRead(available=available, model=chat_service.model)


@router.post("/generate", response_model=AssistantGenerateResponse)
async def generate(
    payload: AssistantGenerateRequest,
    current_user: User = Depends(get_current_user),
    chat_service: LocalChatService = Depends(get_chat_service),
) -> AssistantGenerateResponse:
    response = await chat_service.generate(payload.prompt)
    return AssistantGenerateResponse(response=response)


__all__ = ["router"]
