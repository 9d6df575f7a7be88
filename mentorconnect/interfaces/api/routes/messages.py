"""Messages page endpoints."""

from __future__ import annotations

import logging
from functools import partial

from fastapi import APIRouter, Depends, Query

from mentorconnect.application.use_cases.pages import MessagesPage, PageRegistry
from mentorconnect.domain.entities import Conversation, Message, Role, User
from mentorconnect.infrastructure.llm_client import LocalChatService
from mentorconnect.interfaces.api.dependencies import (
    get_app_state,
    get_chat_service,
    get_current_user,
    get_page_registry,
)
from mentorconnect.interfaces.api.routes_helpers import (
    not_found,
    page_key,
    require_page,
    require_role,
    select_or_raise,
)
from mentorconnect.interfaces.api.schemas import (
    AlumniConversationRead,
    ConversationRead,
    MessageCreate,
    MessageSendResponse,
    PageRead,
    StudentConversationRead,
)
from mentorconnect.interfaces.api.state import AppState

router = APIRouter(prefix="/messages", tags=["messages"])
logger = logging.getLogger(__name__)

MESSAGES_ERROR = "Failed to load messages data."


async def _require_messages(user: User, pages: PageRegistry) -> MessagesPage:
    return await require_page(
        pages,
        page_key("messages", user),
        partial(MessagesPage.for_role, user.role),
        error_message=MESSAGES_ERROR,
    )


@router.get("", response_model=PageRead[list[Conversation]])
async def list_conversations(
    search: str = Query(default=""),
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> PageRead[list[Conversation]]:
    """Return the conversations whose participants match ``search``."""

    page = await pages.load(
        page_key("messages", current_user),
        partial(MessagesPage.for_role, current_user.role),
        error_message=MESSAGES_ERROR,
    )
    if not page.ok:
        return PageRead[list[Conversation]](error=page.error)
    return PageRead[list[Conversation]](data=page.data.search(search))


@router.get("/{conversation_id}", response_model=ConversationRead)
async def read_conversation(
    conversation_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> ConversationRead:
    page = await _require_messages(current_user, pages)
    try:
        return select_or_raise(
            current_user,
            student_view=lambda: StudentConversationRead.model_validate(
                page.student_view(conversation_id)
            ),
            alumni_view=lambda: AlumniConversationRead.model_validate(
                page.alumni_view(conversation_id)
            ),
        )
    except ValueError as exc:
        raise not_found(exc) from exc


@router.post("/{conversation_id}", response_model=MessageSendResponse)
async def send_message(
    conversation_id: str,
    payload: MessageCreate,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
    chat_service: LocalChatService = Depends(get_chat_service),
    state: AppState = Depends(get_app_state),
) -> MessageSendResponse:
    """Send a message; blank content is ignored.

    When AI replies are enabled the local model answers as the other
    participant.
    """

    page = await _require_messages(current_user, pages)
    try:
        message = page.send_message(conversation_id, payload.content)
    except ValueError as exc:
        raise not_found(exc) from exc

    reply: Message | None = None
    if message is not None and (payload.ai_reply or state.settings.ai_replies_enabled):
        reply = await page.generate_reply(conversation_id, chat_service)
    return MessageSendResponse(message=message, reply=reply)


@router.post("/{conversation_id}/messages/{message_id}/pin", response_model=Message)
async def toggle_pin(
    conversation_id: str,
    message_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> Message:
    require_role(current_user, Role.ALUMNI)
    page = await _require_messages(current_user, pages)
    try:
        return page.toggle_pin(conversation_id, message_id)
    except ValueError as exc:
        raise not_found(exc) from exc


__all__ = ["router"]
