"""Messages page payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from mentorconnect.domain.entities import Conversation, Message


class StudentConversationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    layout: Literal["student"] = "student"
    conversation: Conversation
    messages: list[Message]
    conversation_starters: dict[str, str]


class AlumniConversationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    layout: Literal["alumni"] = "alumni"
    conversation: Conversation
    messages: list[Message]
    pinned: list[Message]
    reply_templates: list[str]
    ai_suggestions: dict[str, str]


ConversationRead = StudentConversationRead | AlumniConversationRead


class MessageCreate(BaseModel):
    content: str
    ai_reply: bool = False


class MessageSendResponse(BaseModel):
    """The stored message, plus the generated answer when one was requested."""

    message: Message | None = None
    reply: Message | None = None


__all__ = [
    "AlumniConversationRead",
    "ConversationRead",
    "MessageCreate",
    "MessageSendResponse",
    "StudentConversationRead",
]
