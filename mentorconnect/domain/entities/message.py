"""Domain entities used by the messages page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .role import Role


@dataclass(frozen=True)
class Participant:
    id: str
    name: str
    role: Role
    avatar: str = ""
    is_online: bool = False


@dataclass(frozen=True)
class MessageAttachment:
    name: str
    url: str
    type: str = "other"


@dataclass(frozen=True)
class Message:
    """A single chat message inside a conversation."""

    id: str
    sender_id: str
    content: str
    timestamp: datetime
    is_read: bool = False
    attachments: tuple[MessageAttachment, ...] = ()
    is_pinned: bool = False


@dataclass(frozen=True)
class LastMessage:
    content: str
    timestamp: datetime
    sender_id: str


@dataclass(frozen=True)
class Conversation:
    """A conversation summary as listed in the sidebar."""

    id: str
    participants: tuple[Participant, ...]
    last_message: LastMessage
    unread_count: int = 0

    @property
    def counterpart(self) -> Participant:
        return self.participants[0]


__all__ = ["Conversation", "LastMessage", "Message", "MessageAttachment", "Participant"]
