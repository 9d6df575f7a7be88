"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mentorconnect.application.use_cases.notifications import FilterMode
from mentorconnect.domain.entities import NotificationType


class NotificationSenderRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    avatar: str | None = None


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    message: str
    type: NotificationType
    timestamp: datetime
    is_read: bool
    link: str | None = None
    icon: str | None = None
    sender: NotificationSenderRead | None = None


class NotificationItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    notification: NotificationRead
    display_time: str
    icon: str
    sender_line: str | None = None


class NotificationGroupRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str
    items: list[NotificationItemRead]


class NotificationListRead(BaseModel):
    """Filtered and grouped notification list."""

    model_config = ConfigDict(from_attributes=True)

    filter: FilterMode
    unread_count: int
    summary: str
    groups: list[NotificationGroupRead]
    empty_message: str | None = None
    can_mark_all_read: bool
    can_clear_all: bool
    loading: bool
    error: str | None = None


class BellRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    unread_count: int
    recent: list[NotificationItemRead]
    loading: bool


class NotificationStateRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    notifications: list[NotificationRead]
    unread_count: int
    loading: bool
    error: str | None = None


class NotificationCreate(BaseModel):
    """Payload used to push a notification into the store."""

    id: str | None = Field(default=None, description="Generated when omitted")
    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    type: NotificationType = NotificationType.INFO
    timestamp: datetime | None = None
    is_read: bool = False
    link: str | None = None
    icon: str | None = None
    sender: NotificationSenderRead | None = None


__all__ = [
    "BellRead",
    "NotificationCreate",
    "NotificationGroupRead",
    "NotificationItemRead",
    "NotificationListRead",
    "NotificationRead",
    "NotificationSenderRead",
    "NotificationStateRead",
]
