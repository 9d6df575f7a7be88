"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Severity of a notification, which also decides its icon."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class NotificationSender:
    """The person a notification originates from."""

    id: str
    name: str
    avatar: str | None = None


@dataclass(frozen=True)
class Notification:
    """Information message shown in the bell and on the notifications page."""

    id: str
    title: str
    message: str
    type: NotificationType
    timestamp: datetime
    is_read: bool = False
    link: str | None = None
    icon: str | None = None
    sender: NotificationSender | None = None

    def mark_read(self) -> "Notification":
        """Return a copy of the notification flagged as read."""

        if self.is_read:
            return self
        return replace(self, is_read=True)


__all__ = ["Notification", "NotificationSender", "NotificationType"]
