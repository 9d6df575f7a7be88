"""Utility helpers to push notification store changes to websocket subscribers."""

from __future__ import annotations

import asyncio
from typing import Any

from anyio import from_thread

from mentorconnect.domain.entities import Notification

from .manager import NotificationConnectionManager


class NotificationPublisher:
    """Serialize snapshots of the notification list and schedule their delivery."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager
        self._pending: set[asyncio.Task[None]] = set()

    def dispatch(self, notifications: tuple[Notification, ...], *, unread_count: int) -> None:
        """Schedule a ``notifications`` snapshot to be delivered to every listener."""

        if not self._manager.connection_count:
            return

        message = {
            "type": "notifications",
            "data": {
                "unread_count": unread_count,
                "notifications": [serialize_notification(item) for item in notifications],
            },
        }
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            from_thread.run(self._manager.broadcast, message)
        else:
            task = loop.create_task(self._manager.broadcast(message))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    sender = notification.sender
    return {
        "id": notification.id,
        "title": notification.title,
        "message": notification.message,
        "type": notification.type.value,
        "timestamp": notification.timestamp.isoformat(),
        "is_read": notification.is_read,
        "link": notification.link,
        "icon": notification.icon,
        "sender": (
            {"id": sender.id, "name": sender.name, "avatar": sender.avatar}
            if sender
            else None
        ),
    }


__all__ = ["NotificationPublisher", "serialize_notification"]
