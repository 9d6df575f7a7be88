"""Process-wide notification store."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace

import anyio

from mentorconnect.domain.entities import Notification
from mentorconnect.infrastructure.fixtures import dummy_notifications

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch notifications"

NotificationLoader = Callable[[], Sequence[Notification]]


@dataclass(frozen=True)
class NotificationState:
    """Snapshot of the store. Every change installs a new instance."""

    notifications: tuple[Notification, ...] = ()
    loading: bool = False
    error: str | None = None

    @property
    def unread_count(self) -> int:
        return sum(1 for notification in self.notifications if not notification.is_read)


Listener = Callable[[NotificationState], None]


class NotificationStore:
    """Owns the notification list shared by the bell and the notifications page.

    Mutations are synchronous and return the newly installed state. Each one
    derives the new state from the current one under a lock, so callers on
    worker threads and on the event loop never lose each other's updates.
    Listeners registered with :meth:`subscribe` are called after every change,
    outside the lock.
    """

    def __init__(
        self,
        *,
        fetch_delay: float = 0.8,
        loader: NotificationLoader = dummy_notifications,
    ) -> None:
        self._fetch_delay = fetch_delay
        self._loader = loader
        self._state = NotificationState()
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    @property
    def state(self) -> NotificationState:
        return self._state

    @property
    def notifications(self) -> tuple[Notification, ...]:
        return self._state.notifications

    @property
    def unread_count(self) -> int:
        return self._state.unread_count

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""

        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_notifications(self, notifications: Iterable[Notification]) -> NotificationState:
        items = tuple(notifications)
        return self._update(lambda state: replace(state, notifications=items))

    def add_notification(self, notification: Notification) -> NotificationState:
        return self._update(
            lambda state: replace(state, notifications=(notification, *state.notifications))
        )

    def mark_as_read(self, notification_id: str) -> NotificationState:
        return self._update(
            lambda state: replace(
                state,
                notifications=tuple(
                    n.mark_read() if n.id == notification_id else n for n in state.notifications
                ),
            )
        )

    def mark_all_as_read(self) -> NotificationState:
        return self._update(
            lambda state: replace(
                state, notifications=tuple(n.mark_read() for n in state.notifications)
            )
        )

    def clear_all(self) -> NotificationState:
        return self._update(lambda state: replace(state, notifications=()))

    async def fetch_notifications(
        self, *, loader: NotificationLoader | None = None
    ) -> NotificationState:
        """Replace the list with freshly loaded notifications after the fetch delay.

        Overlapping calls are not coordinated; the last one to finish wins.
        """

        self._update(lambda state: replace(state, loading=True, error=None))
        try:
            await anyio.sleep(self._fetch_delay)
            notifications = tuple((loader or self._loader)())
        except Exception as exc:
            logger.error("Failed to fetch notifications: %s", exc)
            message = str(exc) or FETCH_ERROR_MESSAGE
            return self._update(lambda state: replace(state, loading=False, error=message))
        return self._update(
            lambda state: replace(state, notifications=notifications, loading=False)
        )

    def reset(self) -> None:
        """Drop the state and every listener."""

        with self._lock:
            self._state = NotificationState()
        self._listeners.clear()

    def _update(
        self, change: Callable[[NotificationState], NotificationState]
    ) -> NotificationState:
        with self._lock:
            state = change(self._state)
            self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Notification listener failed")
        return state


__all__ = [
    "FETCH_ERROR_MESSAGE",
    "NotificationLoader",
    "NotificationState",
    "NotificationStore",
]
