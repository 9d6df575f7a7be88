"""Filtering, day grouping and display helpers for the notification list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from mentorconnect.domain.entities import Notification, NotificationType
from mentorconnect.utils import (
    calendar_days_between,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .store import NotificationState

TODAY = "Today"
YESTERDAY = "Yesterday"
EARLIER = "Earlier"

EMPTY_MESSAGE = "No notifications to display"
ALL_CAUGHT_UP = "All caught up!"
BELL_SIZE = 5

NOTIFICATION_ICONS: dict[NotificationType, str] = {
    NotificationType.INFO: "information-circle",
    NotificationType.SUCCESS: "check-circle",
    NotificationType.WARNING: "exclamation-triangle",
    NotificationType.ERROR: "x-circle",
}


class FilterMode(str, Enum):
    ALL = "all"
    UNREAD = "unread"


@dataclass(frozen=True)
class NotificationItemView:
    notification: Notification
    display_time: str
    icon: str
    sender_line: str | None


@dataclass(frozen=True)
class NotificationGroup:
    label: str
    items: tuple[NotificationItemView, ...]


@dataclass(frozen=True)
class NotificationListView:
    """Everything the notifications page renders for one filter mode."""

    filter: FilterMode
    unread_count: int
    summary: str
    groups: tuple[NotificationGroup, ...]
    empty_message: str | None
    can_mark_all_read: bool
    can_clear_all: bool
    loading: bool
    error: str | None


@dataclass(frozen=True)
class BellView:
    unread_count: int
    recent: tuple[NotificationItemView, ...]
    loading: bool


def filter_notifications(
    notifications: Iterable[Notification], mode: FilterMode
) -> list[Notification]:
    if mode is FilterMode.UNREAD:
        return [notification for notification in notifications if not notification.is_read]
    return list(notifications)


def day_label(timestamp: datetime, now: datetime) -> str:
    """Return ``Today``, ``Yesterday`` or ``Earlier`` by calendar day."""

    days = calendar_days_between(timestamp, now)
    if days == 0:
        return TODAY
    if days == 1:
        return YESTERDAY
    return EARLIER


def group_notifications(
    notifications: Sequence[Notification], now: datetime | None = None
) -> list[tuple[str, list[Notification]]]:
    """Group ``notifications`` by day label.

    Groups appear in the order their first member is met while iterating the
    list; they are not sorted.
    """

    reference = now or now_in_app_timezone()
    groups: dict[str, list[Notification]] = {}
    for notification in notifications:
        groups.setdefault(day_label(notification.timestamp, reference), []).append(
            notification
        )
    return list(groups.items())


def format_notification_time(timestamp: datetime, now: datetime | None = None) -> str:
    reference = ensure_app_timezone(now or now_in_app_timezone())
    moment = ensure_app_timezone(timestamp)

    label = day_label(moment, reference)
    if label == TODAY:
        return f"Today at {moment:%H:%M}"
    if label == YESTERDAY:
        return f"Yesterday at {moment:%H:%M}"

    days_ago = (reference - moment) // timedelta(days=1)
    if days_ago < 7:
        return f"{days_ago} days ago"
    return f"{moment:%b} {moment.day}"


def notification_icon(notification: Notification) -> str:
    return notification.icon or NOTIFICATION_ICONS.get(
        notification.type, NOTIFICATION_ICONS[NotificationType.INFO]
    )


def summary_line(unread_count: int) -> str:
    if unread_count <= 0:
        return ALL_CAUGHT_UP
    suffix = "s" if unread_count > 1 else ""
    return f"You have {unread_count} unread notification{suffix}"


def build_item_view(notification: Notification, now: datetime) -> NotificationItemView:
    sender = notification.sender
    return NotificationItemView(
        notification=notification,
        display_time=format_notification_time(notification.timestamp, now),
        icon=notification_icon(notification),
        sender_line=f"From: {sender.name}" if sender else None,
    )


def build_notification_list_view(
    state: NotificationState,
    mode: FilterMode = FilterMode.ALL,
    now: datetime | None = None,
) -> NotificationListView:
    """Recompute the filtered and grouped list from ``state``."""

    reference = now or now_in_app_timezone()
    filtered = filter_notifications(state.notifications, mode)
    unread_count = state.unread_count
    groups = tuple(
        NotificationGroup(
            label=label,
            items=tuple(build_item_view(item, reference) for item in items),
        )
        for label, items in group_notifications(filtered, reference)
    )
    return NotificationListView(
        filter=mode,
        unread_count=unread_count,
        summary=summary_line(unread_count),
        groups=groups,
        empty_message=None if filtered else EMPTY_MESSAGE,
        can_mark_all_read=unread_count > 0,
        can_clear_all=bool(filtered),
        loading=state.loading,
        error=state.error,
    )


def build_bell_view(state: NotificationState, now: datetime | None = None) -> BellView:
    reference = now or now_in_app_timezone()
    recent = state.notifications[:BELL_SIZE]
    return BellView(
        unread_count=state.unread_count,
        recent=tuple(build_item_view(item, reference) for item in recent),
        loading=state.loading,
    )


__all__ = [
    "ALL_CAUGHT_UP",
    "BELL_SIZE",
    "BellView",
    "EARLIER",
    "EMPTY_MESSAGE",
    "FilterMode",
    "NOTIFICATION_ICONS",
    "NotificationGroup",
    "NotificationItemView",
    "NotificationListView",
    "TODAY",
    "YESTERDAY",
    "build_bell_view",
    "build_item_view",
    "build_notification_list_view",
    "day_label",
    "filter_notifications",
    "format_notification_time",
    "group_notifications",
    "notification_icon",
    "summary_line",
]
