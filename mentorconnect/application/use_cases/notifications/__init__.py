"""Notification store and the views derived from it."""

from .grouping import (
    BellView,
    FilterMode,
    NotificationGroup,
    NotificationItemView,
    NotificationListView,
    build_bell_view,
    build_notification_list_view,
    filter_notifications,
    format_notification_time,
    group_notifications,
)
from .store import FETCH_ERROR_MESSAGE, NotificationState, NotificationStore

__all__ = [
    "BellView",
    "FETCH_ERROR_MESSAGE",
    "FilterMode",
    "NotificationGroup",
    "NotificationItemView",
    "NotificationListView",
    "NotificationState",
    "NotificationStore",
    "build_bell_view",
    "build_notification_list_view",
    "filter_notifications",
    "format_notification_time",
    "group_notifications",
]
