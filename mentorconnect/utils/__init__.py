"""Utility helpers for reusable functionality."""

from .datetime import (
    app_calendar_day,
    calendar_days_between,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_timezone,
    resolve_timezone,
)

__all__ = [
    "app_calendar_day",
    "calendar_days_between",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_app_timezone",
    "resolve_timezone",
]
