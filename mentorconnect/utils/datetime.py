"""Timezone and calendar-day helpers.

Notification grouping compares calendar days, so every timestamp is first
moved into the configured ``APP_TIMEZONE``.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from mentorconnect.config import get_settings

_FIXED_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def resolve_timezone(name: str) -> tzinfo:
    """Return the zone called ``name``.

    IANA names and fixed offsets such as ``UTC-05:00`` are accepted; anything
    else resolves to UTC.
    """

    name = name.strip()
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    match = _FIXED_OFFSET.match(name)
    if match is None:
        return timezone.utc
    offset = timedelta(
        hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
    )
    return timezone(-offset if match.group("sign") == "-" else offset)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    return resolve_timezone(get_settings().app_timezone or "")


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Express ``value`` in the application timezone.

    Naive values are taken as UTC, which is what offset-less ISO strings from
    the backends mean.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(get_app_timezone())


def app_calendar_day(value: datetime) -> date:
    """Return the calendar date ``value`` falls on in the application timezone."""

    return ensure_app_timezone(value).date()


def calendar_days_between(earlier: datetime, later: datetime) -> int:
    return (app_calendar_day(later) - app_calendar_day(earlier)).days


__all__ = [
    "app_calendar_day",
    "calendar_days_between",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_app_timezone",
    "resolve_timezone",
]
