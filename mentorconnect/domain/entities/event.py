"""Domain entities used by the events page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .person import PersonSummary


class EventType(str, Enum):
    WORKSHOP = "workshop"
    SEMINAR = "seminar"
    NETWORKING = "networking"
    HACKATHON = "hackathon"
    OTHER = "other"


@dataclass(frozen=True)
class Event:
    """An event card with the current viewer's registration state."""

    id: str
    title: str
    description: str
    date: date
    time: str
    location: str
    type: EventType
    organizer: PersonSummary
    attendees: int
    max_attendees: int
    tags: tuple[str, ...] = ()
    is_registered: bool = False
    is_hosting: bool = False
    image_url: str | None = None

    @property
    def is_full(self) -> bool:
        return self.attendees >= self.max_attendees


@dataclass(frozen=True)
class UpcomingEvent:
    """Compact event entry shown on dashboards."""

    id: str
    title: str
    start_date: datetime
    location_type: str = "virtual"


@dataclass(frozen=True)
class RecentEvent:
    id: str
    title: str
    start_date: datetime
    attendees: int
    organizer: PersonSummary


__all__ = ["Event", "EventType", "RecentEvent", "UpcomingEvent"]
