"""Domain entities used by the mentorship pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .person import PersonSummary


class MentorshipRequestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class MentorshipSessionStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Mentor:
    """An alumnus offering mentorship, as listed on the student board."""

    id: str
    name: str
    avatar: str
    title: str
    company: str
    expertise: tuple[str, ...]
    availability: str
    rating: float
    bio: str
    is_available: bool = True


@dataclass(frozen=True)
class MentorshipRequest:
    """A connection proposal from a student to an alumnus.

    ``counterpart`` is the mentor on the student board and the student on the
    alumni board.
    """

    id: str
    counterpart: PersonSummary
    topic: str
    message: str
    status: MentorshipRequestStatus
    request_date: datetime


@dataclass(frozen=True)
class MentorshipSession:
    id: str
    counterpart: PersonSummary
    topic: str
    status: MentorshipSessionStatus
    scheduled_date: datetime
    duration: int
    notes: str | None = None


@dataclass(frozen=True)
class AvailabilitySlot:
    id: str
    day: str
    start_time: str
    end_time: str
    is_recurring: bool = True


@dataclass(frozen=True)
class MentorshipStatusItem:
    """Summary of a mentorship shown on the student dashboard."""

    id: str
    mentor: PersonSummary
    status: str
    start_date: datetime | None = None
    last_message_date: datetime | None = None


@dataclass(frozen=True)
class ActiveMentorship:
    """Summary of an ongoing mentorship shown on the alumni dashboard."""

    id: str
    mentee: PersonSummary
    start_date: datetime
    last_message_date: datetime | None = None
    topics: tuple[str, ...] = field(default_factory=tuple)


__all__ = [
    "ActiveMentorship",
    "AvailabilitySlot",
    "Mentor",
    "MentorshipRequest",
    "MentorshipRequestStatus",
    "MentorshipSession",
    "MentorshipSessionStatus",
    "MentorshipStatusItem",
]
