"""Mentorship page: the student board and the alumni board."""

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timedelta

from mentorconnect.domain.entities import (
    AvailabilitySlot,
    Mentor,
    MentorshipRequest,
    MentorshipRequestStatus,
    MentorshipSession,
    MentorshipSessionStatus,
    PersonSummary,
)
from mentorconnect.infrastructure.fixtures.mentorship_data import (
    alumni_requests,
    alumni_sessions,
    availability_slots,
    student_mentors,
    student_requests,
    student_sessions,
)
from mentorconnect.utils.datetime import now_in_app_timezone

REQUEST_MESSAGE = "I would like to request mentorship in your area of expertise."
SESSION_LEAD_TIME = timedelta(days=7)
SESSION_DURATION_MINUTES = 60
SLOT_PREFIX = "avail"


def _find(items, item_id: str, label: str):
    for index, item in enumerate(items):
        if item.id == item_id:
            return index, item
    raise ValueError(f"{label} not found")


class StudentMentorshipBoard:
    """Mentor search plus the student's own requests and sessions."""

    def __init__(
        self,
        *,
        mentors: list[Mentor],
        requests: list[MentorshipRequest],
        sessions: list[MentorshipSession],
    ) -> None:
        self.mentors = mentors
        self.requests = requests
        self.sessions = sessions

    @classmethod
    def from_fixtures(cls) -> "StudentMentorshipBoard":
        return cls(
            mentors=student_mentors(),
            requests=student_requests(),
            sessions=student_sessions(),
        )

    def search_mentors(self, query: str = "") -> list[Mentor]:
        needle = query.strip().lower()
        if not needle:
            return list(self.mentors)
        return [
            mentor
            for mentor in self.mentors
            if needle in mentor.name.lower()
            or any(needle in skill.lower() for skill in mentor.expertise)
        ]

    def request_mentorship(
        self, mentor_id: str, *, now: datetime | None = None
    ) -> MentorshipRequest:
        _, mentor = _find(self.mentors, mentor_id, "Mentor")
        request = MentorshipRequest(
            id=f"new-{uuid.uuid4().hex[:8]}",
            counterpart=PersonSummary(name=mentor.name, avatar=mentor.avatar, id=mentor.id),
            topic="",
            message=REQUEST_MESSAGE,
            status=MentorshipRequestStatus.PENDING,
            request_date=now or now_in_app_timezone(),
        )
        self.requests.append(request)
        return request

    def cancel_request(self, request_id: str) -> MentorshipRequest:
        index, request = _find(self.requests, request_id, "Mentorship request")
        updated = replace(request, status=MentorshipRequestStatus.REJECTED)
        self.requests[index] = updated
        return updated


class AlumniMentorshipBoard:
    """Incoming requests, scheduled sessions and the alumnus' availability."""

    def __init__(
        self,
        *,
        requests: list[MentorshipRequest],
        sessions: list[MentorshipSession],
        slots: list[AvailabilitySlot],
        is_available: bool = True,
    ) -> None:
        self.requests = requests
        self.sessions = sessions
        self.slots = slots
        self.is_available = is_available

    @classmethod
    def from_fixtures(cls) -> "AlumniMentorshipBoard":
        return cls(
            requests=alumni_requests(),
            sessions=alumni_sessions(),
            slots=availability_slots(),
        )

    def pending_requests(self, search: str = "") -> list[MentorshipRequest]:
        needle = search.strip().lower()
        return [
            request
            for request in self.requests
            if request.status is MentorshipRequestStatus.PENDING
            and needle in request.counterpart.name.lower()
        ]

    def accept_request(
        self, request_id: str, *, now: datetime | None = None
    ) -> MentorshipSession:
        """Accept ``request_id`` and schedule a first session a week out."""

        index, request = _find(self.requests, request_id, "Mentorship request")
        self.requests[index] = replace(request, status=MentorshipRequestStatus.ACCEPTED)
        session = MentorshipSession(
            id=f"new-{request.id}",
            counterpart=request.counterpart,
            topic=request.topic,
            status=MentorshipSessionStatus.SCHEDULED,
            scheduled_date=(now or now_in_app_timezone()) + SESSION_LEAD_TIME,
            duration=SESSION_DURATION_MINUTES,
        )
        self.sessions.append(session)
        return session

    def reject_request(self, request_id: str) -> MentorshipRequest:
        index, request = _find(self.requests, request_id, "Mentorship request")
        updated = replace(request, status=MentorshipRequestStatus.REJECTED)
        self.requests[index] = updated
        return updated

    def toggle_availability(self) -> bool:
        self.is_available = not self.is_available
        return self.is_available

    def add_slot(self) -> AvailabilitySlot:
        slot = AvailabilitySlot(
            id=f"{SLOT_PREFIX}{self._next_slot_number()}",
            day="Monday",
            start_time="09:00",
            end_time="10:00",
            is_recurring=True,
        )
        self.slots.append(slot)
        return slot

    def remove_slot(self, slot_id: str) -> None:
        _find(self.slots, slot_id, "Availability slot")
        self.slots = [slot for slot in self.slots if slot.id != slot_id]

    def _next_slot_number(self) -> int:
        numbers = [
            int(slot.id[len(SLOT_PREFIX):])
            for slot in self.slots
            if slot.id.startswith(SLOT_PREFIX) and slot.id[len(SLOT_PREFIX):].isdigit()
        ]
        return max(numbers, default=0) + 1


__all__ = [
    "AlumniMentorshipBoard",
    "REQUEST_MESSAGE",
    "StudentMentorshipBoard",
]
