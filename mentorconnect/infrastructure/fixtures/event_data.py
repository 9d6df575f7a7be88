"""Sample events listed on the events page."""

from __future__ import annotations

from datetime import date

from mentorconnect.domain.entities import Event, EventType, PersonSummary

_AVATAR_BASE = "https://randomuser.me/api/portraits"
_PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200"

CURRENT_ORGANIZER = PersonSummary(name="Current User", avatar=f"{_AVATAR_BASE}/men/5.jpg")


def _shared_events() -> list[Event]:
    return [
        Event(
            id="e1",
            title="Web Development Workshop",
            description="Learn modern web development techniques and best practices",
            date=date(2023, 11, 15),
            time="14:00 - 17:00",
            location="Virtual Event",
            type=EventType.WORKSHOP,
            organizer=PersonSummary("Tech Academy", f"{_AVATAR_BASE}/men/1.jpg"),
            attendees=45,
            max_attendees=50,
            tags=("Web Development", "JavaScript", "React"),
            image_url=_PLACEHOLDER_IMAGE,
        ),
        Event(
            id="e2",
            title="Career Networking Event",
            description="Connect with industry professionals and explore career opportunities",
            date=date(2023, 11, 20),
            time="18:00 - 21:00",
            location="Conference Center A",
            type=EventType.NETWORKING,
            organizer=PersonSummary("Career Services", f"{_AVATAR_BASE}/women/2.jpg"),
            attendees=120,
            max_attendees=150,
            tags=("Networking", "Career Development"),
            is_registered=True,
            image_url=_PLACEHOLDER_IMAGE,
        ),
    ]


def student_events() -> list[Event]:
    return _shared_events()


def alumni_events() -> list[Event]:
    hosted = Event(
        id="e3",
        title="Interview Techniques Seminar",
        description="Host a session to help students prepare for technical interviews",
        date=date(2023, 11, 25),
        time="15:00 - 17:00",
        location="Virtual Event",
        type=EventType.SEMINAR,
        organizer=CURRENT_ORGANIZER,
        attendees=32,
        max_attendees=40,
        tags=("Interviews", "Career Prep", "Mentoring"),
        is_registered=True,
        is_hosting=True,
        image_url=_PLACEHOLDER_IMAGE,
    )
    return [*_shared_events(), hosted]


__all__ = ["CURRENT_ORGANIZER", "alumni_events", "student_events"]
