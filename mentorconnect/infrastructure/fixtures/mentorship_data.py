"""Sample data for the student and alumni mentorship boards."""

from __future__ import annotations

from datetime import datetime, timezone

from mentorconnect.domain.entities import (
    AvailabilitySlot,
    Mentor,
    MentorshipRequest,
    MentorshipRequestStatus,
    MentorshipSession,
    MentorshipSessionStatus,
    PersonSummary,
)

_AVATAR_BASE = "https://randomuser.me/api/portraits"


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def student_mentors() -> list[Mentor]:
    return [
        Mentor(
            id="m1",
            name="John Smith",
            avatar=f"{_AVATAR_BASE}/men/1.jpg",
            title="Senior Software Engineer",
            company="TechCorp Inc.",
            expertise=("Web Development", "System Design", "Career Guidance"),
            availability="3-5 hours/week",
            rating=4.9,
            bio=(
                "Experienced software engineer passionate about mentoring the next "
                "generation of developers."
            ),
        ),
        Mentor(
            id="m2",
            name="Sarah Johnson",
            avatar=f"{_AVATAR_BASE}/women/2.jpg",
            title="Product Manager",
            company="InnovateTech",
            expertise=("Product Management", "UX Design", "Career Transitions"),
            availability="2-4 hours/week",
            rating=4.8,
            bio="Product leader with experience in consumer and enterprise products.",
        ),
    ]


def student_requests() -> list[MentorshipRequest]:
    return [
        MentorshipRequest(
            id="r1",
            counterpart=PersonSummary(
                name="John Smith", avatar=f"{_AVATAR_BASE}/men/1.jpg", id="m1"
            ),
            topic="",
            message=(
                "I would love to get your insights on transitioning from backend to "
                "full-stack development."
            ),
            status=MentorshipRequestStatus.PENDING,
            request_date=_utc(2023, 10, 15, 14, 30),
        )
    ]


def student_sessions() -> list[MentorshipSession]:
    return [
        MentorshipSession(
            id="s1",
            counterpart=PersonSummary(
                name="Sarah Johnson", avatar=f"{_AVATAR_BASE}/women/2.jpg", id="m2"
            ),
            topic="Product Management Career Path",
            status=MentorshipSessionStatus.SCHEDULED,
            scheduled_date=_utc(2023, 10, 20, 15, 0),
            duration=60,
            notes="Discussion about transitioning into product management roles.",
        )
    ]


def alumni_requests() -> list[MentorshipRequest]:
    return [
        MentorshipRequest(
            id="1",
            counterpart=PersonSummary(
                name="John Smith", avatar=f"{_AVATAR_BASE}/men/1.jpg", id="student1"
            ),
            topic="Career Guidance in Software Engineering",
            message=(
                "I would love to get your insights on transitioning from backend to "
                "full-stack development."
            ),
            status=MentorshipRequestStatus.PENDING,
            request_date=_utc(2023, 10, 15, 14, 30),
        ),
        MentorshipRequest(
            id="2",
            counterpart=PersonSummary(
                name="Sarah Johnson", avatar=f"{_AVATAR_BASE}/women/2.jpg", id="student2"
            ),
            topic="Interview Preparation",
            message=(
                "I have an upcoming interview with a tech company and would "
                "appreciate some guidance."
            ),
            status=MentorshipRequestStatus.ACCEPTED,
            request_date=_utc(2023, 10, 10, 9, 15),
        ),
        MentorshipRequest(
            id="3",
            counterpart=PersonSummary(
                name="Michael Chen", avatar=f"{_AVATAR_BASE}/men/3.jpg", id="student3"
            ),
            topic="Project Review",
            message="I would like you to review my portfolio project and provide feedback.",
            status=MentorshipRequestStatus.REJECTED,
            request_date=_utc(2023, 10, 5, 16, 45),
        ),
    ]


def alumni_sessions() -> list[MentorshipSession]:
    return [
        MentorshipSession(
            id="101",
            counterpart=PersonSummary(
                name="Sarah Johnson", avatar=f"{_AVATAR_BASE}/women/2.jpg", id="student2"
            ),
            topic="Interview Preparation",
            status=MentorshipSessionStatus.SCHEDULED,
            scheduled_date=_utc(2023, 10, 20, 15, 0),
            duration=60,
        ),
        MentorshipSession(
            id="102",
            counterpart=PersonSummary(
                name="Emily Wong", avatar=f"{_AVATAR_BASE}/women/4.jpg", id="student4"
            ),
            topic="Resume Review",
            status=MentorshipSessionStatus.COMPLETED,
            scheduled_date=_utc(2023, 10, 12, 11, 0),
            duration=45,
            notes=(
                "Provided feedback on resume structure and content. Suggested "
                "highlighting project experiences more prominently."
            ),
        ),
    ]


def availability_slots() -> list[AvailabilitySlot]:
    return [
        AvailabilitySlot(id="avail1", day="Monday", start_time="14:00", end_time="16:00"),
        AvailabilitySlot(id="avail2", day="Wednesday", start_time="10:00", end_time="12:00"),
        AvailabilitySlot(
            id="avail3",
            day="Friday",
            start_time="15:00",
            end_time="17:00",
            is_recurring=False,
        ),
    ]


__all__ = [
    "alumni_requests",
    "alumni_sessions",
    "availability_slots",
    "student_mentors",
    "student_requests",
    "student_sessions",
]
