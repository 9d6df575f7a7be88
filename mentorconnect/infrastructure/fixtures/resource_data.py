"""Sample resources and engagement figures for the resources page."""

from __future__ import annotations

from datetime import date, datetime, timezone

from mentorconnect.domain.entities import (
    AudienceSegment,
    PersonSummary,
    Resource,
    ResourceActivity,
    ResourceType,
    ResourceViewPoint,
)

_AVATAR_BASE = "https://randomuser.me/api/portraits"
_PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200"

CURRENT_CREATOR = PersonSummary(name="Current User", avatar=f"{_AVATAR_BASE}/men/5.jpg")

_DAILY_VIEWS = (15, 22, 18, 30, 25, 42, 38, 29, 28)
_SEGMENTS = (
    ("First-year Students", 35),
    ("Second-year Students", 25),
    ("Upper-level Students", 30),
    ("Alumni", 10),
)


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def _shared_resources() -> list[Resource]:
    return [
        Resource(
            id="r1",
            title="Introduction to React",
            description="A comprehensive guide to React for beginners",
            type=ResourceType.ARTICLE,
            url="https://example.com/react-intro",
            created_by=PersonSummary("John Smith", f"{_AVATAR_BASE}/men/1.jpg"),
            created_at=_utc(2023, 9, 15, 10, 30),
            tags=("React", "JavaScript", "Frontend"),
            image_url=_PLACEHOLDER_IMAGE,
            likes=42,
            views=215,
        ),
        Resource(
            id="r2",
            title="Mastering Data Structures",
            description="Learn essential data structures for technical interviews",
            type=ResourceType.VIDEO,
            url="https://example.com/data-structures",
            created_by=PersonSummary("Sarah Johnson", f"{_AVATAR_BASE}/women/2.jpg"),
            created_at=_utc(2023, 10, 5, 14, 45),
            tags=("Algorithms", "Computer Science", "Interview Prep"),
            image_url=_PLACEHOLDER_IMAGE,
            likes=68,
            views=427,
        ),
    ]


def student_resources() -> list[Resource]:
    return _shared_resources()


def alumni_resources() -> list[Resource]:
    return [
        *_shared_resources(),
        Resource(
            id="r3",
            title="Career Guidance for Junior Developers",
            description="Tips and advice for advancing your career in software development",
            type=ResourceType.COURSE,
            url="https://example.com/career-guidance",
            created_by=PersonSummary("Michael Brown", f"{_AVATAR_BASE}/men/3.jpg"),
            created_at=_utc(2023, 10, 10, 9, 15),
            tags=("Career", "Mentoring", "Professional Development"),
            image_url=_PLACEHOLDER_IMAGE,
            likes=93,
            views=512,
        ),
    ]


def resource_activity(resource_id: str) -> ResourceActivity:
    """Engagement figures for ``resource_id`` over the sample nine-day window."""

    resource = Resource(
        id=resource_id,
        title="Introduction to React Hooks",
        description="",
        type=ResourceType.ARTICLE,
        url="",
        created_by=PersonSummary("John Smith", f"{_AVATAR_BASE}/men/1.jpg"),
        created_at=_utc(2023, 10, 1, 10, 0),
        likes=56,
        views=247,
    )
    views = tuple(
        ResourceViewPoint(day=date(2023, 10, offset), views=count)
        for offset, count in enumerate(_DAILY_VIEWS, start=1)
    )
    segments = tuple(AudienceSegment(name, percentage) for name, percentage in _SEGMENTS)
    return ResourceActivity(
        resource=resource,
        shares=23,
        comments=12,
        views=views,
        segments=segments,
    )


__all__ = [
    "CURRENT_CREATOR",
    "alumni_resources",
    "resource_activity",
    "student_resources",
]
