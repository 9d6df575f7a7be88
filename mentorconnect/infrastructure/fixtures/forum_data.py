"""Sample posts and comments shown on the forum page."""

from __future__ import annotations

from datetime import datetime, timezone

from mentorconnect.domain.entities import ForumComment, ForumPost, PersonSummary

_AVATAR_BASE = "https://randomuser.me/api/portraits"

CURRENT_AUTHOR = PersonSummary(name="Current User", avatar=f"{_AVATAR_BASE}/men/5.jpg")
DEFAULT_CATEGORY = "Career Advice"


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def student_posts() -> list[ForumPost]:
    return [
        ForumPost(
            id="p1",
            title="Best practices for React hooks",
            content=(
                "I'm learning about React hooks and would like to know some best "
                "practices..."
            ),
            author=PersonSummary("John Smith", f"{_AVATAR_BASE}/men/1.jpg"),
            category="Web Development",
            created_at=_utc(2023, 10, 15, 14, 30),
            likes=42,
            comments=15,
            views=215,
            tags=("React", "JavaScript", "Hooks"),
        ),
        ForumPost(
            id="p2",
            title="Career advice needed",
            content=(
                "I'm a junior developer looking to transition into full-stack "
                "development..."
            ),
            author=PersonSummary("Sarah Johnson", f"{_AVATAR_BASE}/women/2.jpg"),
            category="Career Advice",
            created_at=_utc(2023, 10, 16, 9, 15),
            likes=28,
            comments=8,
            views=156,
            tags=("Career", "Full Stack", "Advice"),
            is_liked=True,
        ),
    ]


def alumni_posts() -> list[ForumPost]:
    return [
        ForumPost(
            id="p1",
            title="Industry insights: Current trends in software development",
            content=(
                "As someone who's been in the industry for 5+ years, I'd like to "
                "share some observations about current trends..."
            ),
            author=PersonSummary("Michael Chen", f"{_AVATAR_BASE}/men/1.jpg"),
            category="Industry Insights",
            created_at=_utc(2023, 10, 15, 14, 30),
            likes=42,
            comments=15,
            views=215,
            tags=("Industry", "Trends", "Software Development"),
        ),
        ForumPost(
            id="p2",
            title="Tips for successful technical interviews",
            content=(
                "Having conducted numerous technical interviews, here are some key "
                "tips for students preparing for interviews..."
            ),
            author=PersonSummary("Sarah Johnson", f"{_AVATAR_BASE}/women/2.jpg"),
            category="Interview Prep",
            created_at=_utc(2023, 10, 16, 9, 15),
            likes=28,
            comments=8,
            views=156,
            tags=("Interviews", "Career", "Tips"),
            is_liked=True,
        ),
    ]


def student_comments() -> list[ForumComment]:
    return [
        ForumComment(
            id="c1",
            content="Great question! Here are some tips I've learned...",
            author=PersonSummary("Mike Wilson", f"{_AVATAR_BASE}/men/3.jpg"),
            created_at=_utc(2023, 10, 15, 15, 0),
            likes=12,
        ),
        ForumComment(
            id="c2",
            content="I recommend checking out the official React documentation...",
            author=PersonSummary("Emily Chen", f"{_AVATAR_BASE}/women/4.jpg"),
            created_at=_utc(2023, 10, 15, 16, 30),
            likes=8,
            is_liked=True,
        ),
    ]


def alumni_comments() -> list[ForumComment]:
    return [
        ForumComment(
            id="c1",
            content="Great insights! I'd also add that...",
            author=PersonSummary("David Wilson", f"{_AVATAR_BASE}/men/3.jpg"),
            created_at=_utc(2023, 10, 15, 15, 0),
            likes=12,
        ),
        ForumComment(
            id="c2",
            content="This aligns with what I'm seeing in my company...",
            author=PersonSummary("Lisa Chen", f"{_AVATAR_BASE}/women/4.jpg"),
            created_at=_utc(2023, 10, 15, 16, 30),
            likes=8,
            is_liked=True,
        ),
    ]


__all__ = [
    "CURRENT_AUTHOR",
    "DEFAULT_CATEGORY",
    "alumni_comments",
    "alumni_posts",
    "student_comments",
    "student_posts",
]
