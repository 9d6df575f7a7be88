"""Static notifications served by the simulated notification fetch."""

from __future__ import annotations

from datetime import datetime, timedelta

from mentorconnect.domain.entities import Notification, NotificationSender, NotificationType
from mentorconnect.utils import now_in_app_timezone

_AVATAR_BASE = "https://randomuser.me/api/portraits"


def dummy_notifications(now: datetime | None = None) -> list[Notification]:
    """Return the ten sample notifications with timestamps relative to ``now``."""

    reference = now or now_in_app_timezone()

    def days_ago(days: int) -> datetime:
        return reference - timedelta(days=days)

    return [
        Notification(
            id="1",
            title="New Mentorship Request",
            message=(
                "Raj Sharma has requested you as a mentor. Review their profile "
                "and respond to their request."
            ),
            type=NotificationType.INFO,
            timestamp=days_ago(0),
            is_read=False,
            link="/mentorship/requests",
            sender=NotificationSender(
                id="user1", name="Raj Sharma", avatar=f"{_AVATAR_BASE}/men/32.jpg"
            ),
        ),
        Notification(
            id="2",
            title="Session Reminder",
            message=(
                "Your mentoring session with Priya Patel is scheduled for "
                "tomorrow at 2:00 PM."
            ),
            type=NotificationType.WARNING,
            timestamp=days_ago(1),
            is_read=True,
            link="/calendar",
            sender=NotificationSender(
                id="user2", name="Priya Patel", avatar=f"{_AVATAR_BASE}/women/44.jpg"
            ),
        ),
        Notification(
            id="3",
            title="New Resource Available",
            message=(
                'A new resource "Introduction to Machine Learning" has been '
                "added to your learning path."
            ),
            type=NotificationType.SUCCESS,
            timestamp=days_ago(2),
            is_read=False,
            link="/resources/ml-intro",
        ),
        Notification(
            id="4",
            title="Profile Update Required",
            message=(
                "Please complete your profile information to help us match you "
                "with the right mentors."
            ),
            type=NotificationType.ERROR,
            timestamp=days_ago(3),
            is_read=False,
            link="/profile/edit",
        ),
        Notification(
            id="5",
            title="Feedback Received",
            message="Arjun Singh has left feedback on your recent mentoring session.",
            type=NotificationType.INFO,
            timestamp=days_ago(4),
            is_read=True,
            link="/feedback",
            sender=NotificationSender(
                id="user3", name="Arjun Singh", avatar=f"{_AVATAR_BASE}/men/67.jpg"
            ),
        ),
        Notification(
            id="6",
            title="New Forum Post",
            message='There\'s a new discussion in the "Career Transition" forum you follow.',
            type=NotificationType.INFO,
            timestamp=days_ago(5),
            is_read=True,
            link="/forum/career-transition",
        ),
        Notification(
            id="7",
            title="Certificate Available",
            message=(
                'Your certificate for completing "Leadership Skills" course is '
                "now available."
            ),
            type=NotificationType.SUCCESS,
            timestamp=days_ago(6),
            is_read=False,
            link="/certificates",
        ),
        Notification(
            id="8",
            title="Account Verification",
            message=(
                "Please verify your email address to access all features of "
                "MentorConnect."
            ),
            type=NotificationType.WARNING,
            timestamp=days_ago(7),
            is_read=False,
            link="/settings/verify-email",
        ),
        Notification(
            id="9",
            title="Meeting Invitation",
            message=(
                "Neha Gupta has invited you to join a group mentoring session on "
                "Data Science."
            ),
            type=NotificationType.INFO,
            timestamp=days_ago(2),
            is_read=False,
            link="/meetings/invitation",
            sender=NotificationSender(
                id="user4", name="Neha Gupta", avatar=f"{_AVATAR_BASE}/women/28.jpg"
            ),
        ),
        Notification(
            id="10",
            title="Project Feedback Request",
            message="Vikram Malhotra is requesting feedback on their portfolio project.",
            type=NotificationType.WARNING,
            timestamp=days_ago(1),
            is_read=False,
            link="/feedback/requests",
            sender=NotificationSender(
                id="user5", name="Vikram Malhotra", avatar=f"{_AVATAR_BASE}/men/45.jpg"
            ),
        ),
    ]


__all__ = ["dummy_notifications"]
