"""Domain entities describing the role dashboards."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .event import RecentEvent, UpcomingEvent
from .mentorship import ActiveMentorship, Mentor, MentorshipRequest, MentorshipStatusItem
from .person import PersonSummary
from .resource import Resource
from .role import Role


@dataclass(frozen=True)
class NavigationCard:
    title: str
    description: str
    path: str


@dataclass(frozen=True)
class StudentDashboardStats:
    mentorship_requests: int
    active_mentorships: int
    upcoming_events: int
    unread_messages: int
    saved_resources: int


@dataclass(frozen=True)
class AlumniDashboardStats:
    pending_requests: int
    active_mentorships: int
    completed_mentorships: int
    upcoming_events: int
    unread_messages: int


@dataclass(frozen=True)
class PlatformStats:
    total_users: int
    active_users: int
    total_mentorships: int
    active_mentorships: int
    total_events: int
    total_resources: int
    total_forum_topics: int
    total_forum_replies: int


@dataclass(frozen=True)
class RecentUser:
    id: str
    first_name: str
    last_name: str
    email: str
    role: Role
    created_at: datetime


@dataclass(frozen=True)
class RecentReport:
    id: str
    type: str
    reason: str
    status: str
    created_at: datetime
    reported_by: PersonSummary


@dataclass(frozen=True)
class StudentDashboard:
    stats: StudentDashboardStats
    recommended_mentors: tuple[Mentor, ...]
    mentorships: tuple[MentorshipStatusItem, ...]
    resources: tuple[Resource, ...]
    upcoming_events: tuple[UpcomingEvent, ...]


@dataclass(frozen=True)
class AlumniDashboard:
    stats: AlumniDashboardStats
    pending_requests: tuple[MentorshipRequest, ...]
    active_mentorships: tuple[ActiveMentorship, ...]
    upcoming_events: tuple[UpcomingEvent, ...]


@dataclass(frozen=True)
class AdminDashboard:
    stats: PlatformStats
    recent_users: tuple[RecentUser, ...]
    recent_events: tuple[RecentEvent, ...]
    recent_reports: tuple[RecentReport, ...]


__all__ = [
    "AdminDashboard",
    "AlumniDashboard",
    "AlumniDashboardStats",
    "NavigationCard",
    "PlatformStats",
    "RecentReport",
    "RecentUser",
    "StudentDashboard",
    "StudentDashboardStats",
]
