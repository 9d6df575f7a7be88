"""Domain entities describing the alumni analytics page."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TopicCount:
    topic: str
    count: int


@dataclass(frozen=True)
class PopularResource:
    title: str
    views: int
    downloads: int

    @property
    def download_rate(self) -> float:
        return self.downloads / self.views * 100 if self.views else 0.0


@dataclass(frozen=True)
class CategoryCount:
    category: str
    count: int


@dataclass(frozen=True)
class MenteeProgress:
    high: int
    medium: int
    low: int


@dataclass(frozen=True)
class MentorshipAnalytics:
    total_mentees: int
    active_mentorships: int
    completed_mentorships: int
    average_session_length: int
    mentorship_hours: int
    most_popular_topics: tuple[TopicCount, ...]
    satisfaction_rating: float
    mentee_progress_rates: MenteeProgress


@dataclass(frozen=True)
class ResourceAnalytics:
    total_resources_shared: int
    resource_views: int
    resource_downloads: int
    most_popular_resources: tuple[PopularResource, ...]
    resource_impact_rating: float
    resources_by_category: tuple[CategoryCount, ...]


@dataclass(frozen=True)
class EventAnalytics:
    total_events_hosted: int
    upcoming_events: int
    past_events: int
    total_attendees: int
    average_attendance: int
    event_satisfaction_rating: float


@dataclass(frozen=True)
class AnalyticsReport:
    """Everything shown across the three analytics tabs."""

    mentorship: MentorshipAnalytics
    resources: ResourceAnalytics
    events: EventAnalytics


__all__ = [
    "AnalyticsReport",
    "CategoryCount",
    "EventAnalytics",
    "MenteeProgress",
    "MentorshipAnalytics",
    "PopularResource",
    "ResourceAnalytics",
    "TopicCount",
]
