"""Sample figures for the alumni analytics page."""

from __future__ import annotations

from mentorconnect.domain.entities import (
    AnalyticsReport,
    CategoryCount,
    EventAnalytics,
    MenteeProgress,
    MentorshipAnalytics,
    PopularResource,
    ResourceAnalytics,
    TopicCount,
)


def analytics_report() -> AnalyticsReport:
    return AnalyticsReport(
        mentorship=MentorshipAnalytics(
            total_mentees=15,
            active_mentorships=4,
            completed_mentorships=11,
            average_session_length=45,
            mentorship_hours=72,
            most_popular_topics=(
                TopicCount("Career Guidance", 8),
                TopicCount("Technical Skills", 6),
                TopicCount("Interview Preparation", 5),
            ),
            satisfaction_rating=4.7,
            mentee_progress_rates=MenteeProgress(high=60, medium=30, low=10),
        ),
        resources=ResourceAnalytics(
            total_resources_shared=24,
            resource_views=567,
            resource_downloads=203,
            most_popular_resources=(
                PopularResource("Interview Preparation Guide", views=89, downloads=42),
                PopularResource("Resume Templates", views=76, downloads=38),
                PopularResource("Full Stack Development Roadmap", views=64, downloads=29),
            ),
            resource_impact_rating=4.5,
            resources_by_category=(
                CategoryCount("Technical", 10),
                CategoryCount("Career", 8),
                CategoryCount("Academic", 6),
            ),
        ),
        events=EventAnalytics(
            total_events_hosted=12,
            upcoming_events=2,
            past_events=10,
            total_attendees=342,
            average_attendance=28,
            event_satisfaction_rating=4.6,
        ),
    )


__all__ = ["analytics_report"]
