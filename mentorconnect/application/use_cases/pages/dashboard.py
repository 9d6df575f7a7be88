"""Dashboard page: quick navigation and the role dashboards."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from mentorconnect.domain.entities import (
    AdminDashboard,
    AlumniDashboard,
    MentorshipRequest,
    NavigationCard,
    RecentReport,
    Role,
    StudentDashboard,
)
from mentorconnect.infrastructure.fixtures import (
    admin_dashboard,
    alumni_dashboard,
    student_dashboard,
)

DASHBOARD_ERROR = "Failed to load dashboard data. Please try again later."

REPORT_RESOLVED = "resolved"
REPORT_DISMISSED = "dismissed"


def navigation_cards(role: Role) -> tuple[NavigationCard, ...]:
    prefix = f"/{role.value}"
    mentorship_description = (
        "Manage your mentees" if role is Role.ALUMNI else "Find mentors and manage requests"
    )
    cards = [
        NavigationCard("Profile", "View and update your profile information", f"{prefix}/profile"),
        NavigationCard("Mentorship", mentorship_description, f"{prefix}/mentorship"),
        NavigationCard("Resources", "Access learning resources and materials", f"{prefix}/resources"),
        NavigationCard("Messages", "Check your messages and conversations", f"{prefix}/messages"),
        NavigationCard("Events", "View upcoming events and workshops", f"{prefix}/events"),
        NavigationCard("Forum", "Join discussions with peers and mentors", f"{prefix}/forum"),
    ]
    if role is Role.ALUMNI:
        cards.append(
            NavigationCard(
                "Analytics", "View impact and mentorship statistics", "/alumni/analytics"
            )
        )
    return tuple(cards)


class StudentDashboardPage:
    def __init__(self, dashboard: StudentDashboard) -> None:
        self.dashboard = dashboard

    @classmethod
    def from_fixtures(cls, now: datetime) -> "StudentDashboardPage":
        return cls(student_dashboard(now))


class AlumniDashboardPage:
    """Alumni dashboard with inline accept/decline of pending requests."""

    def __init__(self, dashboard: AlumniDashboard) -> None:
        self.dashboard = dashboard

    @classmethod
    def from_fixtures(cls, now: datetime) -> "AlumniDashboardPage":
        return cls(alumni_dashboard(now))

    def accept_request(self, request_id: str) -> MentorshipRequest:
        request = self._pop_request(request_id)
        stats = self.dashboard.stats
        self.dashboard = replace(
            self.dashboard,
            stats=replace(
                stats,
                pending_requests=stats.pending_requests - 1,
                active_mentorships=stats.active_mentorships + 1,
            ),
        )
        return request

    def decline_request(self, request_id: str) -> MentorshipRequest:
        request = self._pop_request(request_id)
        stats = self.dashboard.stats
        self.dashboard = replace(
            self.dashboard,
            stats=replace(stats, pending_requests=stats.pending_requests - 1),
        )
        return request

    def _pop_request(self, request_id: str) -> MentorshipRequest:
        remaining = []
        found = None
        for request in self.dashboard.pending_requests:
            if request.id == request_id:
                found = request
            else:
                remaining.append(request)
        if found is None:
            raise ValueError("Mentorship request not found")
        self.dashboard = replace(self.dashboard, pending_requests=tuple(remaining))
        return found


class AdminDashboardPage:
    def __init__(self, dashboard: AdminDashboard) -> None:
        self.dashboard = dashboard

    @classmethod
    def from_fixtures(cls, now: datetime) -> "AdminDashboardPage":
        return cls(admin_dashboard(now))

    def resolve_report(self, report_id: str) -> RecentReport:
        return self._set_report_status(report_id, REPORT_RESOLVED)

    def dismiss_report(self, report_id: str) -> RecentReport:
        return self._set_report_status(report_id, REPORT_DISMISSED)

    def _set_report_status(self, report_id: str, status: str) -> RecentReport:
        updated = None
        reports = []
        for report in self.dashboard.recent_reports:
            if report.id == report_id:
                report = replace(report, status=status)
                updated = report
            reports.append(report)
        if updated is None:
            raise ValueError("Report not found")
        self.dashboard = replace(self.dashboard, recent_reports=tuple(reports))
        return updated


DashboardPage = StudentDashboardPage | AlumniDashboardPage | AdminDashboardPage


__all__ = [
    "AdminDashboardPage",
    "AlumniDashboardPage",
    "DASHBOARD_ERROR",
    "DashboardPage",
    "StudentDashboardPage",
    "navigation_cards",
]
