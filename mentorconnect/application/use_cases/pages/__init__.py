"""Per-page state and operations."""

from .analytics import ANALYTICS_ERROR, AnalyticsPage
from .dashboard import (
    DASHBOARD_ERROR,
    AdminDashboardPage,
    AlumniDashboardPage,
    StudentDashboardPage,
    navigation_cards,
)
from .events import EventsPage
from .forum import ForumPage
from .mentorship import AlumniMentorshipBoard, StudentMentorshipBoard
from .messages import AlumniConversationView, MessagesPage, StudentConversationView
from .profile import (
    ProfileView,
    alumni_profile_view,
    load_profile,
    student_profile_view,
    update_profile,
    upload_profile_image,
)
from .registry import PageLoad, PageRegistry
from .resources import ResourcesPage

__all__ = [
    "ANALYTICS_ERROR",
    "AdminDashboardPage",
    "AlumniConversationView",
    "AlumniDashboardPage",
    "AlumniMentorshipBoard",
    "AnalyticsPage",
    "DASHBOARD_ERROR",
    "EventsPage",
    "ForumPage",
    "MessagesPage",
    "PageLoad",
    "PageRegistry",
    "ProfileView",
    "ResourcesPage",
    "StudentConversationView",
    "StudentDashboardPage",
    "StudentMentorshipBoard",
    "alumni_profile_view",
    "load_profile",
    "navigation_cards",
    "student_profile_view",
    "update_profile",
    "upload_profile_image",
]
