"""Static sample data standing in for the platform API."""

from .analytics_data import analytics_report
from .dashboard_data import admin_dashboard, alumni_dashboard, student_dashboard
from .notification_data import dummy_notifications

__all__ = [
    "admin_dashboard",
    "alumni_dashboard",
    "analytics_report",
    "dummy_notifications",
    "student_dashboard",
]
