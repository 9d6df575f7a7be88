"""Analytics page for alumni."""

from __future__ import annotations

from datetime import datetime

from mentorconnect.domain.entities import AnalyticsReport
from mentorconnect.infrastructure.fixtures import analytics_report
from mentorconnect.infrastructure.reports import AnalyticsExport, export_analytics_report
from mentorconnect.utils.datetime import now_in_app_timezone

ANALYTICS_ERROR = "Failed to load analytics data. Please try again later."


class AnalyticsPage:
    def __init__(self, report: AnalyticsReport) -> None:
        self.report = report

    @classmethod
    def from_fixtures(cls) -> "AnalyticsPage":
        return cls(analytics_report())

    def export(self, *, now: datetime | None = None) -> AnalyticsExport:
        """Build the "Export Report" workbook."""

        stamp = (now or now_in_app_timezone()).strftime("%Y%m%d")
        return export_analytics_report(self.report, filename=f"mentorconnect-analytics-{stamp}.xlsx")


__all__ = ["ANALYTICS_ERROR", "AnalyticsPage"]
