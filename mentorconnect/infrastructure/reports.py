"""Excel export of the alumni analytics report."""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Iterable, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.worksheet.worksheet import Worksheet

from mentorconnect.domain.entities import AnalyticsReport

EXCEL_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
)
SHEET_TITLES = ("Mentorship", "Resources", "Events")


@dataclass
class AnalyticsExport:
    filename: str
    content: bytes
    content_type: str = EXCEL_CONTENT_TYPE


def _style_header(row: Sequence) -> None:
    header_fill = PatternFill(fill_type="solid", fgColor="4F46E5")
    header_font = Font(color="FFFFFFFF", bold=True)
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in row:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment


def _write_table(
    worksheet: Worksheet, headers: Sequence[str], rows: Iterable[Sequence[object]]
) -> None:
    if worksheet.max_row > 1 or worksheet["A1"].value is not None:
        worksheet.append([])
    worksheet.append(list(headers))
    _style_header(worksheet[worksheet.max_row])
    for row in rows:
        worksheet.append(list(row))


def _write_mentorship(worksheet: Worksheet, report: AnalyticsReport) -> None:
    data = report.mentorship
    _write_table(
        worksheet,
        ("Metric", "Value"),
        [
            ("Total mentees", data.total_mentees),
            ("Active mentorships", data.active_mentorships),
            ("Completed mentorships", data.completed_mentorships),
            ("Average session length (minutes)", data.average_session_length),
            ("Mentorship hours", data.mentorship_hours),
            ("Satisfaction rating", data.satisfaction_rating),
        ],
    )
    _write_table(
        worksheet,
        ("Topic", "Mentees"),
        [(topic.topic, topic.count) for topic in data.most_popular_topics],
    )
    progress = data.mentee_progress_rates
    _write_table(
        worksheet,
        ("Progress", "Percentage"),
        [("High", progress.high), ("Medium", progress.medium), ("Low", progress.low)],
    )


def _write_resources(worksheet: Worksheet, report: AnalyticsReport) -> None:
    data = report.resources
    _write_table(
        worksheet,
        ("Metric", "Value"),
        [
            ("Resources shared", data.total_resources_shared),
            ("Views", data.resource_views),
            ("Downloads", data.resource_downloads),
            ("Impact rating", data.resource_impact_rating),
        ],
    )
    _write_table(
        worksheet,
        ("Resource", "Views", "Downloads"),
        [(item.title, item.views, item.downloads) for item in data.most_popular_resources],
    )
    _write_table(
        worksheet,
        ("Category", "Resources"),
        [(item.category, item.count) for item in data.resources_by_category],
    )


def _write_events(worksheet: Worksheet, report: AnalyticsReport) -> None:
    data = report.events
    _write_table(
        worksheet,
        ("Metric", "Value"),
        [
            ("Events hosted", data.total_events_hosted),
            ("Upcoming events", data.upcoming_events),
            ("Past events", data.past_events),
            ("Total attendees", data.total_attendees),
            ("Average attendance", data.average_attendance),
            ("Satisfaction rating", data.event_satisfaction_rating),
        ],
    )


def create_analytics_workbook(report: AnalyticsReport) -> Workbook:
    """Return a workbook with one sheet per analytics tab."""

    workbook = Workbook()
    mentorship_sheet = workbook.active
    mentorship_sheet.title = SHEET_TITLES[0]
    _write_mentorship(mentorship_sheet, report)
    _write_resources(workbook.create_sheet(SHEET_TITLES[1]), report)
    _write_events(workbook.create_sheet(SHEET_TITLES[2]), report)

    for worksheet in workbook.worksheets:
        worksheet.column_dimensions["A"].width = 36
        worksheet.column_dimensions["B"].width = 14
        worksheet.column_dimensions["C"].width = 14
    return workbook


def export_analytics_report(report: AnalyticsReport, *, filename: str) -> AnalyticsExport:
    """Serialize ``report`` into an ``.xlsx`` payload."""

    buffer = BytesIO()
    create_analytics_workbook(report).save(buffer)
    return AnalyticsExport(filename=filename, content=buffer.getvalue())


__all__ = [
    "AnalyticsExport",
    "EXCEL_CONTENT_TYPE",
    "SHEET_TITLES",
    "create_analytics_workbook",
    "export_analytics_report",
]
