"""Tests for the analytics Excel export."""

from __future__ import annotations

from datetime import datetime, timezone
from io import BytesIO

from openpyxl import load_workbook

from mentorconnect.application.use_cases.pages import AnalyticsPage
from mentorconnect.infrastructure.reports import EXCEL_CONTENT_TYPE, SHEET_TITLES


def test_export_has_one_sheet_per_tab() -> None:
    page = AnalyticsPage.from_fixtures()

    export = page.export(now=datetime(2024, 3, 14, tzinfo=timezone.utc))

    assert export.filename == "mentorconnect-analytics-20240314.xlsx"
    assert export.content_type == EXCEL_CONTENT_TYPE
    workbook = load_workbook(BytesIO(export.content))
    assert workbook.sheetnames == list(SHEET_TITLES)


def test_mentorship_sheet_contains_summary_and_topics() -> None:
    export = AnalyticsPage.from_fixtures().export()
    sheet = load_workbook(BytesIO(export.content))["Mentorship"]

    rows = [tuple(cell.value for cell in row[:2]) for row in sheet.iter_rows()]

    assert rows[0] == ("Metric", "Value")
    assert ("Total mentees", 15) in rows
    assert ("Career Guidance", 8) in rows
    assert ("High", 60) in rows


def test_resources_sheet_lists_popular_resources() -> None:
    export = AnalyticsPage.from_fixtures().export()
    sheet = load_workbook(BytesIO(export.content))["Resources"]

    rows = [tuple(cell.value for cell in row[:3]) for row in sheet.iter_rows()]

    assert ("Interview Preparation Guide", 89, 42) in rows
