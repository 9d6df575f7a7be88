"""Role dashboard endpoints."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from fastapi import APIRouter, Depends

from mentorconnect.application.use_cases.pages import (
    DASHBOARD_ERROR,
    AdminDashboardPage,
    AlumniDashboardPage,
    PageRegistry,
    StudentDashboardPage,
    navigation_cards,
)
from mentorconnect.application.use_cases.pages.dashboard import DashboardPage
from mentorconnect.domain.entities import MentorshipRequest, RecentReport, Role, User
from mentorconnect.interfaces.api.dependencies import get_current_user, get_page_registry
from mentorconnect.interfaces.api.routes_helpers import (
    not_found,
    page_key,
    require_page,
    require_role,
    select_or_raise,
)
from mentorconnect.interfaces.api.schemas import (
    AdminDashboardRead,
    AlumniDashboardRead,
    DashboardRead,
    PageRead,
    StudentDashboardRead,
)
from mentorconnect.utils.datetime import now_in_app_timezone

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _page_factory(user: User) -> Callable[[], DashboardPage]:
    now = now_in_app_timezone()
    return select_or_raise(
        user,
        student_view=lambda: partial(StudentDashboardPage.from_fixtures, now),
        alumni_view=lambda: partial(AlumniDashboardPage.from_fixtures, now),
        admin_view=lambda: partial(AdminDashboardPage.from_fixtures, now),
    )


def _to_read_model(page: DashboardPage, role: Role) -> DashboardRead:
    cards = list(navigation_cards(role))
    if isinstance(page, AdminDashboardPage):
        return AdminDashboardRead(navigation=cards, dashboard=page.dashboard)
    if isinstance(page, AlumniDashboardPage):
        return AlumniDashboardRead(navigation=cards, dashboard=page.dashboard)
    return StudentDashboardRead(navigation=cards, dashboard=page.dashboard)


async def _require_dashboard(user: User, pages: PageRegistry) -> DashboardPage:
    return await require_page(
        pages,
        page_key("dashboard", user),
        _page_factory(user),
        error_message=DASHBOARD_ERROR,
    )


@router.get("", response_model=PageRead[DashboardRead])
async def read_dashboard(
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> PageRead[DashboardRead]:
    """Return the dashboard for the signed-in user's role."""

    page = await pages.load(
        page_key("dashboard", current_user),
        _page_factory(current_user),
        error_message=DASHBOARD_ERROR,
    )
    if not page.ok:
        return PageRead[DashboardRead](error=page.error)
    return PageRead[DashboardRead](data=_to_read_model(page.data, current_user.role))


@router.post("/requests/{request_id}/accept", response_model=MentorshipRequest)
async def accept_request(
    request_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> MentorshipRequest:
    require_role(current_user, Role.ALUMNI)
    page = await _require_dashboard(current_user, pages)
    try:
        return page.accept_request(request_id)
    except ValueError as exc:
        raise not_found(exc) from exc


@router.post("/requests/{request_id}/decline", response_model=MentorshipRequest)
async def decline_request(
    request_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> MentorshipRequest:
    require_role(current_user, Role.ALUMNI)
    page = await _require_dashboard(current_user, pages)
    try:
        return page.decline_request(request_id)
    except ValueError as exc:
        raise not_found(exc) from exc


@router.post("/reports/{report_id}/resolve", response_model=RecentReport)
async def resolve_report(
    report_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> RecentReport:
    require_role(current_user, Role.ADMIN)
    page = await _require_dashboard(current_user, pages)
    try:
        return page.resolve_report(report_id)
    except ValueError as exc:
        raise not_found(exc) from exc


@router.post("/reports/{report_id}/dismiss", response_model=RecentReport)
async def dismiss_report(
    report_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> RecentReport:
    require_role(current_user, Role.ADMIN)
    page = await _require_dashboard(current_user, pages)
    try:
        return page.dismiss_report(report_id)
    except ValueError as exc:
        raise not_found(exc) from exc


__all__ = ["router"]
