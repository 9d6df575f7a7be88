"""Mentorship board endpoints."""

from __future__ import annotations

from collections.abc import Callable

from fastapi import APIRouter, Depends, Query, Response, status

from mentorconnect.application.use_cases.pages import (
    AlumniMentorshipBoard,
    PageRegistry,
    StudentMentorshipBoard,
)
from mentorconnect.domain.entities import (
    AvailabilitySlot,
    MentorshipRequest,
    MentorshipSession,
    Role,
    User,
)
from mentorconnect.interfaces.api.dependencies import get_current_user, get_page_registry
from mentorconnect.interfaces.api.routes_helpers import (
    not_found,
    page_key,
    require_page,
    require_role,
    select_or_raise,
)
from mentorconnect.interfaces.api.schemas import (
    AlumniMentorshipRead,
    AvailabilityRead,
    MentorshipBoardRead,
    MentorshipRequestCreate,
    PageRead,
    StudentMentorshipRead,
)

router = APIRouter(prefix="/mentorship", tags=["mentorship"])

MENTORSHIP_ERROR = "Failed to load mentorship data."

Board = StudentMentorshipBoard | AlumniMentorshipBoard


def _board_factory(user: User) -> Callable[[], Board]:
    return select_or_raise(
        user,
        student_view=lambda: StudentMentorshipBoard.from_fixtures,
        alumni_view=lambda: AlumniMentorshipBoard.from_fixtures,
    )


async def _require_board(user: User, pages: PageRegistry, role: Role) -> Board:
    require_role(user, role)
    return await require_page(
        pages,
        page_key("mentorship", user),
        _board_factory(user),
        error_message=MENTORSHIP_ERROR,
    )


@router.get("", response_model=PageRead[MentorshipBoardRead])
async def read_board(
    search: str = Query(default=""),
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> PageRead[MentorshipBoardRead]:
    """Return the mentorship board.

    ``search`` matches mentor names and expertise for students and student
    names of pending requests for alumni.
    """

    page = await pages.load(
        page_key("mentorship", current_user),
        _board_factory(current_user),
        error_message=MENTORSHIP_ERROR,
    )
    if not page.ok:
        return PageRead[MentorshipBoardRead](error=page.error)

    board = page.data
    if isinstance(board, AlumniMentorshipBoard):
        data = AlumniMentorshipRead(
            pending_requests=board.pending_requests(search),
            requests=board.requests,
            sessions=board.sessions,
            slots=board.slots,
            is_available=board.is_available,
        )
    else:
        data = StudentMentorshipRead(
            mentors=board.search_mentors(search),
            requests=board.requests,
            sessions=board.sessions,
        )
    return PageRead[MentorshipBoardRead](data=data)


@router.post("/requests", response_model=MentorshipRequest, status_code=status.HTTP_201_CREATED)
async def request_mentorship(
    payload: MentorshipRequestCreate,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> MentorshipRequest:
    board = await _require_board(current_user, pages, Role.STUDENT)
    try:
        return board.request_mentorship(payload.mentor_id)
    except ValueError as exc:
        raise not_found(exc) from exc


@router.post("/requests/{request_id}/cancel", response_model=MentorshipRequest)
async def cancel_request(
    request_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> MentorshipRequest:
    board = await _require_board(current_user, pages, Role.STUDENT)
    try:
        return board.cancel_request(request_id)
    except ValueError as exc:
        raise not_found(exc) from exc


@router.post("/requests/{request_id}/accept", response_model=MentorshipSession)
async def accept_request(
    request_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> MentorshipSession:
    """Accept a request and return the session scheduled for it."""

    board = await _require_board(current_user, pages, Role.ALUMNI)
    try:
        return board.accept_request(request_id)
    except ValueError as exc:
        raise not_found(exc) from exc


@router.post("/requests/{request_id}/reject", response_model=MentorshipRequest)
async def reject_request(
    request_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> MentorshipRequest:
    board = await _require_board(current_user, pages, Role.ALUMNI)
    try:
        return board.reject_request(request_id)
    except ValueError as exc:
        raise not_found(exc) from exc


@router.post("/availability/toggle", response_model=AvailabilityRead)
async def toggle_availability(
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> AvailabilityRead:
    board = await _require_board(current_user, pages, Role.ALUMNI)
    return AvailabilityRead(is_available=board.toggle_availability())


@router.post("/slots", response_model=AvailabilitySlot, status_code=status.HTTP_201_CREATED)
async def add_slot(
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> AvailabilitySlot:
    board = await _require_board(current_user, pages, Role.ALUMNI)
    return board.add_slot()


@router.delete("/slots/{slot_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_slot(
    slot_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> Response:
    board = await _require_board(current_user, pages, Role.ALUMNI)
    try:
        board.remove_slot(slot_id)
    except ValueError as exc:
        raise not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
