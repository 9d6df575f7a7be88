"""Events page endpoints."""

from __future__ import annotations

from functools import partial

from fastapi import APIRouter, Depends, Query, status

from mentorconnect.application.use_cases.pages import EventsPage, PageRegistry
from mentorconnect.application.use_cases.pages.events import ALL_EVENTS
from mentorconnect.domain.entities import Event, User
from mentorconnect.interfaces.api.dependencies import get_current_user, get_page_registry
from mentorconnect.interfaces.api.routes_helpers import (
    bad_request,
    forbidden,
    not_found,
    page_key,
    require_page,
)
from mentorconnect.interfaces.api.schemas import EventCreate, PageRead

router = APIRouter(prefix="/events", tags=["events"])

EVENTS_ERROR = "Failed to load events data."


async def _require_events(user: User, pages: PageRegistry) -> EventsPage:
    return await require_page(
        pages,
        page_key("events", user),
        partial(EventsPage.for_role, user.role),
        error_message=EVENTS_ERROR,
    )


@router.get("", response_model=PageRead[list[Event]])
async def list_events(
    event_filter: str = Query(default=ALL_EVENTS, alias="filter"),
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> PageRead[list[Event]]:
    """List events by type, or ``hosting`` for the events an alumnus runs."""

    page = await pages.load(
        page_key("events", current_user),
        partial(EventsPage.for_role, current_user.role),
        error_message=EVENTS_ERROR,
    )
    if not page.ok:
        return PageRead[list[Event]](error=page.error)
    try:
        events = page.data.list_events(event_filter)
    except ValueError as exc:
        raise bad_request(exc) from exc
    return PageRead[list[Event]](data=events)


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: EventCreate,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> Event:
    page = await _require_events(current_user, pages)
    try:
        return page.create_event(
            title=payload.title,
            description=payload.description,
            event_date=payload.date,
            time=payload.time,
            location=payload.location,
            event_type=payload.type,
            max_attendees=payload.max_attendees,
            tags=tuple(payload.tags),
        )
    except PermissionError as exc:
        raise forbidden(exc) from exc
    except ValueError as exc:
        raise bad_request(exc) from exc


@router.post("/{event_id}/register", response_model=Event)
async def register(
    event_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> Event:
    page = await _require_events(current_user, pages)
    try:
        page.event(event_id)
    except ValueError as exc:
        raise not_found(exc) from exc
    try:
        return page.register(event_id)
    except ValueError as exc:
        raise bad_request(exc) from exc


@router.post("/{event_id}/unregister", response_model=Event)
async def unregister(
    event_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> Event:
    page = await _require_events(current_user, pages)
    try:
        return page.unregister(event_id)
    except ValueError as exc:
        raise not_found(exc) from exc


__all__ = ["router"]
