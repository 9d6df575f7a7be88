"""Resources page endpoints."""

from __future__ import annotations

from functools import partial

from fastapi import APIRouter, Depends, Query, status

from mentorconnect.application.use_cases.pages import PageRegistry, ResourcesPage
from mentorconnect.application.use_cases.pages.resources import ALL_RESOURCES
from mentorconnect.domain.entities import Resource, User
from mentorconnect.interfaces.api.dependencies import get_current_user, get_page_registry
from mentorconnect.interfaces.api.routes_helpers import (
    bad_request,
    forbidden,
    not_found,
    page_key,
    require_page,
)
from mentorconnect.interfaces.api.schemas import (
    PageRead,
    ResourceActivityRead,
    ResourceCreate,
)

router = APIRouter(prefix="/resources", tags=["resources"])

RESOURCES_ERROR = "Failed to load resources data."


async def _require_resources(user: User, pages: PageRegistry) -> ResourcesPage:
    return await require_page(
        pages,
        page_key("resources", user),
        partial(ResourcesPage.for_role, user.role),
        error_message=RESOURCES_ERROR,
    )


@router.get("", response_model=PageRead[list[Resource]])
async def list_resources(
    resource_type: str = Query(default=ALL_RESOURCES, alias="type"),
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> PageRead[list[Resource]]:
    page = await pages.load(
        page_key("resources", current_user),
        partial(ResourcesPage.for_role, current_user.role),
        error_message=RESOURCES_ERROR,
    )
    if not page.ok:
        return PageRead[list[Resource]](error=page.error)
    try:
        resources = page.data.list_resources(resource_type)
    except ValueError as exc:
        raise bad_request(exc) from exc
    return PageRead[list[Resource]](data=resources)


@router.post("", response_model=Resource, status_code=status.HTTP_201_CREATED)
async def add_resource(
    payload: ResourceCreate,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> Resource:
    """Share a new resource; it is listed first."""

    page = await _require_resources(current_user, pages)
    try:
        return page.add_resource(
            title=payload.title,
            description=payload.description,
            resource_type=payload.type,
            url=payload.url,
            tags=tuple(payload.tags),
            image_url=payload.image_url,
        )
    except PermissionError as exc:
        raise forbidden(exc) from exc
    except ValueError as exc:
        raise bad_request(exc) from exc


@router.get("/{resource_id}/activity", response_model=ResourceActivityRead)
async def read_activity(
    resource_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> ResourceActivityRead:
    page = await _require_resources(current_user, pages)
    try:
        activity = page.activity(resource_id)
    except PermissionError as exc:
        raise forbidden(exc) from exc
    except ValueError as exc:
        raise not_found(exc) from exc
    return ResourceActivityRead.model_validate(activity)


__all__ = ["router"]
