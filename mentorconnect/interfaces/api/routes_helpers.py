"""Helper utilities shared across API route handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from fastapi import HTTPException, status

from mentorconnect.application.use_cases.pages import PageRegistry
from mentorconnect.application.use_cases.rendering import render_by_role
from mentorconnect.domain.entities import Role, User
from mentorconnect.infrastructure.backend_client import BackendServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def select_or_raise(
    user: User | None,
    *,
    student_view: Callable[[], T],
    alumni_view: Callable[[], T],
    admin_view: Callable[[], T] | None = None,
) -> T:
    """Build the view for ``user`` or raise 401/403 when there is none."""

    view = render_by_role(
        user,
        student_view=student_view,
        alumni_view=alumni_view,
        admin_view=admin_view,
    )
    if view is not None:
        return view
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=f"This page is not available for the {user.role.value} role",
    )


def require_role(user: User, role: Role) -> User:
    if user.role is not role:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Only {role.value} users can do this",
        )
    return user


def page_key(name: str, user: User) -> str:
    return f"{name}:{user.role.value}"


async def require_page(
    pages: PageRegistry,
    key: str,
    factory: Callable[[], T],
    *,
    error_message: str,
) -> T:
    """Return the loaded page state for an action on that page.

    Reads report a failed fetch as a banner. Actions cannot run without the
    page, so they get a 503 carrying the same text.
    """

    page = await pages.load(key, factory, error_message=error_message)
    if not page.ok:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=page.error)
    return page.data


def not_found(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def bad_request(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def forbidden(exc: PermissionError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))


def backend_error(exc: BackendServiceError, *, default_status: int = status.HTTP_401_UNAUTHORIZED) -> HTTPException:
    """Translate a backend failure into the response the client should see.

    No response at all becomes 502; a 4xx answer keeps its status and message;
    anything else falls back to ``default_status``.
    """

    if exc.no_response:
        logger.warning("Backend unreachable: %s", exc.message)
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=exc.message)
    if exc.status_code is not None and 400 <= exc.status_code < 500:
        return HTTPException(status_code=exc.status_code, detail=exc.message)
    return HTTPException(status_code=default_status, detail=exc.message)


__all__ = [
    "backend_error",
    "bad_request",
    "forbidden",
    "not_found",
    "page_key",
    "require_page",
    "require_role",
    "select_or_raise",
]
