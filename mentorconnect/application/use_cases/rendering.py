"""Role-based selection of the view a page shows."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from mentorconnect.domain.entities import Role, User, Viewer

T = TypeVar("T")

ViewFactory = Callable[[], T]


@dataclass(frozen=True)
class RoleViews(Generic[T]):
    """Candidate views. Only the selected factory is ever called."""

    student: ViewFactory[T]
    alumni: ViewFactory[T]
    admin: ViewFactory[T] | None = None
    fallback: ViewFactory[T] | None = None


_ROLE_VIEWERS: dict[Role, Viewer] = {
    Role.STUDENT: Viewer.STUDENT,
    Role.ALUMNI: Viewer.ALUMNI,
    Role.ADMIN: Viewer.ADMIN,
}


def viewer_for(user: User | None) -> Viewer:
    if user is None:
        return Viewer.ANONYMOUS
    return _ROLE_VIEWERS[user.role]


def select_view(viewer: Viewer, views: RoleViews[T]) -> ViewFactory[T] | None:
    """Return the factory for ``viewer``.

    An admin without a dedicated view gets the fallback, never the student
    view.
    """

    if viewer is Viewer.ADMIN:
        return views.admin or views.fallback
    if viewer is Viewer.STUDENT:
        return views.student
    if viewer is Viewer.ALUMNI:
        return views.alumni
    if viewer is Viewer.ANONYMOUS:
        return views.fallback
    raise ValueError(f"Unsupported viewer: {viewer!r}")


def render_by_role(
    user: User | None,
    *,
    student_view: ViewFactory[T],
    alumni_view: ViewFactory[T],
    admin_view: ViewFactory[T] | None = None,
    fallback: ViewFactory[T] | None = None,
) -> T | None:
    """Build the view matching ``user``'s role, or ``None`` when there is none."""

    factory = select_view(
        viewer_for(user),
        RoleViews(
            student=student_view,
            alumni=alumni_view,
            admin=admin_view,
            fallback=fallback,
        ),
    )
    return factory() if factory is not None else None


__all__ = ["RoleViews", "ViewFactory", "render_by_role", "select_view", "viewer_for"]
