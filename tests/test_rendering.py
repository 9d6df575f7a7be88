"""Tests for role-based view selection."""

from __future__ import annotations

import pytest

from mentorconnect.application.use_cases.rendering import (
    RoleViews,
    render_by_role,
    select_view,
    viewer_for,
)
from mentorconnect.domain.entities import Role, User, Viewer


def _user(role: Role) -> User:
    return User(id="1", email="user@example.com", first_name="A", last_name="B", role=role)


def _views(**overrides) -> dict:
    views = {
        "student_view": lambda: "student",
        "alumni_view": lambda: "alumni",
        "admin_view": lambda: "admin",
        "fallback": lambda: "fallback",
    }
    views.update(overrides)
    return views


@pytest.mark.parametrize(
    ("role", "expected"),
    [(Role.STUDENT, "student"), (Role.ALUMNI, "alumni"), (Role.ADMIN, "admin")],
)
def test_each_role_gets_its_view(role: Role, expected: str) -> None:
    assert render_by_role(_user(role), **_views()) == expected


def test_no_user_always_gets_fallback() -> None:
    assert render_by_role(None, **_views()) == "fallback"
    assert render_by_role(None, **_views(fallback=None)) is None


def test_admin_without_admin_view_gets_fallback_not_student_view() -> None:
    assert render_by_role(_user(Role.ADMIN), **_views(admin_view=None)) == "fallback"
    assert render_by_role(_user(Role.ADMIN), **_views(admin_view=None, fallback=None)) is None


def test_only_the_selected_view_is_built() -> None:
    built = []

    def track(name):
        def factory():
            built.append(name)
            return name

        return factory

    render_by_role(
        _user(Role.ALUMNI),
        student_view=track("student"),
        alumni_view=track("alumni"),
        admin_view=track("admin"),
    )

    assert built == ["alumni"]


def test_viewer_for_maps_roles() -> None:
    assert viewer_for(None) is Viewer.ANONYMOUS
    assert viewer_for(_user(Role.STUDENT)) is Viewer.STUDENT
    assert viewer_for(_user(Role.ADMIN)) is Viewer.ADMIN


def test_select_view_returns_none_for_anonymous_without_fallback() -> None:
    views = RoleViews(student=lambda: 1, alumni=lambda: 2)

    assert select_view(Viewer.ANONYMOUS, views) is None
    assert select_view(Viewer.STUDENT, views)() == 1
