"""Aggregate application use cases."""

from .rendering import RoleViews, render_by_role, select_view, viewer_for
from .session import AuthSession

__all__ = [
    "AuthSession",
    "RoleViews",
    "render_by_role",
    "select_view",
    "viewer_for",
]
