"""Domain values describing user roles and the viewer kinds derived from them."""

from enum import Enum


class Role(str, Enum):
    """Roles assigned to platform users by the auth backend."""

    STUDENT = "student"
    ALUMNI = "alumni"
    ADMIN = "admin"


class Viewer(Enum):
    """Who is looking at a page: one of the roles or nobody signed in."""

    STUDENT = "student"
    ALUMNI = "alumni"
    ADMIN = "admin"
    ANONYMOUS = "anonymous"


__all__ = ["Role", "Viewer"]
