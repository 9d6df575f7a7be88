"""Domain entity representing a signed-in user."""

from dataclasses import dataclass

from .role import Role


@dataclass(frozen=True)
class User:
    """Core attributes describing an application user."""

    id: str
    email: str
    first_name: str
    last_name: str
    role: Role
    is_verified: bool | None = None
    is_active: bool | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def has_role(self, role: Role | str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        value = role.value if isinstance(role, Role) else role
        return self.role.value == value.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(Role.ADMIN)


__all__ = ["User"]
