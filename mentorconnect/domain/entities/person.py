"""Lightweight reference to a person shown on cards and lists."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PersonSummary:
    """Name and avatar of a mentor, student, author or organizer."""

    name: str
    avatar: str = ""
    id: str | None = None


__all__ = ["PersonSummary"]
