"""Mentorship board payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from mentorconnect.domain.entities import (
    AvailabilitySlot,
    Mentor,
    MentorshipRequest,
    MentorshipSession,
)


class StudentMentorshipRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    layout: Literal["student"] = "student"
    mentors: list[Mentor]
    requests: list[MentorshipRequest]
    sessions: list[MentorshipSession]


class AlumniMentorshipRead(BaseModel):
    """Alumni board with the pending requests already filtered."""

    model_config = ConfigDict(from_attributes=True)

    layout: Literal["alumni"] = "alumni"
    pending_requests: list[MentorshipRequest]
    requests: list[MentorshipRequest]
    sessions: list[MentorshipSession]
    slots: list[AvailabilitySlot]
    is_available: bool


MentorshipBoardRead = StudentMentorshipRead | AlumniMentorshipRead


class MentorshipRequestCreate(BaseModel):
    mentor_id: str = Field(..., min_length=1)


class AvailabilityRead(BaseModel):
    is_available: bool


__all__ = [
    "AlumniMentorshipRead",
    "AvailabilityRead",
    "MentorshipBoardRead",
    "MentorshipRequestCreate",
    "StudentMentorshipRead",
]
