"""Event payloads."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from mentorconnect.domain.entities import EventType


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    date: dt.date
    time: str
    location: str
    type: EventType = EventType.OTHER
    max_attendees: int = Field(default=50, gt=0)
    tags: list[str] = Field(default_factory=list)


__all__ = ["EventCreate"]
