"""Events page: listing, registration and alumni-hosted events."""

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date

from mentorconnect.domain.entities import Event, EventType, Role
from mentorconnect.infrastructure.fixtures.event_data import (
    CURRENT_ORGANIZER,
    alumni_events,
    student_events,
)

ALL_EVENTS = "all"
HOSTING = "hosting"


class EventsPage:
    def __init__(self, events: list[Event], *, can_host: bool = False) -> None:
        self.events = events
        self.can_host = can_host

    @classmethod
    def for_role(cls, role: Role) -> "EventsPage":
        if role is Role.ALUMNI:
            return cls(alumni_events(), can_host=True)
        return cls(student_events())

    def list_events(self, event_filter: str = ALL_EVENTS) -> list[Event]:
        """Filter by event type; ``hosting`` lists the events this alumnus hosts."""

        if event_filter == ALL_EVENTS:
            return list(self.events)
        if event_filter == HOSTING:
            if not self.can_host:
                raise ValueError("Unknown event filter: hosting")
            return [event for event in self.events if event.is_hosting]
        try:
            event_type = EventType(event_filter)
        except ValueError as exc:
            raise ValueError(f"Unknown event filter: {event_filter}") from exc
        return [event for event in self.events if event.type is event_type]

    def event(self, event_id: str) -> Event:
        return self.events[self._index(event_id)]

    def register(self, event_id: str) -> Event:
        index = self._index(event_id)
        event = self.events[index]
        if event.is_registered:
            return event
        if event.is_full:
            raise ValueError("Event is full")
        updated = replace(event, is_registered=True, attendees=event.attendees + 1)
        self.events[index] = updated
        return updated

    def unregister(self, event_id: str) -> Event:
        index = self._index(event_id)
        event = self.events[index]
        if not event.is_registered:
            return event
        updated = replace(event, is_registered=False, attendees=max(event.attendees - 1, 0))
        self.events[index] = updated
        return updated

    def create_event(
        self,
        *,
        title: str,
        description: str,
        event_date: date,
        time: str,
        location: str,
        event_type: EventType = EventType.OTHER,
        max_attendees: int = 50,
        tags: tuple[str, ...] = (),
    ) -> Event:
        if not self.can_host:
            raise PermissionError("Only alumni can create events")
        if not title.strip():
            raise ValueError("Title is required")
        event = Event(
            id=f"e-{uuid.uuid4().hex[:8]}",
            title=title.strip(),
            description=description,
            date=event_date,
            time=time,
            location=location,
            type=event_type,
            organizer=CURRENT_ORGANIZER,
            attendees=0,
            max_attendees=max_attendees,
            tags=tags,
            is_registered=False,
            is_hosting=True,
        )
        self.events.append(event)
        return event

    def _index(self, event_id: str) -> int:
        for index, event in enumerate(self.events):
            if event.id == event_id:
                return index
        raise ValueError("Event not found")


__all__ = ["ALL_EVENTS", "EventsPage", "HOSTING"]
