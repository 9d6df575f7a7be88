"""Tests for the per-page state objects."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import anyio
import pytest

from mentorconnect.application.use_cases.pages import (
    AdminDashboardPage,
    AlumniDashboardPage,
    AlumniMentorshipBoard,
    EventsPage,
    ForumPage,
    MessagesPage,
    PageRegistry,
    ResourcesPage,
    StudentMentorshipBoard,
    navigation_cards,
)
from mentorconnect.application.use_cases.pages.mentorship import REQUEST_MESSAGE
from mentorconnect.domain.entities import (
    EventType,
    MentorshipRequestStatus,
    MentorshipSessionStatus,
    ResourceType,
    Role,
)

NOW = datetime(2024, 3, 14, 12, 0, tzinfo=timezone.utc)


class StubChatService:
    def __init__(self, reply: str) -> None:
        self.reply = reply
        self.history = None

    async def chat(self, messages):
        self.history = list(messages)
        return self.reply


# Registry


def test_registry_caches_successful_loads() -> None:
    registry = PageRegistry(fetch_delay=0)
    calls = []

    def factory():
        calls.append(1)
        return {"value": len(calls)}

    first = anyio.run(lambda: registry.load("page", factory, error_message="boom"))
    second = anyio.run(lambda: registry.load("page", factory, error_message="boom"))

    assert first.ok and second.data == {"value": 1}
    assert calls == [1]


def test_registry_reports_banner_and_retries_after_failure() -> None:
    registry = PageRegistry(fetch_delay=0)
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("fixture failure")
        return "data"

    failed = anyio.run(lambda: registry.load("page", flaky, error_message="Failed to load."))
    recovered = anyio.run(lambda: registry.load("page", flaky, error_message="Failed to load."))

    assert failed.ok is False
    assert failed.error == "Failed to load."
    assert recovered.data == "data"


def test_registry_overlapping_first_loads_share_one_state() -> None:
    registry = PageRegistry(fetch_delay=0.02)
    results = []

    async def load_and_register():
        page = await registry.load("events", lambda: {"registered": []}, error_message="x")
        page.data["registered"].append("e1")
        results.append(page)

    async def load_later():
        await anyio.sleep(0.005)
        page = await registry.load("events", lambda: {"registered": []}, error_message="x")
        results.append(page)

    async def main():
        async with anyio.create_task_group() as tg:
            tg.start_soon(load_and_register)
            tg.start_soon(load_later)

    anyio.run(main)
    stored = anyio.run(lambda: registry.load("events", dict, error_message="x"))

    assert results[0] is results[1]
    assert stored.data == {"registered": ["e1"]}


def test_registry_clear_drops_pages() -> None:
    registry = PageRegistry(fetch_delay=0)
    anyio.run(lambda: registry.load("page", lambda: 1, error_message="x"))

    registry.clear()

    assert registry.loaded("page") is False


# Dashboard


def test_navigation_cards_use_role_prefix() -> None:
    student_paths = [card.path for card in navigation_cards(Role.STUDENT)]
    alumni_cards = navigation_cards(Role.ALUMNI)

    assert student_paths[0] == "/student/profile"
    assert all(path.startswith("/student/") for path in student_paths)
    assert "Analytics" not in [card.title for card in navigation_cards(Role.STUDENT)]
    assert alumni_cards[-1].path == "/alumni/analytics"
    assert alumni_cards[1].description == "Manage your mentees"


def test_alumni_dashboard_accept_and_decline_update_stats() -> None:
    page = AlumniDashboardPage.from_fixtures(NOW)

    page.accept_request("1")
    page.decline_request("2")

    stats = page.dashboard.stats
    assert page.dashboard.pending_requests == ()
    assert stats.pending_requests == 0
    assert stats.active_mentorships == 2
    with pytest.raises(ValueError):
        page.accept_request("1")


def test_admin_dashboard_report_status() -> None:
    page = AdminDashboardPage.from_fixtures(NOW)

    assert page.resolve_report("1").status == "resolved"
    assert page.dismiss_report("2").status == "dismissed"
    with pytest.raises(ValueError):
        page.resolve_report("99")


# Mentorship


def test_student_search_matches_name_or_expertise() -> None:
    board = StudentMentorshipBoard.from_fixtures()

    assert [m.id for m in board.search_mentors("sarah")] == ["m2"]
    assert [m.id for m in board.search_mentors("system design")] == ["m1"]
    assert len(board.search_mentors("")) == 2


def test_student_request_and_cancel() -> None:
    board = StudentMentorshipBoard.from_fixtures()

    request = board.request_mentorship("m2", now=NOW)
    cancelled = board.cancel_request(request.id)

    assert request.status is MentorshipRequestStatus.PENDING
    assert request.message == REQUEST_MESSAGE
    assert request.counterpart.name == "Sarah Johnson"
    assert cancelled.status is MentorshipRequestStatus.REJECTED
    assert board.requests[-1].status is MentorshipRequestStatus.REJECTED
    with pytest.raises(ValueError):
        board.request_mentorship("missing")


def test_alumni_accept_schedules_session_a_week_later() -> None:
    board = AlumniMentorshipBoard.from_fixtures()

    session = board.accept_request("1", now=NOW)

    assert board.requests[0].status is MentorshipRequestStatus.ACCEPTED
    assert session.id == "new-1"
    assert session.status is MentorshipSessionStatus.SCHEDULED
    assert session.scheduled_date == NOW + timedelta(days=7)
    assert session.duration == 60
    assert board.pending_requests() == []


def test_alumni_pending_search_and_reject() -> None:
    board = AlumniMentorshipBoard.from_fixtures()

    assert [r.id for r in board.pending_requests("john")] == ["1"]
    assert board.pending_requests("emily") == []

    board.reject_request("1")

    assert board.requests[0].status is MentorshipRequestStatus.REJECTED


def test_alumni_availability_slots() -> None:
    board = AlumniMentorshipBoard.from_fixtures()

    slot = board.add_slot()
    board.remove_slot("avail1")

    assert slot.id == "avail4"
    assert (slot.day, slot.start_time, slot.end_time, slot.is_recurring) == (
        "Monday",
        "09:00",
        "10:00",
        True,
    )
    assert [s.id for s in board.slots] == ["avail2", "avail3", "avail4"]
    assert board.toggle_availability() is False
    with pytest.raises(ValueError):
        board.remove_slot("avail1")


def test_added_slot_after_removal_gets_a_fresh_id() -> None:
    board = AlumniMentorshipBoard.from_fixtures()

    board.remove_slot("avail1")
    first = board.add_slot()
    board.remove_slot("avail2")
    second = board.add_slot()

    ids = [s.id for s in board.slots]
    assert (first.id, second.id) == ("avail4", "avail5")
    assert ids == ["avail3", "avail4", "avail5"]
    assert len(set(ids)) == len(ids)

    board.remove_slot("avail5")
    assert [s.id for s in board.slots] == ["avail3", "avail4"]


# Messages


def test_conversation_search_by_participant() -> None:
    page = MessagesPage.for_role(Role.STUDENT)

    assert [c.id for c in page.search("michael")] == ["2"]
    assert len(page.search("")) == len(page.conversations)


def test_send_message_ignores_blank_content() -> None:
    page = MessagesPage.for_role(Role.STUDENT)

    assert page.send_message("1", "   ") is None
    message = page.send_message("1", "Thanks!", now=NOW)

    assert message.id == "5"
    assert message.sender_id == "1"
    assert page.thread("1")[-1] == message


def test_alumni_view_has_reply_helpers_and_pins() -> None:
    page = MessagesPage.for_role(Role.ALUMNI)

    page.toggle_pin("1", "2")
    view = page.alumni_view("1")

    assert len(view.reply_templates) == 4
    assert "Career advice" in view.ai_suggestions
    assert [m.id for m in view.pinned] == ["2"]
    assert page.toggle_pin("1", "2").is_pinned is False


def test_generate_reply_speaks_as_counterpart() -> None:
    page = MessagesPage.for_role(Role.STUDENT)
    chat = StubChatService("Sure, let's talk on Friday.")

    reply = anyio.run(lambda: page.generate_reply("1", chat, now=NOW))

    counterpart = page.conversation("1").counterpart
    assert reply.sender_id == counterpart.id
    assert reply.content == "Sure, let's talk on Friday."
    assert chat.history[0]["role"] == "system"
    assert {entry["role"] for entry in chat.history[1:]} == {"user", "assistant"}


def test_unknown_conversation_raises() -> None:
    page = MessagesPage.for_role(Role.STUDENT)

    with pytest.raises(ValueError):
        page.thread("missing")


# Forum


def test_forum_filters_by_category_and_search() -> None:
    forum = ForumPage.for_role(Role.STUDENT)

    assert [p.id for p in forum.list_posts(category="Career Advice")] == ["p2"]
    assert [p.id for p in forum.list_posts(search="hooks")] == ["p1"]
    assert forum.list_posts(category="Web Development", search="career") == []


def test_forum_like_toggle() -> None:
    forum = ForumPage.for_role(Role.STUDENT)

    liked = forum.toggle_post_like("p1")
    unliked = forum.toggle_post_like("p1")

    assert (liked.is_liked, liked.likes) == (True, 43)
    assert (unliked.is_liked, unliked.likes) == (False, 42)


def test_forum_comments() -> None:
    forum = ForumPage.for_role(Role.STUDENT)

    comment = forum.add_comment("p1", "Very helpful", now=NOW)
    toggled = forum.toggle_comment_like("p1", "c2")

    assert comment.author.name == "Current User"
    assert forum.post("p1").comments == 16
    assert forum.add_comment("p1", "  ") is None
    assert forum.post("p1").comments == 16
    assert (toggled.is_liked, toggled.likes) == (False, 7)


def test_forum_create_post() -> None:
    forum = ForumPage.for_role(Role.ALUMNI)

    post = forum.create_post(title="Hiring tips", content="Ask me anything", tags="Jobs, , Tips")

    assert forum.posts[0] == post
    assert post.tags == ("Jobs", "Tips")
    assert post.category == "Career Advice"
    with pytest.raises(ValueError):
        forum.create_post(title="", content="Body")


# Events


def test_events_filter_and_registration() -> None:
    page = EventsPage.for_role(Role.STUDENT)

    assert [e.id for e in page.list_events("workshop")] == ["e1"]

    registered = page.register("e1")
    unregistered = page.unregister("e1")

    assert (registered.is_registered, registered.attendees) == (True, 46)
    assert (unregistered.is_registered, unregistered.attendees) == (False, 45)
    with pytest.raises(ValueError):
        page.list_events("hosting")


def test_alumni_create_event_is_hosted() -> None:
    page = EventsPage.for_role(Role.ALUMNI)

    event = page.create_event(
        title="Mock interviews",
        description="Practice rounds",
        event_date=date(2024, 5, 1),
        time="10:00 - 12:00",
        location="Room 4",
        event_type=EventType.WORKSHOP,
    )

    hosting = page.list_events("hosting")
    assert event in hosting
    assert event.attendees == 0
    assert event.organizer.name == "Current User"


def test_student_cannot_create_event() -> None:
    page = EventsPage.for_role(Role.STUDENT)

    with pytest.raises(PermissionError):
        page.create_event(
            title="Party",
            description="",
            event_date=date(2024, 5, 1),
            time="18:00",
            location="Hall",
        )


# Resources


def test_resources_filter_and_add() -> None:
    page = ResourcesPage.for_role(Role.ALUMNI)

    assert [r.id for r in page.list_resources("video")] == ["r2"]

    resource = page.add_resource(
        title="System design primer",
        description="Notes",
        resource_type=ResourceType.BOOK,
        url="https://example.com/primer",
    )

    assert page.resources[0] == resource
    with pytest.raises(ValueError):
        page.list_resources("podcast")


def test_resource_activity_for_alumni_only() -> None:
    activity = ResourcesPage.for_role(Role.ALUMNI).activity("r1")

    assert activity.total_views == sum((15, 22, 18, 30, 25, 42, 38, 29, 28))
    assert len(activity.segments) == 4
    with pytest.raises(PermissionError):
        ResourcesPage.for_role(Role.STUDENT).activity("r1")
