"""Tests for the process-wide notification store."""

from __future__ import annotations

import threading
from datetime import datetime, timezone

import anyio
import pytest

from mentorconnect.application.use_cases.notifications import (
    FETCH_ERROR_MESSAGE,
    FilterMode,
    NotificationStore,
    filter_notifications,
)
from mentorconnect.domain.entities import Notification, NotificationType
from mentorconnect.infrastructure.fixtures import dummy_notifications

NOW = datetime(2024, 3, 14, 12, 0, tzinfo=timezone.utc)


def _notification(notification_id: str, *, is_read: bool = False) -> Notification:
    return Notification(
        id=notification_id,
        title=f"Title {notification_id}",
        message="Body",
        type=NotificationType.INFO,
        timestamp=NOW,
        is_read=is_read,
    )


@pytest.fixture()
def store() -> NotificationStore:
    return NotificationStore(fetch_delay=0, loader=lambda: dummy_notifications(NOW))


def test_fetch_installs_fixture_list(store: NotificationStore) -> None:
    state = anyio.run(store.fetch_notifications)

    assert state.loading is False
    assert state.error is None
    assert [n.id for n in state.notifications] == [str(i) for i in range(1, 11)]
    assert store.unread_count == 7


def test_fetch_reports_loader_error_message(store: NotificationStore) -> None:
    def failing_loader():
        raise RuntimeError("backend down")

    state = anyio.run(lambda: store.fetch_notifications(loader=failing_loader))

    assert state.loading is False
    assert state.error == "backend down"


def test_fetch_uses_default_message_for_empty_error(store: NotificationStore) -> None:
    def failing_loader():
        raise RuntimeError()

    state = anyio.run(lambda: store.fetch_notifications(loader=failing_loader))

    assert state.error == FETCH_ERROR_MESSAGE


def test_mark_as_read_only_touches_matching_entry(store: NotificationStore) -> None:
    anyio.run(store.fetch_notifications)
    before = {n.id: n for n in store.notifications}

    store.mark_as_read("3")

    after = {n.id: n for n in store.notifications}
    assert after["3"].is_read is True
    for notification_id, notification in before.items():
        if notification_id != "3":
            assert after[notification_id] == notification


def test_mark_as_read_with_unknown_id_is_noop(store: NotificationStore) -> None:
    anyio.run(store.fetch_notifications)
    before = store.notifications

    store.mark_as_read("does-not-exist")

    assert store.notifications == before


def test_mark_all_as_read_clears_unread_count(store: NotificationStore) -> None:
    anyio.run(store.fetch_notifications)

    store.mark_all_as_read()

    assert store.unread_count == 0
    assert all(n.is_read for n in store.notifications)


def test_clear_all_empties_list(store: NotificationStore) -> None:
    anyio.run(store.fetch_notifications)

    store.clear_all()

    assert store.notifications == ()
    assert store.unread_count == 0


def test_add_notification_prepends(store: NotificationStore) -> None:
    store.set_notifications([_notification("a"), _notification("b")])

    store.add_notification(_notification("new"))

    assert [n.id for n in store.notifications] == ["new", "a", "b"]


def test_unread_count_is_derived_from_list(store: NotificationStore) -> None:
    store.set_notifications(
        [_notification("a"), _notification("b", is_read=True), _notification("c")]
    )
    assert store.unread_count == 2

    store.set_notifications([_notification("d", is_read=True)])
    assert store.unread_count == 0


def test_listeners_receive_every_new_state(store: NotificationStore) -> None:
    received = []
    unsubscribe = store.subscribe(received.append)

    store.set_notifications([_notification("a")])
    store.mark_as_read("a")
    unsubscribe()
    store.clear_all()

    assert len(received) == 2
    assert received[-1].notifications[0].is_read is True


def test_failing_listener_does_not_break_mutation(store: NotificationStore) -> None:
    def broken(_state):
        raise RuntimeError("listener failed")

    store.subscribe(broken)

    state = store.set_notifications([_notification("a")])

    assert state.notifications[0].id == "a"


def test_fixture_scenario_mark_three_read(store: NotificationStore) -> None:
    anyio.run(store.fetch_notifications)
    expected = {n.id for n in dummy_notifications(NOW) if not n.is_read} - {"3"}

    store.mark_as_read("3")

    unread = filter_notifications(store.notifications, FilterMode.UNREAD)
    assert {n.id for n in unread} == expected
    assert expected == {"1", "4", "7", "8", "9", "10"}


def test_reset_drops_state_and_listeners(store: NotificationStore) -> None:
    received = []
    store.subscribe(received.append)
    store.set_notifications([_notification("a")])

    store.reset()
    store.set_notifications([_notification("b")])

    assert len(received) == 1
    assert [n.id for n in store.notifications] == ["b"]


def test_fetch_clears_previous_error_while_loading() -> None:
    store = NotificationStore(fetch_delay=0.05, loader=lambda: dummy_notifications(NOW))
    seen = {}

    def failing_loader():
        raise RuntimeError("backend down")

    async def main():
        await store.fetch_notifications(loader=failing_loader)
        seen["after_failure"] = store.state
        async with anyio.create_task_group() as tg:
            tg.start_soon(store.fetch_notifications)
            await anyio.sleep(0.01)
            seen["mid_fetch"] = store.state

    anyio.run(main)

    assert seen["after_failure"].error == "backend down"
    assert seen["mid_fetch"].loading is True
    assert seen["mid_fetch"].error is None
    assert store.state.loading is False
    assert store.state.error is None
    assert len(store.notifications) == 10


def test_overlapping_fetches_last_to_finish_wins() -> None:
    store = NotificationStore(fetch_delay=0.05)
    first = [_notification("first")]
    second = [_notification("second-a"), _notification("second-b")]
    snapshots = []
    store.subscribe(snapshots.append)

    async def main():
        async with anyio.create_task_group() as tg:
            tg.start_soon(lambda: store.fetch_notifications(loader=lambda: first))
            await anyio.sleep(0.02)
            tg.start_soon(lambda: store.fetch_notifications(loader=lambda: second))

    anyio.run(main)

    installed = [
        [n.id for n in state.notifications] for state in snapshots if not state.loading
    ]
    assert installed == [["first"], ["second-a", "second-b"]]
    assert [n.id for n in store.notifications] == ["second-a", "second-b"]
    assert store.state.loading is False


def test_concurrent_mutations_from_threads_keep_every_update() -> None:
    store = NotificationStore(fetch_delay=0)
    workers, per_worker = 8, 500

    def add_many(worker: int) -> None:
        for index in range(per_worker):
            store.add_notification(_notification(f"{worker}-{index}"))

    threads = [threading.Thread(target=add_many, args=(worker,)) for worker in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.notifications) == workers * per_worker
    assert store.unread_count == workers * per_worker
