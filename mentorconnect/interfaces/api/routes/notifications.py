"""Endpoints and websocket handler for the notification store."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect

from mentorconnect.application.use_cases.notifications import (
    FilterMode,
    NotificationState,
    NotificationStore,
    build_bell_view,
    build_notification_list_view,
)
from mentorconnect.domain.entities import Notification, NotificationSender
from mentorconnect.infrastructure.notifications import serialize_notification
from mentorconnect.interfaces.api.dependencies import get_notification_store
from mentorconnect.interfaces.api.schemas import (
    BellRead,
    NotificationCreate,
    NotificationListRead,
    NotificationStateRead,
)
from mentorconnect.utils.datetime import ensure_app_timezone, now_in_app_timezone

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _state_to_schema(state: NotificationState) -> NotificationStateRead:
    return NotificationStateRead.model_validate(state)


@router.get("", response_model=NotificationListRead)
def list_notifications(
    filter_mode: FilterMode = Query(default=FilterMode.ALL, alias="filter"),
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationListRead:
    """Return the filtered list grouped into Today, Yesterday and Earlier."""

    view = build_notification_list_view(store.state, filter_mode)
    return NotificationListRead.model_validate(view)


@router.get("/bell", response_model=BellRead)
def read_bell(store: NotificationStore = Depends(get_notification_store)) -> BellRead:
    return BellRead.model_validate(build_bell_view(store.state))


@router.post("/fetch", response_model=NotificationStateRead)
async def fetch_notifications(
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationStateRead:
    state = await store.fetch_notifications()
    return _state_to_schema(state)


@router.post("/read-all", response_model=NotificationStateRead)
def mark_all_as_read(
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationStateRead:
    return _state_to_schema(store.mark_all_as_read())


@router.post("/{notification_id}/read", response_model=NotificationStateRead)
def mark_as_read(
    notification_id: str,
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationStateRead:
    """Mark one notification as read. Unknown ids leave the list untouched."""

    return _state_to_schema(store.mark_as_read(notification_id))


@router.delete("", response_model=NotificationStateRead)
def clear_notifications(
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationStateRead:
    return _state_to_schema(store.clear_all())


@router.post("", response_model=NotificationStateRead, status_code=201)
def add_notification(
    payload: NotificationCreate,
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationStateRead:
    sender = payload.sender
    notification = Notification(
        id=payload.id or uuid.uuid4().hex,
        title=payload.title,
        message=payload.message,
        type=payload.type,
        timestamp=ensure_app_timezone(payload.timestamp) or now_in_app_timezone(),
        is_read=payload.is_read,
        link=payload.link,
        icon=payload.icon,
        sender=(
            NotificationSender(id=sender.id, name=sender.name, avatar=sender.avatar)
            if sender
            else None
        ),
    )
    return _state_to_schema(store.add_notification(notification))


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Stream every store change to the connected bell."""

    state = websocket.app.state.mentorconnect
    store: NotificationStore = state.notifications
    manager = state.connections

    await manager.connect(websocket)
    try:
        await websocket.send_json(
            {
                "type": "init",
                "data": {
                    "unread_count": store.unread_count,
                    "notifications": [serialize_notification(n) for n in store.notifications],
                },
            }
        )
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except ValueError:
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list):
                    for notification_id in ids:
                        store.mark_as_read(str(notification_id))
                continue
    except WebSocketDisconnect:
        manager.disconnect(websocket)
    except Exception:
        manager.disconnect(websocket)
        raise


__all__ = ["router"]
