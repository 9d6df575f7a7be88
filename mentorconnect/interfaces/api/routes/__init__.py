from fastapi import FastAPI

from .analytics import router as analytics_router
from .assistant import router as assistant_router
from .dashboard import router as dashboard_router
from .events import router as events_router
from .forum import router as forum_router
from .mentorship import router as mentorship_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .profile import router as profile_router
from .resources import router as resources_router
from .session import router as session_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(session_router)
    app.include_router(notifications_router)
    app.include_router(dashboard_router)
    app.include_router(mentorship_router)
    app.include_router(messages_router)
    app.include_router(forum_router)
    app.include_router(events_router)
    app.include_router(resources_router)
    app.include_router(profile_router)
    app.include_router(analytics_router)
    app.include_router(assistant_router)
