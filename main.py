import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mentorconnect.config import get_settings
from mentorconnect.infrastructure.database import engine, initialize_database
from mentorconnect.interfaces.api.routes import register_routes
from mentorconnect.interfaces.api.state import build_app_state, close_app_state

logger = logging.getLogger(__name__)


def create_app(*, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """Create and configure the MentorConnect companion service.

    ``transport`` replaces the network for every outbound HTTP client.
    """

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the shared state at start-up and release it on shutdown."""

        initialize_database()
        state = build_app_state(settings, transport=transport)
        app.state.mentorconnect = state
        snapshot = await state.session.restore()
        logger.info("Session restored in state %s", snapshot.state.value)
        try:
            yield
        finally:
            await close_app_state(state)
            engine.dispose()

    app = FastAPI(title="MentorConnect", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
