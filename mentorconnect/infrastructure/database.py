"""SQLAlchemy engine and sessions for the local token store."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from mentorconnect.config import get_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base of the storage tables."""


def _engine_options(database_url: str) -> dict[str, object]:
    if make_url(database_url).get_backend_name() == "sqlite":
        # Storage is used from the event loop and from worker threads.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


database_url = get_settings().database_url
engine = create_engine(database_url, **_engine_options(database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Create the storage tables that do not exist yet."""

    from mentorconnect.infrastructure import models  # noqa: F401  # register the tables

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.debug("Token store ready at %s", engine.url.render_as_string(hide_password=True))


@contextmanager
def storage_session(
    session_factory: Callable[[], Session] = SessionLocal,
) -> Iterator[Session]:
    """Open a session for one storage call, rolling back if it fails."""

    session = session_factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


__all__ = ["Base", "SessionLocal", "engine", "initialize_database", "storage_session"]
