"""SQLAlchemy model for persisted key/value storage entries."""

from sqlalchemy import Column, DateTime, String, Text

from mentorconnect.infrastructure.database import Base
from mentorconnect.utils import now_in_app_timezone


class StorageEntryModel(Base):
    """Database representation of a local storage entry such as a session token."""

    __tablename__ = "storage_entry"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
    )


__all__ = ["StorageEntryModel"]
