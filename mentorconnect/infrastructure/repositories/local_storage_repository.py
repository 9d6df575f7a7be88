"""Persistence helpers for key/value storage entries."""

from __future__ import annotations

from sqlalchemy.orm import Session

from mentorconnect.infrastructure.models import StorageEntryModel


class LocalStorageRepository:
    """Provide get/set/remove operations over :class:`StorageEntryModel` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_item(self, key: str) -> str | None:
        model = self.session.get(StorageEntryModel, key)
        return model.value if model else None

    def set_item(self, key: str, value: str) -> None:
        model = self.session.get(StorageEntryModel, key)
        if model is None:
            model = StorageEntryModel(key=key, value=value)
        else:
            model.value = value
        self.session.add(model)
        self.session.commit()

    def remove_item(self, key: str) -> None:
        model = self.session.get(StorageEntryModel, key)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()


__all__ = ["LocalStorageRepository"]
