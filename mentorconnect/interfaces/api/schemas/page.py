"""Envelope shared by the page read endpoints."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PageRead(BaseModel, Generic[T]):
    """Page payload, or the banner text when the page fetch failed."""

    data: T | None = None
    error: str | None = None


__all__ = ["PageRead"]
