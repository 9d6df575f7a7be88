"""Per-page state created by a simulated fetch."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import anyio

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PageLoad(Generic[T]):
    """Outcome of loading a page: its state, or the banner text on failure."""

    data: T | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None


class PageRegistry:
    """Holds one state object per page key.

    Pages never share state. A page is fetched the first time it is requested
    and kept until :meth:`clear`. Failed fetches are not kept, so the next
    request tries again.
    """

    def __init__(self, *, fetch_delay: float = 1.0) -> None:
        self._fetch_delay = fetch_delay
        self._pages: dict[str, PageLoad[Any]] = {}

    async def load(
        self,
        key: str,
        factory: Callable[[], T],
        *,
        error_message: str,
    ) -> PageLoad[T]:
        cached = self._pages.get(key)
        if cached is not None:
            return cached

        await anyio.sleep(self._fetch_delay)
        # An overlapping load of the same key may have finished meanwhile.
        cached = self._pages.get(key)
        if cached is not None:
            return cached
        try:
            data = factory()
        except Exception:
            logger.exception("Error fetching data for page %s", key)
            return PageLoad(data=None, error=error_message)

        page = PageLoad(data=data)
        self._pages[key] = page
        return page

    def loaded(self, key: str) -> bool:
        return key in self._pages

    def clear(self) -> None:
        self._pages.clear()


__all__ = ["PageLoad", "PageRegistry"]
