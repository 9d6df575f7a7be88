"""Domain entities used by the resources page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .person import PersonSummary


class ResourceType(str, Enum):
    ARTICLE = "article"
    VIDEO = "video"
    BOOK = "book"
    COURSE = "course"
    TOOL = "tool"


@dataclass(frozen=True)
class Resource:
    id: str
    title: str
    description: str
    type: ResourceType
    url: str
    created_by: PersonSummary
    created_at: datetime
    tags: tuple[str, ...] = ()
    image_url: str | None = None
    likes: int = 0
    views: int = 0


@dataclass(frozen=True)
class ResourceViewPoint:
    day: date
    views: int


@dataclass(frozen=True)
class AudienceSegment:
    name: str
    percentage: int


@dataclass(frozen=True)
class ResourceActivity:
    """Engagement details an alumnus sees for one of their resources."""

    resource: Resource
    shares: int
    comments: int
    views: tuple[ResourceViewPoint, ...]
    segments: tuple[AudienceSegment, ...]

    @property
    def total_views(self) -> int:
        return sum(point.views for point in self.views)

    @property
    def growth_rate(self) -> float:
        """Percentage change from the first to the last day of the series."""

        if not self.views or not self.views[0].views:
            return 0.0
        first = self.views[0].views
        last = self.views[-1].views
        return (last - first) / first * 100


__all__ = [
    "AudienceSegment",
    "Resource",
    "ResourceActivity",
    "ResourceType",
    "ResourceViewPoint",
]
