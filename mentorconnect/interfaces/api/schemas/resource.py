"""Resource payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mentorconnect.domain.entities import (
    AudienceSegment,
    Resource,
    ResourceType,
    ResourceViewPoint,
)


class ResourceCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    type: ResourceType
    url: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list)
    image_url: str | None = None


class ResourceActivityRead(BaseModel):
    """Engagement of a shared resource over time."""

    model_config = ConfigDict(from_attributes=True)

    resource: Resource
    shares: int
    comments: int
    views: list[ResourceViewPoint]
    segments: list[AudienceSegment]
    total_views: int
    growth_rate: float


__all__ = ["ResourceActivityRead", "ResourceCreate"]
