"""Resources page: shared learning material and alumni activity."""

from __future__ import annotations

import uuid
from datetime import datetime

from mentorconnect.domain.entities import Resource, ResourceActivity, ResourceType, Role
from mentorconnect.infrastructure.fixtures.resource_data import (
    CURRENT_CREATOR,
    alumni_resources,
    resource_activity,
    student_resources,
)
from mentorconnect.utils.datetime import now_in_app_timezone

ALL_RESOURCES = "all"


class ResourcesPage:
    def __init__(self, resources: list[Resource], *, can_share: bool = False) -> None:
        self.resources = resources
        self.can_share = can_share

    @classmethod
    def for_role(cls, role: Role) -> "ResourcesPage":
        if role is Role.ALUMNI:
            return cls(alumni_resources(), can_share=True)
        return cls(student_resources())

    def list_resources(self, resource_type: str = ALL_RESOURCES) -> list[Resource]:
        if resource_type == ALL_RESOURCES:
            return list(self.resources)
        try:
            wanted = ResourceType(resource_type)
        except ValueError as exc:
            raise ValueError(f"Unknown resource type: {resource_type}") from exc
        return [resource for resource in self.resources if resource.type is wanted]

    def resource(self, resource_id: str) -> Resource:
        for resource in self.resources:
            if resource.id == resource_id:
                return resource
        raise ValueError("Resource not found")

    def add_resource(
        self,
        *,
        title: str,
        description: str,
        resource_type: ResourceType,
        url: str,
        tags: tuple[str, ...] = (),
        image_url: str | None = None,
        now: datetime | None = None,
    ) -> Resource:
        if not self.can_share:
            raise PermissionError("Only alumni can share resources")
        if not title.strip() or not url.strip():
            raise ValueError("Title and URL are required")
        resource = Resource(
            id=f"r-{uuid.uuid4().hex[:8]}",
            title=title.strip(),
            description=description,
            type=resource_type,
            url=url.strip(),
            created_by=CURRENT_CREATOR,
            created_at=now or now_in_app_timezone(),
            tags=tags,
            image_url=image_url,
        )
        self.resources.insert(0, resource)
        return resource

    def activity(self, resource_id: str) -> ResourceActivity:
        """Engagement details for one of the alumnus' resources."""

        if not self.can_share:
            raise PermissionError("Resource activity is only available to alumni")
        self.resource(resource_id)
        return resource_activity(resource_id)


__all__ = ["ALL_RESOURCES", "ResourcesPage"]
