"""Domain entities used by the forum page."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from .person import PersonSummary


@dataclass(frozen=True)
class ForumPost:
    id: str
    title: str
    content: str
    author: PersonSummary
    category: str
    created_at: datetime
    likes: int = 0
    comments: int = 0
    views: int = 0
    tags: tuple[str, ...] = ()
    is_liked: bool = False

    def toggle_like(self) -> "ForumPost":
        likes = self.likes - 1 if self.is_liked else self.likes + 1
        return replace(self, is_liked=not self.is_liked, likes=likes)


@dataclass(frozen=True)
class ForumComment:
    id: str
    content: str
    author: PersonSummary
    created_at: datetime
    likes: int = 0
    is_liked: bool = False

    def toggle_like(self) -> "ForumComment":
        likes = self.likes - 1 if self.is_liked else self.likes + 1
        return replace(self, is_liked=not self.is_liked, likes=likes)


__all__ = ["ForumComment", "ForumPost"]
