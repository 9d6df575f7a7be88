"""Forum page: posts, comments and likes."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from mentorconnect.domain.entities import ForumComment, ForumPost, Role
from mentorconnect.infrastructure.fixtures.forum_data import (
    CURRENT_AUTHOR,
    DEFAULT_CATEGORY,
    alumni_comments,
    alumni_posts,
    student_comments,
    student_posts,
)
from mentorconnect.utils.datetime import now_in_app_timezone

ALL_CATEGORIES = "all"


def split_tags(raw: str) -> tuple[str, ...]:
    return tuple(tag.strip() for tag in raw.split(",") if tag.strip())


class ForumPage:
    def __init__(
        self,
        posts: list[ForumPost],
        comment_factory: Callable[[], list[ForumComment]],
    ) -> None:
        self.posts = posts
        self._comment_factory = comment_factory
        self._comments: dict[str, list[ForumComment]] = {}

    @classmethod
    def for_role(cls, role: Role) -> "ForumPage":
        if role is Role.ALUMNI:
            return cls(alumni_posts(), alumni_comments)
        return cls(student_posts(), student_comments)

    def list_posts(self, *, category: str = ALL_CATEGORIES, search: str = "") -> list[ForumPost]:
        needle = search.strip().lower()
        return [
            post
            for post in self.posts
            if (category == ALL_CATEGORIES or post.category == category)
            and (needle in post.title.lower() or needle in post.content.lower())
        ]

    def post(self, post_id: str) -> ForumPost:
        return self.posts[self._post_index(post_id)]

    def toggle_post_like(self, post_id: str) -> ForumPost:
        index = self._post_index(post_id)
        updated = self.posts[index].toggle_like()
        self.posts[index] = updated
        return updated

    def comments(self, post_id: str) -> list[ForumComment]:
        self._post_index(post_id)
        comments = self._comments.get(post_id)
        if comments is None:
            comments = self._comment_factory()
            self._comments[post_id] = comments
        return comments

    def toggle_comment_like(self, post_id: str, comment_id: str) -> ForumComment:
        comments = self.comments(post_id)
        for index, comment in enumerate(comments):
            if comment.id == comment_id:
                updated = comment.toggle_like()
                comments[index] = updated
                return updated
        raise ValueError("Comment not found")

    def add_comment(
        self, post_id: str, content: str, *, now: datetime | None = None
    ) -> ForumComment | None:
        """Append a comment and bump the post's comment count. Blank content is ignored."""

        text = content.strip()
        if not text:
            return None
        comments = self.comments(post_id)
        comment = ForumComment(
            id=f"c{len(comments) + 1}",
            content=text,
            author=CURRENT_AUTHOR,
            created_at=now or now_in_app_timezone(),
        )
        comments.append(comment)
        index = self._post_index(post_id)
        post = self.posts[index]
        self.posts[index] = replace(post, comments=post.comments + 1)
        return comment

    def create_post(
        self,
        *,
        title: str,
        content: str,
        category: str | None = None,
        tags: str = "",
        now: datetime | None = None,
    ) -> ForumPost:
        if not title.strip() or not content.strip():
            raise ValueError("Title and content are required")
        post = ForumPost(
            id=f"p-{uuid.uuid4().hex[:8]}",
            title=title.strip(),
            content=content.strip(),
            author=CURRENT_AUTHOR,
            category=category or DEFAULT_CATEGORY,
            created_at=now or now_in_app_timezone(),
            tags=split_tags(tags),
        )
        self.posts.insert(0, post)
        return post

    def _post_index(self, post_id: str) -> int:
        for index, post in enumerate(self.posts):
            if post.id == post_id:
                return index
        raise ValueError("Post not found")


__all__ = ["ALL_CATEGORIES", "ForumPage", "split_tags"]
