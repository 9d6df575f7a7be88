"""Forum payloads."""

from pydantic import BaseModel, Field


class ForumPostCreate(BaseModel):
    title: str
    content: str
    category: str | None = None
    tags: str = Field(default="", description="Comma separated tags")


class ForumCommentCreate(BaseModel):
    content: str


__all__ = ["ForumCommentCreate", "ForumPostCreate"]
