"""Forum endpoints."""

from __future__ import annotations

from functools import partial

from fastapi import APIRouter, Depends, HTTPException, Query, status

from mentorconnect.application.use_cases.pages import ForumPage, PageRegistry
from mentorconnect.application.use_cases.pages.forum import ALL_CATEGORIES
from mentorconnect.domain.entities import ForumComment, ForumPost, User
from mentorconnect.interfaces.api.dependencies import get_current_user, get_page_registry
from mentorconnect.interfaces.api.routes_helpers import (
    bad_request,
    not_found,
    page_key,
    require_page,
)
from mentorconnect.interfaces.api.schemas import (
    ForumCommentCreate,
    ForumPostCreate,
    PageRead,
)

router = APIRouter(prefix="/forum", tags=["forum"])

FORUM_ERROR = "Failed to load forum data."


async def _require_forum(user: User, pages: PageRegistry) -> ForumPage:
    return await require_page(
        pages,
        page_key("forum", user),
        partial(ForumPage.for_role, user.role),
        error_message=FORUM_ERROR,
    )


@router.get("/posts", response_model=PageRead[list[ForumPost]])
async def list_posts(
    category: str = Query(default=ALL_CATEGORIES),
    search: str = Query(default=""),
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> PageRead[list[ForumPost]]:
    page = await pages.load(
        page_key("forum", current_user),
        partial(ForumPage.for_role, current_user.role),
        error_message=FORUM_ERROR,
    )
    if not page.ok:
        return PageRead[list[ForumPost]](error=page.error)
    return PageRead[list[ForumPost]](data=page.data.list_posts(category=category, search=search))


@router.post("/posts", response_model=ForumPost, status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: ForumPostCreate,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> ForumPost:
    forum = await _require_forum(current_user, pages)
    try:
        return forum.create_post(
            title=payload.title,
            content=payload.content,
            category=payload.category,
            tags=payload.tags,
        )
    except ValueError as exc:
        raise bad_request(exc) from exc


@router.post("/posts/{post_id}/like", response_model=ForumPost)
async def toggle_post_like(
    post_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> ForumPost:
    forum = await _require_forum(current_user, pages)
    try:
        return forum.toggle_post_like(post_id)
    except ValueError as exc:
        raise not_found(exc) from exc


@router.get("/posts/{post_id}/comments", response_model=list[ForumComment])
async def list_comments(
    post_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> list[ForumComment]:
    forum = await _require_forum(current_user, pages)
    try:
        return forum.comments(post_id)
    except ValueError as exc:
        raise not_found(exc) from exc


@router.post(
    "/posts/{post_id}/comments",
    response_model=ForumComment,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    payload: ForumCommentCreate,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> ForumComment:
    forum = await _require_forum(current_user, pages)
    try:
        comment = forum.add_comment(post_id, payload.content)
    except ValueError as exc:
        raise not_found(exc) from exc
    if comment is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment content is required",
        )
    return comment


@router.post("/posts/{post_id}/comments/{comment_id}/like", response_model=ForumComment)
async def toggle_comment_like(
    post_id: str,
    comment_id: str,
    current_user: User = Depends(get_current_user),
    pages: PageRegistry = Depends(get_page_registry),
) -> ForumComment:
    forum = await _require_forum(current_user, pages)
    try:
        return forum.toggle_comment_like(post_id, comment_id)
    except ValueError as exc:
        raise not_found(exc) from exc


__all__ = ["router"]
