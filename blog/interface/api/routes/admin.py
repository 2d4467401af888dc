"""Admin moderation routes.

All routes require an admin session; the moderation service enforces it.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request

from blog.application.usecase.moderation import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    ListUnreadRequest,
    ListUnreadResponse,
    ListUnreadUseCase,
    MarkArticleReadRequest,
    MarkArticleReadResponse,
    MarkArticleReadUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)
from blog.domain.service import JWTService
from blog.interface.error import domain_errors

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.put("/comments/{comment_id}/read", response_model=MarkReadResponse)
async def mark_comment_read(
    comment_id: str,
    request: Request,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    jwt_service: FromDishka[JWTService],
) -> MarkReadResponse:
    """Mark a comment as read.

    Repeating the call is harmless and returns the original reader.
    """
    actor = jwt_service.get_actor_from_cookies(request.cookies)

    with domain_errors("mark comment as read"):
        return await mark_read_use_case.execute(
            MarkReadRequest(comment_id=comment_id, actor=actor)
        )


@router.put(
    "/articles/{article_id}/comments/read", response_model=MarkArticleReadResponse
)
async def mark_article_comments_read(
    article_id: str,
    request: Request,
    mark_article_read_use_case: FromDishka[MarkArticleReadUseCase],
    jwt_service: FromDishka[JWTService],
) -> MarkArticleReadResponse:
    """Mark every unread comment of an article as read."""
    actor = jwt_service.get_actor_from_cookies(request.cookies)

    with domain_errors("mark article comments as read"):
        return await mark_article_read_use_case.execute(
            MarkArticleReadRequest(article_id=article_id, actor=actor)
        )


@router.get("/comments/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    request: Request,
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
) -> GetUnreadCountResponse:
    """Count unread comments, excluding the admin's own."""
    actor = jwt_service.get_actor_from_cookies(request.cookies)

    with domain_errors("count unread comments"):
        return await get_unread_count_use_case.execute(
            GetUnreadCountRequest(actor=actor)
        )


@router.get("/comments/unread", response_model=ListUnreadResponse)
async def list_unread_comments(
    request: Request,
    list_unread_use_case: FromDishka[ListUnreadUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(
        default=None, description="Page size, up to 100; default 20"
    ),
) -> ListUnreadResponse:
    """List unread comments, newest first, with article and author details."""
    actor = jwt_service.get_actor_from_cookies(request.cookies)

    with domain_errors("list unread comments"):
        return await list_unread_use_case.execute(
            ListUnreadRequest(actor=actor, limit=limit)
        )
