"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from blog.domain.service import JWTService
from blog.interface.error import domain_errors

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Length and emptiness are checked by the comment service after markup
    is stripped, so they are not constrained here.
    """

    article_id: str
    content: str
    author_name: str | None = None  # Ignored for signed-in users
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> CreateCommentResponse:
    """Comment on an article or reply to another comment.

    Signed-in users comment under their account; anonymous visitors must
    give an ``author_name``.

    Args:
        body: Comment creation data
        request: Incoming request, for the session cookie
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for session resolution

    Returns:
        Created comment details
    """
    actor = jwt_service.get_actor_from_cookies(request.cookies)

    with domain_errors("create comment"):
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                article_id=body.article_id,
                content=body.content,
                user_id=str(actor.user_id) if actor else None,
                author_name=body.author_name,
                parent_id=body.parent_id,
            )
        )


@router.get("/articles/{article_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    article_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get an article's comments as threads.

    Top-level comments come newest first; replies oldest first.
    """
    with domain_errors("load comments"):
        return await get_comments_use_case.execute(
            GetCommentsRequest(article_id=article_id)
        )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> DeleteCommentResponse:
    """Delete a comment and every reply below it.

    Requires an admin session.
    """
    actor = jwt_service.get_actor_from_cookies(request.cookies)

    with domain_errors("delete comment"):
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, actor=actor)
        )
