"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, parse_uuid
from blog.domain.service import CommentService
from blog.domain.value import ArticleId, CommentId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: str  # UUID string
    content: str
    user_id: str | None = None  # From the session, never from the request body
    author_name: str | None = None  # Required when there is no user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    article_id: str
    parent_id: str | None
    content: str
    user_id: str | None
    author_name: str | None
    is_read: bool
    created_at: datetime


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment details

        Raises:
            ValidationError: If an identifier, the content or the author is invalid
            ArticleNotFoundError: If the article does not exist
            ParentNotFoundError: If the parent comment does not exist
            MaxDepthExceededError: If the reply would nest too deep
        """
        article_id = ArticleId(parse_uuid(request.article_id, "article_id"))
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "parent_id"))
            if request.parent_id
            else None
        )
        user_id = (
            UserId(parse_uuid(request.user_id, "user_id")) if request.user_id else None
        )

        comment = await self.comment_service.create_comment(
            article_id=article_id,
            content=request.content,
            user_id=user_id,
            author_name=request.author_name,
            parent_id=parent_id,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            article_id=str(comment.article_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            user_id=str(comment.user_id) if comment.user_id else None,
            author_name=comment.author_name,
            is_read=comment.is_read,
            created_at=comment.created_at,
        )
