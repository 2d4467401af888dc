"""List unread comments use case."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.comment import AuthorResponse
from blog.domain.model import ArticleRef, UnreadComment
from blog.domain.service import ModerationService
from blog.domain.value import Actor


class ArticleRefResponse(BaseModel):
    """Article the unread comment belongs to."""

    article_id: str
    title: str
    slug: str

    @classmethod
    def from_domain(cls, ref: ArticleRef) -> "ArticleRefResponse":
        return cls(article_id=str(ref.id), title=ref.title, slug=ref.slug.root)


class UnreadCommentResponse(BaseModel):
    """Unread comment with article and author details."""

    comment_id: str
    article: ArticleRefResponse
    parent_id: str | None
    content: str
    author_name: str | None
    author: AuthorResponse | None
    created_at: datetime

    @classmethod
    def from_domain(cls, unread: UnreadComment) -> "UnreadCommentResponse":
        comment = unread.comment
        return cls(
            comment_id=str(comment.id),
            article=ArticleRefResponse.from_domain(unread.article),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            author_name=comment.author_name,
            author=AuthorResponse.from_domain(unread.author) if unread.author else None,
            created_at=comment.created_at,
        )


class ListUnreadRequest(BaseModel):
    """List unread comments request."""

    actor: Actor | None = None
    limit: int | None = None  # Default 20 when missing or below 1; capped at 100


class ListUnreadResponse(BaseModel):
    """List unread comments response."""

    comments: list[UnreadCommentResponse]
    limit: int


class ListUnreadUseCase(BaseUseCase):
    """Use case for the admin moderation queue, newest first."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize list unread use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ListUnreadRequest) -> ListUnreadResponse:
        """Execute list unread flow.

        Raises:
            NotAuthenticatedError: If there is no actor
            ForbiddenError: If the actor is not an admin
        """
        unread = await self.moderation_service.list_unread(
            request.actor, limit=request.limit
        )

        return ListUnreadResponse(
            comments=[UnreadCommentResponse.from_domain(u) for u in unread],
            limit=self.moderation_service.clamp_limit(request.limit),
        )
