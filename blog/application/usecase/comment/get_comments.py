"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, parse_uuid
from blog.domain.model import AuthorSnapshot
from blog.domain.service import CommentNode, CommentService, count_nodes
from blog.domain.value import ArticleId


class AuthorResponse(BaseModel):
    """Registered author shown next to a comment."""

    user_id: str
    name: str | None
    avatar_url: str | None

    @classmethod
    def from_domain(cls, snapshot: AuthorSnapshot) -> "AuthorResponse":
        return cls(
            user_id=str(snapshot.id),
            name=snapshot.name,
            avatar_url=snapshot.avatar_url,
        )


class CommentNodeResponse(BaseModel):
    """Comment with its replies.

    Recursive structure mirroring the domain thread.
    """

    comment_id: str
    parent_id: str | None
    content: str
    author_name: str | None  # Anonymous display name
    author: AuthorResponse | None  # Registered author, if still present
    depth: int
    created_at: datetime
    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert a domain thread node, replies included."""
        comment = node.comment
        return cls(
            comment_id=str(comment.id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            author_name=comment.author_name,
            author=AuthorResponse.from_domain(node.author) if node.author else None,
            depth=node.depth,
            created_at=comment.created_at,
            replies=[cls.from_domain(reply) for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    article_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    article_id: str
    comments: list[CommentNodeResponse]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading an article's comments as threads.

    Top-level comments come newest first; replies oldest first.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            ValidationError: If the article ID is malformed
            ArticleNotFoundError: If the article does not exist
        """
        article_id = ArticleId(parse_uuid(request.article_id, "article_id"))

        roots = await self.comment_service.get_thread(article_id)

        return GetCommentsResponse(
            article_id=request.article_id,
            comments=[CommentNodeResponse.from_domain(root) for root in roots],
            total=count_nodes(roots),
        )
