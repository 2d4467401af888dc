"""Comment domain service."""

import re
from typing import Optional
from uuid import uuid4

import logfire

from blog.domain.error import (
    ArticleNotFoundError,
    CommentNotFoundError,
    DomainError,
    InternalError,
    ParentNotFoundError,
    ValidationError,
)
from blog.domain.model import Comment, resolve_author
from blog.domain.model.common import utcnow
from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from blog.domain.value import (
    COMMENT_CONTENT_MAX_LENGTH,
    Actor,
    ArticleId,
    CommentId,
    UserId,
)

from .base import Service, require_admin
from .thread import CommentNode, build_thread, ensure_reply_depth, index_comments

_TAG_RE = re.compile(r"<[^>]*>")


def sanitize_content(content: str) -> str:
    """Strip markup and surrounding whitespace from comment text."""
    return _TAG_RE.sub("", content).strip()


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            article_repository: Article repository
            user_repository: User repository
        """
        self.comment_repository = comment_repository
        self.article_repository = article_repository
        self.user_repository = user_repository

    async def create_comment(
        self,
        article_id: ArticleId,
        content: str,
        user_id: Optional[UserId] = None,
        author_name: Optional[str] = None,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment on an article or reply to another comment.

        All checks run before anything is written.

        Args:
            article_id: Article ID
            content: Comment text
            user_id: Registered author (takes precedence over author_name)
            author_name: Display name for anonymous comments
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment, unread

        Raises:
            ValidationError: If content, author or parent are malformed, or the
                user does not exist
            ArticleNotFoundError: If the article does not exist
            ParentNotFoundError: If the parent comment does not exist
            MaxDepthExceededError: If the reply would nest too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=str(article_id),
            parent_id=str(parent_id) if parent_id else None,
            anonymous=user_id is None,
        ):
            if len(content) > COMMENT_CONTENT_MAX_LENGTH:
                raise ValidationError(
                    "content",
                    "Comment content must be at most "
                    f"{COMMENT_CONTENT_MAX_LENGTH} characters",
                )
            text = sanitize_content(content)
            if not text:
                raise ValidationError("content", "Comment content is required")

            author = resolve_author(user_id, author_name)

            article = await self.article_repository.find_by_id(article_id)
            if not article:
                logfire.warn("Article not found", article_id=str(article_id))
                raise ArticleNotFoundError(str(article_id))

            if user_id is not None:
                user = await self.user_repository.find_by_id(user_id)
                if not user:
                    logfire.warn("Comment author not found", user_id=str(user_id))
                    raise ValidationError("user_id", "Comment author does not exist")

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        article_id=str(article_id),
                    )
                    raise ParentNotFoundError(str(parent_id))
                if parent.article_id != article_id:
                    logfire.warn(
                        "Parent comment does not belong to article",
                        parent_id=str(parent_id),
                        parent_article_id=str(parent.article_id),
                        target_article_id=str(article_id),
                    )
                    raise ValidationError(
                        "parent_id", "Parent comment does not belong to this article"
                    )

                # One load per validation; the walk runs over this snapshot.
                index = index_comments(
                    await self.comment_repository.find_by_article(article_id)
                )
                index.setdefault(parent.id, parent)
                depth = ensure_reply_depth(parent_id, index)
            else:
                depth = 0

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article_id,
                author=author,
                content=text,
                parent_id=parent_id,
                is_read=False,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=str(article_id),
                depth=depth,
                anonymous=saved.user_id is None,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise CommentNotFoundError(str(comment_id))
            return comment

    async def get_thread(self, article_id: ArticleId) -> list[CommentNode]:
        """Get all comments of an article as reply trees.

        Args:
            article_id: Article ID

        Returns:
            Top-level nodes, newest first, with replies oldest first

        Raises:
            ArticleNotFoundError: If the article does not exist
        """
        with logfire.span("comment_service.get_thread", article_id=str(article_id)):
            article = await self.article_repository.find_by_id(article_id)
            if not article:
                logfire.warn("Article not found", article_id=str(article_id))
                raise ArticleNotFoundError(str(article_id))

            comments = await self.comment_repository.find_by_article(article_id)
            user_ids = list({c.user_id for c in comments if c.user_id is not None})
            users = await self.user_repository.find_by_ids(user_ids) if user_ids else {}

            roots = build_thread(
                comments, {uid: user.snapshot() for uid, user in users.items()}
            )
            logfire.info(
                "Comment thread assembled",
                article_id=str(article_id),
                count=len(comments),
                root_count=len(roots),
            )
            return roots

    async def delete_comment(
        self, comment_id: CommentId, actor: Optional[Actor]
    ) -> int:
        """Delete a comment together with every reply below it.

        Args:
            comment_id: Comment ID
            actor: Caller; must be an admin

        Returns:
            Number of comments removed (the comment plus its descendants)

        Raises:
            NotAuthenticatedError: If there is no actor
            ForbiddenError: If the actor is not an admin
            CommentNotFoundError: If the comment does not exist
            InternalError: If the store fails; nothing is removed in that case
        """
        admin = require_admin(actor, "delete comments")

        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            admin_id=str(admin.user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise CommentNotFoundError(str(comment_id))

            thread_ids = await self._collect_thread_ids(comment.id)

            try:
                removed = await self.comment_repository.delete_many(thread_ids)
            except DomainError:
                raise
            except Exception as e:
                logfire.error(
                    "Comment thread deletion failed",
                    comment_id=str(comment_id),
                    thread_size=len(thread_ids),
                    error=str(e),
                    _exc_info=True,
                )
                raise InternalError("Failed to delete comment") from e

            logfire.info(
                "Comment thread deleted",
                comment_id=str(comment_id),
                article_id=str(comment.article_id),
                removed=removed,
            )
            return removed

    async def _collect_thread_ids(self, root_id: CommentId) -> list[CommentId]:
        """Breadth-first walk of the parent-id index below ``root_id``."""
        thread_ids = [root_id]
        seen = {root_id}
        frontier = [root_id]

        while frontier:
            child_ids = await self.comment_repository.find_child_ids(frontier)
            frontier = [cid for cid in child_ids if cid not in seen]
            seen.update(frontier)
            thread_ids.extend(frontier)

        return thread_ids
