"""Moderation domain service.

Tracks which comments an admin has acknowledged. A comment moves from
unread to read exactly once; the first admin to read it is remembered.
"""

from typing import Optional

import logfire

from blog.domain.error import ArticleNotFoundError, CommentNotFoundError
from blog.domain.model import ReadReceipt, UnreadComment
from blog.domain.model.common import utcnow
from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from blog.domain.value import Actor, ArticleId, CommentId

from .base import Service, require_admin

DEFAULT_UNREAD_PAGE_SIZE = 20
MAX_UNREAD_PAGE_SIZE = 100


class ModerationService(Service):
    """Domain service for the admin moderation queue."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        user_repository: UserRepository,
        default_page_size: int = DEFAULT_UNREAD_PAGE_SIZE,
        max_page_size: int = MAX_UNREAD_PAGE_SIZE,
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
            article_repository: Article repository for listing enrichment
            user_repository: User repository for author snapshots
            default_page_size: Unread listing size when none is requested
            max_page_size: Upper bound for unread listing size
        """
        self.comment_repository = comment_repository
        self.article_repository = article_repository
        self.user_repository = user_repository
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    async def mark_read(
        self, comment_id: CommentId, actor: Optional[Actor]
    ) -> ReadReceipt:
        """Mark a comment as read.

        Idempotent: an already-read comment keeps its original reader and
        timestamp, whoever calls again.

        Args:
            comment_id: Comment ID
            actor: Caller; must be an admin

        Returns:
            Stored read state of the comment

        Raises:
            NotAuthenticatedError: If there is no actor
            ForbiddenError: If the actor is not an admin
            CommentNotFoundError: If the comment does not exist
        """
        admin = require_admin(actor, "mark comments as read")

        with logfire.span(
            "moderation_service.mark_read",
            comment_id=str(comment_id),
            admin_id=str(admin.user_id),
        ):
            comment = await self.comment_repository.mark_read(
                comment_id, reader_id=admin.user_id, read_at=utcnow()
            )
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise CommentNotFoundError(str(comment_id))

            logfire.info(
                "Comment read state",
                comment_id=str(comment_id),
                read_by=str(comment.read_by) if comment.read_by else None,
                first_reader=comment.read_by == admin.user_id,
            )
            return ReadReceipt.from_comment(comment)

    async def mark_article_read(
        self, article_id: ArticleId, actor: Optional[Actor]
    ) -> int:
        """Mark every unread comment of an article as read.

        The admin's own comments are left alone, matching ``unread_count``.

        Args:
            article_id: Article ID
            actor: Caller; must be an admin

        Returns:
            Number of comments that changed state

        Raises:
            NotAuthenticatedError: If there is no actor
            ForbiddenError: If the actor is not an admin
            ArticleNotFoundError: If the article does not exist
        """
        admin = require_admin(actor, "mark comments as read")

        with logfire.span(
            "moderation_service.mark_article_read",
            article_id=str(article_id),
            admin_id=str(admin.user_id),
        ):
            article = await self.article_repository.find_by_id(article_id)
            if not article:
                logfire.warn("Article not found", article_id=str(article_id))
                raise ArticleNotFoundError(str(article_id))

            marked = await self.comment_repository.mark_article_read(
                article_id, reader_id=admin.user_id, read_at=utcnow()
            )
            logfire.info(
                "Article comments marked read",
                article_id=str(article_id),
                marked=marked,
            )
            return marked

    async def unread_count(self, actor: Optional[Actor]) -> int:
        """Count comments awaiting moderation for this admin.

        The admin's own comments never count; anonymous comments and
        comments from any other user do.

        Raises:
            NotAuthenticatedError: If there is no actor
            ForbiddenError: If the actor is not an admin
        """
        admin = require_admin(actor, "view unread comments")

        with logfire.span(
            "moderation_service.unread_count", admin_id=str(admin.user_id)
        ):
            count = await self.comment_repository.count_unread(
                exclude_author_id=admin.user_id
            )
            logfire.info("Unread comments counted", count=count)
            return count

    async def list_unread(
        self, actor: Optional[Actor], limit: Optional[int] = None
    ) -> list[UnreadComment]:
        """List unread comments, newest first.

        Each entry carries its article reference and, for registered
        authors, an author snapshot. Every call reads current state.

        Args:
            actor: Caller; must be an admin
            limit: Page size; non-positive means default, capped at max_page_size

        Returns:
            Unread comments with article and author details

        Raises:
            NotAuthenticatedError: If there is no actor
            ForbiddenError: If the actor is not an admin
        """
        admin = require_admin(actor, "view unread comments")
        page_size = self.clamp_limit(limit)

        with logfire.span(
            "moderation_service.list_unread",
            admin_id=str(admin.user_id),
            limit=page_size,
        ):
            comments = await self.comment_repository.find_unread(limit=page_size)
            if not comments:
                return []

            articles = await self.article_repository.find_by_ids(
                list({c.article_id for c in comments})
            )
            user_ids = list({c.user_id for c in comments if c.user_id is not None})
            users = await self.user_repository.find_by_ids(user_ids) if user_ids else {}

            unread: list[UnreadComment] = []
            for comment in comments:
                article = articles.get(comment.article_id)
                if article is None:
                    # Article removed between the two reads
                    logfire.warn(
                        "Skipping unread comment without article",
                        comment_id=str(comment.id),
                        article_id=str(comment.article_id),
                    )
                    continue
                user = users.get(comment.user_id) if comment.user_id else None
                unread.append(
                    UnreadComment(
                        comment=comment,
                        article=article.ref(),
                        author=user.snapshot() if user else None,
                    )
                )

            logfire.info("Unread comments listed", count=len(unread))
            return unread

    def clamp_limit(self, limit: Optional[int]) -> int:
        """Normalise a requested page size.

        Missing or non-positive sizes fall back to the default; larger ones
        are capped at ``max_page_size``.
        """
        if limit is None or limit < 1:
            return self.default_page_size
        return min(limit, self.max_page_size)
