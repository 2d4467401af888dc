"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import desc, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import (
    ArticleNotFoundError,
    ParentNotFoundError,
    ValidationError,
)
from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import ArticleId, CommentId, UserId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import (
    FK_COMMENTS_ARTICLE_ID,
    FK_COMMENTS_PARENT_ID,
    FK_COMMENTS_USER_ID,
    comments_table,
)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _not_authored_by(self, user_id: Optional[UserId]):
        """Filter matching anonymous comments and comments by anyone else."""
        if user_id is None:
            return comments_table.c.id.isnot(None)
        return or_(
            comments_table.c.user_id.is_(None),
            comments_table.c.user_id != user_id,
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments of an article, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.article_id == article_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_child_ids(
        self, parent_ids: Sequence[CommentId]
    ) -> List[CommentId]:
        """Find IDs of the direct replies to any of the given comments."""
        if not parent_ids:
            return []

        stmt = select(comments_table.c.id).where(
            comments_table.c.parent_id.in_(list(parent_ids))
        )
        result = await self.session.execute(stmt)
        return [CommentId(row_id) for row_id in result.scalars().all()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        A parent, article or author deleted between validation and insert
        surfaces as a foreign key violation, translated to the matching
        domain error.
        """
        stmt = comments_table.insert().values(**comment_to_dict(comment))

        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            detail = str(e.orig)
            if FK_COMMENTS_PARENT_ID in detail:
                logfire.warn(
                    "Parent removed before insert",
                    comment_id=str(comment.id),
                    parent_id=str(comment.parent_id),
                )
                raise ParentNotFoundError(str(comment.parent_id)) from e
            if FK_COMMENTS_ARTICLE_ID in detail:
                logfire.warn(
                    "Article removed before insert",
                    comment_id=str(comment.id),
                    article_id=str(comment.article_id),
                )
                raise ArticleNotFoundError(str(comment.article_id)) from e
            if FK_COMMENTS_USER_ID in detail:
                logfire.warn(
                    "Author removed before insert",
                    comment_id=str(comment.id),
                    user_id=str(comment.user_id),
                )
                raise ValidationError(
                    "user_id", "Comment author does not exist"
                ) from e
            raise

        return comment

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete a set of comments in one statement.

        Runs inside a savepoint so a failure leaves every row in place.
        Replies inserted after the ids were collected go with their parent
        through ``ON DELETE CASCADE``.
        """
        if not comment_ids:
            return 0

        stmt = comments_table.delete().where(
            comments_table.c.id.in_(list(comment_ids))
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def mark_read(
        self, comment_id: CommentId, reader_id: UserId, read_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment read unless it already is.

        The ``is_read = false`` guard makes the first writer win under
        concurrent calls.
        """
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_read.is_(False))
            .values(
                is_read=True,
                read_at=read_at,
                read_by=reader_id,
                updated_at=read_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(comment_id)

    async def mark_article_read(
        self,
        article_id: ArticleId,
        reader_id: UserId,
        read_at: datetime,
    ) -> int:
        """Mark every unread comment of an article not written by the reader."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.article_id == article_id)
            .where(comments_table.c.is_read.is_(False))
            .where(self._not_authored_by(reader_id))
            .values(
                is_read=True,
                read_at=read_at,
                read_by=reader_id,
                updated_at=read_at,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def count_unread(self, exclude_author_id: Optional[UserId] = None) -> int:
        """Count unread comments, optionally skipping one registered author."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.is_read.is_(False))
            .where(self._not_authored_by(exclude_author_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_unread(self, limit: int = 20) -> List[Comment]:
        """Find unread comments, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.is_read.is_(False))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]
