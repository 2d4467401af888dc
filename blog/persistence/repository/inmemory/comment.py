"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from blog.domain.error import ParentNotFoundError
from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import ArticleId, CommentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find all comments of an article, oldest first."""
        comments = [c for c in self._comments.values() if c.article_id == article_id]
        comments.sort(key=lambda c: (c.created_at, str(c.id)))
        return comments

    async def find_child_ids(self, parent_ids: Sequence[CommentId]) -> list[CommentId]:
        """Find IDs of the direct replies to any of the given comments."""
        wanted = set(parent_ids)
        return [
            c.id
            for c in self._comments.values()
            if c.parent_id is not None and c.parent_id in wanted
        ]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment, enforcing the parent reference like the database."""
        if comment.parent_id is not None and comment.parent_id not in self._comments:
            raise ParentNotFoundError(str(comment.parent_id))
        self._comments[comment.id] = comment
        return comment

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete comments all-or-nothing.

        Works on a copy that replaces the store only once every id is gone.
        """
        remaining = dict(self._comments)
        removed = 0
        for comment_id in comment_ids:
            if comment_id in remaining:
                self._evict(remaining, comment_id)
                removed += 1
        self._comments = remaining
        return removed

    def _evict(self, store: dict[CommentId, Comment], comment_id: CommentId) -> None:
        del store[comment_id]

    async def mark_read(
        self, comment_id: CommentId, reader_id: UserId, read_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment read unless it already is."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        if not comment.is_read:
            comment = comment.mark_read(reader_id, read_at).model_copy(
                update={"updated_at": read_at}
            )
            self._comments[comment_id] = comment
        return comment

    async def mark_article_read(
        self,
        article_id: ArticleId,
        reader_id: UserId,
        read_at: datetime,
    ) -> int:
        """Mark every unread comment of an article not written by the reader."""
        marked = 0
        for comment in list(self._comments.values()):
            if (
                comment.article_id == article_id
                and not comment.is_read
                and not comment.is_authored_by(reader_id)
            ):
                self._comments[comment.id] = comment.mark_read(
                    reader_id, read_at
                ).model_copy(update={"updated_at": read_at})
                marked += 1
        return marked

    async def count_unread(self, exclude_author_id: Optional[UserId] = None) -> int:
        """Count unread comments, optionally skipping one registered author."""
        return sum(
            1
            for c in self._comments.values()
            if not c.is_read
            and (exclude_author_id is None or not c.is_authored_by(exclude_author_id))
        )

    async def find_unread(self, limit: int = 20) -> list[Comment]:
        """Find unread comments, newest first."""
        unread = [c for c in self._comments.values() if not c.is_read]
        unread.sort(key=lambda c: (c.created_at, str(c.id)), reverse=True)
        return unread[:limit]
