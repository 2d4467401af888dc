"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from blog.domain.model.comment import Comment
from blog.domain.value import ArticleId, CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments of an article, oldest first.

        Args:
            article_id: The article ID

        Returns:
            List of comments ordered by creation time
        """
        pass

    @abstractmethod
    async def find_child_ids(
        self, parent_ids: Sequence[CommentId]
    ) -> List[CommentId]:
        """Find IDs of the direct replies to any of the given comments.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            IDs of comments whose parent is in ``parent_ids``
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment

        Raises:
            ArticleNotFoundError: If the article vanished before the insert
            ParentNotFoundError: If the parent vanished before the insert
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete a set of comments atomically.

        Either every listed comment is removed or none is.

        Args:
            comment_ids: IDs to delete

        Returns:
            Number of comments removed
        """
        pass

    @abstractmethod
    async def mark_read(
        self, comment_id: CommentId, reader_id: UserId, read_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment read unless it already is.

        The first reader and timestamp are kept; later calls change nothing.

        Args:
            comment_id: The comment ID
            reader_id: Admin marking the comment
            read_at: Time of reading

        Returns:
            The comment in its stored state, None if it does not exist
        """
        pass

    @abstractmethod
    async def mark_article_read(
        self,
        article_id: ArticleId,
        reader_id: UserId,
        read_at: datetime,
    ) -> int:
        """Mark every unread comment of an article not written by the reader.

        Args:
            article_id: The article ID
            reader_id: Admin marking the comments
            read_at: Time of reading

        Returns:
            Number of comments marked
        """
        pass

    @abstractmethod
    async def count_unread(self, exclude_author_id: Optional[UserId] = None) -> int:
        """Count unread comments.

        Anonymous comments are always counted.

        Args:
            exclude_author_id: Registered author whose comments are skipped

        Returns:
            Number of unread comments
        """
        pass

    @abstractmethod
    async def find_unread(self, limit: int = 20) -> List[Comment]:
        """Find unread comments, newest first.

        Args:
            limit: Maximum number of comments to return

        Returns:
            List of unread comments
        """
        pass
