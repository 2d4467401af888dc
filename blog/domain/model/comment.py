"""Comment entity.

Comments are threaded replies on an article. Depth is never stored; it is
derived from the parent chain when needed.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from blog.domain.model.author import AnonymousAuthor, Author, RegisteredAuthor
from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import COMMENT_CONTENT_MAX_LENGTH, ArticleId, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Moderation state moves one way only: a comment starts unread and, once
    an admin reads it, keeps the first reader and timestamp forever.
    """

    id: CommentId
    article_id: ArticleId
    author: Author
    content: str = Field(min_length=1, max_length=COMMENT_CONTENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    is_read: bool = False
    read_at: Optional[datetime] = None
    read_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_read_state(self) -> "Comment":
        """Unread comments cannot carry reader details."""
        if not self.is_read and (self.read_at or self.read_by):
            raise ValueError("Unread comment cannot have read_at or read_by")
        return self

    @property
    def user_id(self) -> Optional[UserId]:
        """Author's user ID for registered comments."""
        if isinstance(self.author, RegisteredAuthor):
            return self.author.user_id
        return None

    @property
    def author_name(self) -> Optional[str]:
        """Display name for anonymous comments."""
        if isinstance(self.author, AnonymousAuthor):
            return self.author.name.root
        return None

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    def is_authored_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    def mark_read(self, reader_id: UserId, at: datetime) -> "Comment":
        """Return this comment in the read state.

        Already-read comments are returned unchanged.
        """
        if self.is_read:
            return self
        return self.model_copy(
            update={"is_read": True, "read_at": at, "read_by": reader_id}
        )
