"""Read models for the admin moderation queue."""

from datetime import datetime
from typing import Optional

from blog.domain.model.article import ArticleRef
from blog.domain.model.author import AuthorSnapshot
from blog.domain.model.comment import Comment
from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, UserId


class ReadReceipt(DomainModel):
    """Moderation state of a single comment."""

    id: CommentId
    is_read: bool
    read_at: Optional[datetime] = None
    read_by: Optional[UserId] = None

    @classmethod
    def from_comment(cls, comment: Comment) -> "ReadReceipt":
        return cls(
            id=comment.id,
            is_read=comment.is_read,
            read_at=comment.read_at,
            read_by=comment.read_by,
        )


class UnreadComment(DomainModel):
    """Unread comment enriched for the moderation queue."""

    comment: Comment
    article: ArticleRef
    author: Optional[AuthorSnapshot] = None
