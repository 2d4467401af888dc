"""Domain value objects for the blog."""

from blog.domain.value.identifiers import ArticleId, CommentId, UserId
from blog.domain.value.types import (
    AUTHOR_NAME_MAX_LENGTH,
    COMMENT_CONTENT_MAX_LENGTH,
    Actor,
    AuthorName,
    Role,
    Slug,
)

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    # Types
    "Actor",
    "AuthorName",
    "Role",
    "Slug",
    # Limits
    "AUTHOR_NAME_MAX_LENGTH",
    "COMMENT_CONTENT_MAX_LENGTH",
]
