"""Domain model entities for the blog."""

from blog.domain.model.article import Article, ArticleRef
from blog.domain.model.author import (
    AnonymousAuthor,
    Author,
    AuthorSnapshot,
    RegisteredAuthor,
    resolve_author,
)
from blog.domain.model.comment import Comment
from blog.domain.model.moderation import ReadReceipt, UnreadComment
from blog.domain.model.user import User

__all__ = [
    "Article",
    "ArticleRef",
    "Author",
    "AnonymousAuthor",
    "RegisteredAuthor",
    "AuthorSnapshot",
    "resolve_author",
    "Comment",
    "ReadReceipt",
    "UnreadComment",
    "User",
]
