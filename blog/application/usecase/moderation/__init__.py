"""Moderation use cases."""

from .get_unread_count import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
)
from .list_unread import (
    ArticleRefResponse,
    ListUnreadRequest,
    ListUnreadResponse,
    ListUnreadUseCase,
    UnreadCommentResponse,
)
from .mark_article_read import (
    MarkArticleReadRequest,
    MarkArticleReadResponse,
    MarkArticleReadUseCase,
)
from .mark_read import MarkReadRequest, MarkReadResponse, MarkReadUseCase

__all__ = [
    "GetUnreadCountRequest",
    "GetUnreadCountResponse",
    "GetUnreadCountUseCase",
    "ArticleRefResponse",
    "ListUnreadRequest",
    "ListUnreadResponse",
    "ListUnreadUseCase",
    "UnreadCommentResponse",
    "MarkArticleReadRequest",
    "MarkArticleReadResponse",
    "MarkArticleReadUseCase",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
]
