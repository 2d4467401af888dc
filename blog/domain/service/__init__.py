"""Domain services."""

from .base import Service, require_admin
from .comment_service import CommentService
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .thread import (
    MAX_COMMENT_DEPTH,
    CommentNode,
    build_thread,
    calculate_depth,
    count_nodes,
)

__all__ = [
    "CommentNode",
    "CommentService",
    "JWTService",
    "MAX_COMMENT_DEPTH",
    "ModerationService",
    "Service",
    "build_thread",
    "calculate_depth",
    "count_nodes",
    "require_admin",
]
