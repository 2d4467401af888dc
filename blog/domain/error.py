"""Domain layer errors.

Every error raised by the comment core carries an ``ErrorCode`` so callers
can report the same taxonomy regardless of transport.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Kinds of failure reported to callers."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    ARTICLE_NOT_FOUND = "ARTICLE_NOT_FOUND"
    PARENT_NOT_FOUND = "PARENT_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    MAX_DEPTH_EXCEEDED = "MAX_DEPTH_EXCEEDED"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainError(Exception):
    """Base domain error."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed input, reported against a single field."""

    code = ErrorCode.VALIDATION_ERROR

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class CyclicThreadError(ValidationError):
    """Raised when a parent chain loops back on itself or runs too deep."""

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__(
            "parent_id", f"Comment thread containing {comment_id} is not a tree"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ArticleNotFoundError(NotFoundError):
    """Referenced article does not exist."""

    code = ErrorCode.ARTICLE_NOT_FOUND

    def __init__(self, identifier: str):
        super().__init__("Article", identifier)


class ParentNotFoundError(NotFoundError):
    """Parent comment of a reply does not exist."""

    code = ErrorCode.PARENT_NOT_FOUND

    def __init__(self, identifier: str):
        super().__init__("Parent comment", identifier)


class CommentNotFoundError(NotFoundError):
    """Comment does not exist."""

    code = ErrorCode.COMMENT_NOT_FOUND

    def __init__(self, identifier: str):
        super().__init__("Comment", identifier)


class MaxDepthExceededError(DomainError):
    """Reply would nest deeper than the thread allows."""

    code = ErrorCode.MAX_DEPTH_EXCEEDED

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum reply depth reached ({max_depth} levels)")


class NotAuthenticatedError(DomainError):
    """No authenticated actor where one is required."""

    code = ErrorCode.UNAUTHORIZED

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Authenticated actor lacks administrator capability."""

    code = ErrorCode.FORBIDDEN

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Admin role required to {action}")


class InternalError(DomainError):
    """Unexpected store or transaction failure.

    The message is safe to show to callers; the cause is chained.
    """

    code = ErrorCode.INTERNAL_ERROR
