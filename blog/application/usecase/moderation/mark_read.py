"""Mark comment read use case."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, parse_uuid
from blog.domain.service import ModerationService, require_admin
from blog.domain.value import Actor, CommentId


class MarkReadRequest(BaseModel):
    """Mark comment read request."""

    comment_id: str  # UUID string
    actor: Actor | None = None  # Resolved from the session


class MarkReadResponse(BaseModel):
    """Stored read state of the comment."""

    comment_id: str
    is_read: bool
    read_at: datetime | None
    read_by: str | None


class MarkReadUseCase(BaseUseCase):
    """Use case for an admin acknowledging a comment.

    Safe to retry: a second call returns the first reader and timestamp.
    """

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        """Execute mark read flow.

        Raises:
            NotAuthenticatedError: If there is no actor
            ForbiddenError: If the actor is not an admin
            ValidationError: If the comment ID is malformed
            CommentNotFoundError: If the comment does not exist
        """
        require_admin(request.actor, "mark comments as read")
        comment_id = CommentId(parse_uuid(request.comment_id, "comment_id"))

        receipt = await self.moderation_service.mark_read(comment_id, request.actor)

        return MarkReadResponse(
            comment_id=str(receipt.id),
            is_read=receipt.is_read,
            read_at=receipt.read_at,
            read_by=str(receipt.read_by) if receipt.read_by else None,
        )
