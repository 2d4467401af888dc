"""Delete comment use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, parse_uuid
from blog.domain.service import CommentService, require_admin
from blog.domain.value import Actor, CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    actor: Actor | None = None  # Resolved from the session


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    comment_id: str
    deleted_count: int  # The comment plus every reply below it


class DeleteCommentUseCase(BaseUseCase):
    """Use case for an admin removing a comment and its whole reply subtree."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Capability is checked before the identifier is parsed or the store
        is touched.

        Raises:
            NotAuthenticatedError: If there is no actor
            ForbiddenError: If the actor is not an admin
            ValidationError: If the comment ID is malformed
            CommentNotFoundError: If the comment does not exist
            InternalError: If the deletion fails; nothing is removed
        """
        # A malformed id from a non-admin is still FORBIDDEN
        require_admin(request.actor, "delete comments")
        comment_id = CommentId(parse_uuid(request.comment_id, "comment_id"))

        deleted = await self.comment_service.delete_comment(comment_id, request.actor)

        return DeleteCommentResponse(
            success=True,
            comment_id=request.comment_id,
            deleted_count=deleted,
        )
