"""Get unread comment count use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import ModerationService
from blog.domain.value import Actor


class GetUnreadCountRequest(BaseModel):
    """Get unread count request."""

    actor: Actor | None = None


class GetUnreadCountResponse(BaseModel):
    """Get unread count response."""

    count: int


class GetUnreadCountUseCase(BaseUseCase):
    """Use case for the admin's unread badge.

    Comments written by the requesting admin are not counted.
    """

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        count = await self.moderation_service.unread_count(request.actor)
        return GetUnreadCountResponse(count=count)
