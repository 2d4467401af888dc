"""Mark article comments read use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, parse_uuid
from blog.domain.service import ModerationService, require_admin
from blog.domain.value import Actor, ArticleId


class MarkArticleReadRequest(BaseModel):
    """Mark article comments read request."""

    article_id: str  # UUID string
    actor: Actor | None = None


class MarkArticleReadResponse(BaseModel):
    """Mark article comments read response."""

    article_id: str
    marked_count: int


class MarkArticleReadUseCase(BaseUseCase):
    """Use case for clearing an article's comments from the moderation queue."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(
        self, request: MarkArticleReadRequest
    ) -> MarkArticleReadResponse:
        require_admin(request.actor, "mark comments as read")
        article_id = ArticleId(parse_uuid(request.article_id, "article_id"))

        marked = await self.moderation_service.mark_article_read(
            article_id, request.actor
        )

        return MarkArticleReadResponse(
            article_id=request.article_id,
            marked_count=marked,
        )
