"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from blog.application.usecase.moderation import (
    GetUnreadCountUseCase,
    ListUnreadUseCase,
    MarkArticleReadUseCase,
    MarkReadUseCase,
)
from blog.domain.service import CommentService, ModerationService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(
        self, moderation_service: ModerationService
    ) -> MarkReadUseCase:
        """Provide mark read use case."""
        return MarkReadUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_article_read_use_case(
        self, moderation_service: ModerationService
    ) -> MarkArticleReadUseCase:
        """Provide mark article read use case."""
        return MarkArticleReadUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_unread_count_use_case(
        self, moderation_service: ModerationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_unread_use_case(
        self, moderation_service: ModerationService
    ) -> ListUnreadUseCase:
        """Provide list unread use case."""
        return ListUnreadUseCase(moderation_service=moderation_service)
