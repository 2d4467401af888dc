"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from blog.domain.error import (
    ArticleNotFoundError,
    MaxDepthExceededError,
    ValidationError,
)
from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from tests.conftest import make_article, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    async def test_anonymous_comment(self, unit_env):
        """Anonymous comment is created unread with its display name."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        articles = await unit_env.get(ArticleRepository)
        article = await articles.save(make_article())

        request = CreateCommentRequest(
            article_id=str(article.id),
            content="Great read",
            author_name="Guest",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.article_id == str(article.id)
        assert response.parent_id is None
        assert response.user_id is None
        assert response.author_name == "Guest"
        assert response.content == "Great read"
        assert response.is_read is False

    async def test_registered_reply(self, unit_env):
        """Reply by a signed-in user links to its parent."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        articles = await unit_env.get(ArticleRepository)
        comments = await unit_env.get(CommentRepository)
        article = await articles.save(make_article())
        users = await unit_env.get(UserRepository)
        user = await users.save(make_user())

        parent = await use_case.execute(
            CreateCommentRequest(
                article_id=str(article.id), content="Root", author_name="Guest"
            )
        )

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                article_id=str(article.id),
                content="Reply",
                user_id=str(user.id),
                parent_id=parent.comment_id,
            )
        )

        # Assert
        assert response.parent_id == parent.comment_id
        assert response.user_id == str(user.id)
        assert response.author_name is None
        assert len(await comments.find_by_article(article.id)) == 2

    async def test_fourth_level_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        articles = await unit_env.get(ArticleRepository)
        article = await articles.save(make_article())

        parent_id = None
        for level in range(3):
            created = await use_case.execute(
                CreateCommentRequest(
                    article_id=str(article.id),
                    content=f"Level {level}",
                    author_name="Guest",
                    parent_id=parent_id,
                )
            )
            parent_id = created.comment_id

        with pytest.raises(MaxDepthExceededError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=str(article.id),
                    content="Too deep",
                    author_name="Guest",
                    parent_id=parent_id,
                )
            )

    @pytest.mark.parametrize("field", ["article_id", "parent_id", "user_id"])
    async def test_malformed_identifier(self, unit_env, field):
        use_case = await unit_env.get(CreateCommentUseCase)
        values = {
            "article_id": str(uuid4()),
            "content": "Hello",
            "author_name": "Guest",
            field: "not-a-uuid",
        }

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(CreateCommentRequest(**values))

        assert exc_info.value.field == field

    async def test_nonexistent_article(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ArticleNotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=str(uuid4()), content="Hello", author_name="Guest"
                )
            )
