"""Unit tests for GetCommentsUseCase."""

from uuid import uuid4

import pytest

from blog.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from blog.domain.error import ArticleNotFoundError, ValidationError
from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from tests.conftest import at, make_article, make_comment, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    async def test_returns_nested_threads(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        articles = await unit_env.get(ArticleRepository)
        comments = await unit_env.get(CommentRepository)
        users = await unit_env.get(UserRepository)
        article = await articles.save(make_article())
        user = await users.save(make_user("Ada Lovelace"))

        root = await comments.save(make_comment(article.id, created_at=at(0)))
        reply = await comments.save(
            make_comment(
                article.id, parent_id=root.id, user_id=user.id, created_at=at(1)
            )
        )
        await comments.save(
            make_comment(article.id, parent_id=reply.id, created_at=at(2))
        )

        # Act
        response = await use_case.execute(
            GetCommentsRequest(article_id=str(article.id))
        )

        # Assert
        assert response.total == 3
        assert len(response.comments) == 1
        top = response.comments[0]
        assert top.comment_id == str(root.id)
        assert top.author_name == "Guest"
        assert top.author is None
        assert top.depth == 0
        child = top.replies[0]
        assert child.depth == 1
        assert child.author.user_id == str(user.id)
        assert child.author.name == "Ada Lovelace"
        assert child.replies[0].depth == 2

    async def test_empty_article(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        articles = await unit_env.get(ArticleRepository)
        article = await articles.save(make_article())

        response = await use_case.execute(
            GetCommentsRequest(article_id=str(article.id))
        )

        assert response.comments == []
        assert response.total == 0

    async def test_nonexistent_article(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ArticleNotFoundError):
            await use_case.execute(GetCommentsRequest(article_id=str(uuid4())))

    async def test_malformed_article_id(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(GetCommentsRequest(article_id="latest"))

        assert exc_info.value.field == "article_id"
