"""Unit tests for ModerationService."""

from uuid import uuid4

import pytest

from blog.domain.error import (
    ArticleNotFoundError,
    CommentNotFoundError,
    ForbiddenError,
    NotAuthenticatedError,
)
from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from blog.domain.service import ModerationService
from blog.domain.value import ArticleId, CommentId, Role
from tests.conftest import actor_for, at, make_article, make_comment, make_user
from tests.harness import create_env_fixture

# Unit test fixture - in-memory persistence
unit_env = create_env_fixture()


async def seed_article(env, title: str = "Hello World"):
    articles = await env.get(ArticleRepository)
    return await articles.save(make_article(title))


async def seed_comment(env, article, **kwargs):
    comments = await env.get(CommentRepository)
    return await comments.save(make_comment(article.id, **kwargs))


class TestMarkRead:
    """Tests for mark_read method."""

    async def test_marks_unread_comment(self, unit_env, admin):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        comment = await seed_comment(unit_env, article)

        receipt = await service.mark_read(comment.id, admin)

        assert receipt.id == comment.id
        assert receipt.is_read is True
        assert receipt.read_by == admin.user_id
        assert receipt.read_at is not None

    async def test_second_call_is_a_no_op(self, unit_env, admin):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        comment = await seed_comment(unit_env, article)

        first = await service.mark_read(comment.id, admin)
        second = await service.mark_read(comment.id, admin)

        assert second == first

    async def test_first_reader_is_kept(self, unit_env, admin):
        """A later admin does not overwrite who read the comment first."""
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        comment = await seed_comment(unit_env, article)
        other_admin = actor_for(make_user("Second Admin", role=Role.ADMIN))

        first = await service.mark_read(comment.id, admin)
        second = await service.mark_read(comment.id, other_admin)

        assert second.read_by == admin.user_id
        assert second.read_at == first.read_at

    async def test_unknown_comment(self, unit_env, admin):
        service = await unit_env.get(ModerationService)

        with pytest.raises(CommentNotFoundError):
            await service.mark_read(CommentId(uuid4()), admin)

    async def test_requires_authentication(self, unit_env):
        service = await unit_env.get(ModerationService)
        comments = await unit_env.get(CommentRepository)
        article = await seed_article(unit_env)
        comment = await seed_comment(unit_env, article)

        with pytest.raises(NotAuthenticatedError):
            await service.mark_read(comment.id, None)

        assert (await comments.find_by_id(comment.id)).is_read is False

    async def test_requires_admin(self, unit_env, reader):
        service = await unit_env.get(ModerationService)
        comments = await unit_env.get(CommentRepository)
        article = await seed_article(unit_env)
        comment = await seed_comment(unit_env, article)

        with pytest.raises(ForbiddenError):
            await service.mark_read(comment.id, reader)

        assert (await comments.find_by_id(comment.id)).is_read is False


class TestMarkArticleRead:
    """Tests for mark_article_read method."""

    async def test_marks_only_that_articles_unread_comments(
        self, unit_env, admin, admin_user
    ):
        service = await unit_env.get(ModerationService)
        comments = await unit_env.get(CommentRepository)
        article = await seed_article(unit_env, "First Article")
        other = await seed_article(unit_env, "Second Article")
        await seed_comment(unit_env, article, created_at=at(0))
        await seed_comment(unit_env, article, created_at=at(1))
        await seed_comment(unit_env, article, created_at=at(2), is_read=True)
        own = await seed_comment(
            unit_env, article, user_id=admin_user.id, created_at=at(3)
        )
        elsewhere = await seed_comment(unit_env, other, created_at=at(4))

        marked = await service.mark_article_read(article.id, admin)

        assert marked == 2
        assert (await comments.find_by_id(own.id)).is_read is False
        assert (await comments.find_by_id(elsewhere.id)).is_read is False

    async def test_unknown_article(self, unit_env, admin):
        service = await unit_env.get(ModerationService)

        with pytest.raises(ArticleNotFoundError):
            await service.mark_article_read(ArticleId(uuid4()), admin)

    async def test_requires_admin(self, unit_env, reader):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)

        with pytest.raises(ForbiddenError):
            await service.mark_article_read(article.id, reader)


class TestUnreadCount:
    """Tests for unread_count method."""

    async def test_empty_store(self, unit_env, admin):
        service = await unit_env.get(ModerationService)

        assert await service.unread_count(admin) == 0

    async def test_excludes_read_and_own_comments(self, unit_env, admin, admin_user):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        other_user = make_user("Commenter")
        await seed_comment(unit_env, article)  # anonymous
        await seed_comment(unit_env, article, user_id=other_user.id)
        await seed_comment(unit_env, article, user_id=admin_user.id)
        await seed_comment(unit_env, article, is_read=True)

        assert await service.unread_count(admin) == 2

    async def test_own_comments_count_for_other_admins(
        self, unit_env, admin, admin_user
    ):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        await seed_comment(unit_env, article, user_id=admin_user.id)
        other_admin = actor_for(make_user("Second Admin", role=Role.ADMIN))

        assert await service.unread_count(admin) == 0
        assert await service.unread_count(other_admin) == 1

    async def test_drops_after_mark_read(self, unit_env, admin):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        comment = await seed_comment(unit_env, article)
        await seed_comment(unit_env, article)

        await service.mark_read(comment.id, admin)

        assert await service.unread_count(admin) == 1

    async def test_requires_authentication(self, unit_env):
        service = await unit_env.get(ModerationService)

        with pytest.raises(NotAuthenticatedError):
            await service.unread_count(None)

    async def test_requires_admin(self, unit_env, reader):
        service = await unit_env.get(ModerationService)

        with pytest.raises(ForbiddenError):
            await service.unread_count(reader)


class TestListUnread:
    """Tests for list_unread method."""

    async def test_newest_first_and_skips_read(self, unit_env, admin):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        oldest = await seed_comment(unit_env, article, created_at=at(0))
        await seed_comment(unit_env, article, created_at=at(1), is_read=True)
        newest = await seed_comment(unit_env, article, created_at=at(2))

        unread = await service.list_unread(admin)

        assert [u.comment.id for u in unread] == [newest.id, oldest.id]

    async def test_enriched_with_article_and_author(self, unit_env, admin):
        service = await unit_env.get(ModerationService)
        users = await unit_env.get(UserRepository)
        article = await seed_article(unit_env, "Deep Dive")
        user = await users.save(make_user("Grace Hopper"))
        await seed_comment(unit_env, article, created_at=at(0))
        await seed_comment(unit_env, article, user_id=user.id, created_at=at(1))

        registered, anonymous = await service.list_unread(admin)

        assert registered.article.id == article.id
        assert registered.article.title == "Deep Dive"
        assert str(registered.article.slug) == "deep-dive"
        assert registered.author.id == user.id
        assert registered.author.name == "Grace Hopper"
        assert anonymous.author is None
        assert anonymous.comment.author_name == "Guest"

    async def test_default_page_size(self, unit_env, admin):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        for minute in range(25):
            await seed_comment(unit_env, article, created_at=at(minute))

        unread = await service.list_unread(admin)

        assert len(unread) == 20
        assert unread[0].comment.created_at == at(24)

    @pytest.mark.parametrize(
        ("requested", "expected"),
        [(5, 5), (0, 20), (-3, 20), (500, 100)],
    )
    async def test_limit_is_normalised(self, unit_env, admin, requested, expected):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        for minute in range(105):
            await seed_comment(unit_env, article, created_at=at(minute))

        unread = await service.list_unread(admin, limit=requested)

        assert len(unread) == expected

    async def test_does_not_mark_anything_read(self, unit_env, admin):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        await seed_comment(unit_env, article)

        await service.list_unread(admin)

        assert await service.unread_count(admin) == 1

    async def test_ties_break_consistently(self, unit_env, admin):
        service = await unit_env.get(ModerationService)
        article = await seed_article(unit_env)
        same_time = at(0)
        for _ in range(3):
            await seed_comment(unit_env, article, created_at=same_time)

        first = await service.list_unread(admin)
        second = await service.list_unread(admin)

        assert [u.comment.id for u in first] == [u.comment.id for u in second]

    async def test_requires_admin(self, unit_env, reader):
        service = await unit_env.get(ModerationService)

        with pytest.raises(ForbiddenError):
            await service.list_unread(reader)


class TestClampLimit:
    """Tests for clamp_limit helper."""

    def test_default_when_missing(self):
        service = ModerationService(None, None, None)

        assert service.clamp_limit(None) == 20

    def test_custom_bounds(self):
        service = ModerationService(
            None, None, None, default_page_size=5, max_page_size=10
        )

        assert service.clamp_limit(None) == 5
        assert service.clamp_limit(11) == 10
        assert service.clamp_limit(3) == 3
        assert service.clamp_limit(0) == 5
        assert service.clamp_limit(-1) == 5

