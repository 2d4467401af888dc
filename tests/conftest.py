"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
import pytest

from blog.domain.model import (
    AnonymousAuthor,
    Article,
    Comment,
    RegisteredAuthor,
    User,
)
from blog.domain.value import (
    Actor,
    ArticleId,
    AuthorName,
    CommentId,
    Role,
    Slug,
    UserId,
)

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Fixed timestamp ``minutes`` after BASE_TIME, for ordering assertions."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(name: str = "Reader", role: Role = Role.USER) -> User:
    return User(
        id=UserId(uuid4()),
        name=name,
        email=f"{name.lower().replace(' ', '.')}@example.com",
        image=f"https://example.com/{name.lower().replace(' ', '-')}.png",
        role=role,
    )


def make_article(title: str = "Hello World") -> Article:
    """Helper to build an article with a slug derived from its title."""
    article_id = ArticleId(uuid4())
    slug = "-".join(title.lower().split()) or f"article-{str(article_id)[:8]}"
    return Article(id=article_id, title=title, slug=Slug(slug))


def make_comment(
    article_id: ArticleId,
    *,
    parent_id: CommentId | None = None,
    user_id: UserId | None = None,
    author_name: str = "Guest",
    content: str = "A comment",
    created_at: datetime | None = None,
    is_read: bool = False,
) -> Comment:
    """Helper to build a stored comment directly, bypassing the service."""
    author = (
        RegisteredAuthor(user_id=user_id)
        if user_id is not None
        else AnonymousAuthor(name=AuthorName(author_name))
    )
    created = created_at or datetime.now(timezone.utc)
    return Comment(
        id=CommentId(uuid4()),
        article_id=article_id,
        author=author,
        content=content,
        parent_id=parent_id,
        is_read=is_read,
        read_at=created if is_read else None,
        read_by=UserId(uuid4()) if is_read else None,
        created_at=created,
        updated_at=created,
    )


def actor_for(user: User) -> Actor:
    return Actor(user_id=user.id, role=user.role)


@pytest.fixture
def admin_user() -> User:
    return make_user("Admin", role=Role.ADMIN)


@pytest.fixture
def admin(admin_user: User) -> Actor:
    """Admin actor backed by ``admin_user``."""
    return actor_for(admin_user)


@pytest.fixture
def reader() -> Actor:
    """Signed-in actor without admin capability."""
    return Actor(user_id=UserId(uuid4()), role=Role.USER)
