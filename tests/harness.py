"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio
from dishka import AsyncContainer
from httpx import AsyncClient

from blog.config import AuthSettings
from blog.domain.model import User
from blog.util.di import Component
from blog.util.jwt import create_token
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh test container and yields
    a request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory persistence
        unit_env = create_env_fixture()

        # Integration tests - real persistence, needs PostgreSQL
        integration_env = create_env_fixture(unmock={"persistence"})

        async def test_create_comment(unit_env):
            service = await unit_env.get(CommentService)
            comment = await service.create_comment(...)
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


async def sign_in(client: AsyncClient, container: AsyncContainer, user: User) -> None:
    """Attach a session cookie for ``user`` to an E2E client."""
    settings = await container.get(AuthSettings)
    token = create_token(str(user.id), user.role.value, settings, name=user.name)
    client.cookies.set(settings.cookie_name, token)
