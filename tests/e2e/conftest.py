"""Fixtures for end-to-end API tests.

The app runs against the in-memory test container; tests seed data
through the same container.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blog.interface.api.app import create_app
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    """Test container with in-memory persistence."""
    container = build_test_container()
    yield container
    await container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client bound to an app sharing ``container``."""
    app_instance = create_app(container)
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

