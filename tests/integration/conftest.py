"""Fixtures for integration tests against PostgreSQL.

The schema must be migrated first (``python scripts/run_migrations.py``).
Tests are skipped when ``DATABASE__URL`` is not set.
"""

import os

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


def pytest_collection_modifyitems(config, items):
    skip = pytest.mark.skip(reason="DATABASE__URL not set")
    for item in items:
        if "integration" in item.nodeid.split("::")[0].split("/"):
            item.add_marker(pytest.mark.integration)
            if not os.getenv("DATABASE__URL"):
                item.add_marker(skip)


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)

    # CASCADE follows comment -> article -> user references
    await session.execute(text("TRUNCATE TABLE comments, articles, users CASCADE"))
    await session.commit()

    yield
