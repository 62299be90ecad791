"""Test harness for integration and E2E tests.

Integration runs expect Postgres at DATABASE__URL with migrations applied;
when it isn't reachable, tests using an unmocked persistence fixture are
skipped. Settings are loaded from environment variables (configure via .env
or export).
"""

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from qna.util.di import Component
from tests.di import build_test_container


async def _database_ready(container) -> str | None:
    """Return why the database can't be used, or None when it can."""
    engine = await container.get(AsyncEngine)
    try:
        async with engine.connect() as conn:
            table = await conn.scalar(
                text("SELECT to_regclass('public.notifications')")
            )
    except (OSError, SQLAlchemyError) as e:
        return f"Postgres unavailable: {e}"
    if table is None:
        return "Postgres schema missing, run `alembic upgrade head`"
    return None


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Skips when persistence is unmocked and Postgres isn't ready
    - Rolls back the test's writes instead of committing them
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, skipped without postgres
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_register_user(integration_env):
            repo = await integration_env.get(UserRepository)
            user = await repo.save(User(...))
            assert user.id is not None
    """
    unmock = unmock or set()

    @pytest_asyncio.fixture
    async def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock)

        if "persistence" in unmock:
            reason = await _database_ready(container)
            if reason:
                await container.close()
                pytest.skip(reason)

        # Open request-scoped context
        async with container() as request_container:
            yield request_container
            if "persistence" in unmock:
                session = await request_container.get(AsyncSession)
                await session.rollback()

        await container.close()

    return _test_environment
