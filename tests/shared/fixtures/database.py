"""
Database fixtures for persistence tests.

Two backends are provided:

- ``sqlite_engine`` / ``session_maker``: a fresh SQLite file database per
  test (aiosqlite). Fast, no external services, used by default.
- ``postgres_container`` / ``pg_engine`` / ``pg_session_maker``: an
  ephemeral PostgreSQL instance via Testcontainers. Only used by tests
  marked ``@pytest.mark.integration``.

Usage:
    async def test_something(uow_factory):
        async with uow_factory() as uow:
            await uow.users.save(user)
"""

import pytest
import pytest_asyncio
from sqlalchemy.pool import NullPool
from sqlalchemy.ext.asyncio import create_async_engine
from testcontainers.postgres import PostgresContainer

from launchhub_identity.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyIdentityUnitOfWork,
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)

# Use same Postgres version as production
POSTGRES_IMAGE = "postgres:16-alpine"

TEST_TIMEOUT_SECONDS = 5.0


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    """URL of a fresh SQLite file database."""
    return f"sqlite+aiosqlite:///{tmp_path / 'identity.db'}"


@pytest_asyncio.fixture
async def sqlite_engine(sqlite_url):
    """Engine with all identity tables created."""
    engine = create_engine(sqlite_url, timeout_seconds=TEST_TIMEOUT_SECONDS)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(sqlite_engine):
    return create_session_maker(sqlite_engine)


@pytest.fixture
def uow_factory(session_maker):
    """Build units of work bound to the test database."""

    def factory(timeout: float | None = TEST_TIMEOUT_SECONDS):
        return SQLAlchemyIdentityUnitOfWork(session_maker, timeout=timeout)

    return factory


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session; each test gets
    a clean schema via drop/create.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_url(postgres_container) -> str:
    """Connection URL of the test container in asyncpg format."""
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    return async_url.replace("postgresql://", "postgresql+asyncpg://")


@pytest_asyncio.fixture
async def pg_engine(postgres_url):
    """Engine against the container with a clean identity schema."""
    engine = create_async_engine(
        postgres_url,
        echo=False,
        poolclass=NullPool,  # Avoid sharing connections across event loops
    )
    await drop_tables(engine)
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()


@pytest.fixture
def pg_session_maker(pg_engine):
    return create_session_maker(pg_engine)
