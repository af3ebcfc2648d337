"""
Pytest configuration for launchhub_identity integration tests.

Re-exports the shared database fixtures (SQLite and Testcontainers
PostgreSQL) so test modules can request them by name.
"""

from tests.shared.fixtures.database import (
    pg_engine,
    pg_session_maker,
    postgres_container,
    postgres_url,
    session_maker,
    sqlite_engine,
    sqlite_url,
    uow_factory,
)

__all__ = [
    "pg_engine",
    "pg_session_maker",
    "postgres_container",
    "postgres_url",
    "session_maker",
    "sqlite_engine",
    "sqlite_url",
    "uow_factory",
]
