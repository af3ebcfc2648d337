"""Async engine and session factory construction."""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from launchhub_config.settings import Settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    # SQLite ignores FOREIGN KEY clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(
    url: str,
    *,
    echo: bool = False,
    timeout_seconds: float | None = None,
) -> AsyncEngine:
    """Create an async engine for ``url``.

    SQLite connections get foreign key enforcement; connect timeouts are
    passed to the driver when ``timeout_seconds`` is given.
    """
    connect_args: dict[str, Any] = {}
    is_sqlite = url.startswith("sqlite")

    if is_sqlite:
        db_path = url.split("///", 1)[-1] if "///" in url else ""
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        if timeout_seconds is not None:
            connect_args["timeout"] = timeout_seconds
    elif url.startswith("postgresql+asyncpg") and timeout_seconds is not None:
        connect_args["timeout"] = timeout_seconds
        connect_args["command_timeout"] = timeout_seconds

    engine = create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=not is_sqlite,
        connect_args=connect_args,
    )

    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the engine described by application settings."""
    url = settings.database_url
    db_display = url.split("@")[-1] if "@" in url else url
    logger.debug("Creating database engine for %s", db_display)
    return create_engine(
        url,
        echo=settings.database_echo,
        timeout_seconds=settings.database_timeout_seconds,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory used by the unit of work."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
