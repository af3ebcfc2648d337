"""Shared plumbing for the SQLAlchemy repositories."""

import asyncio
from collections.abc import Awaitable
from typing import Any, TypeVar

from sqlalchemy.engine import Result
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.base import Executable

from launchhub_identity.infrastructure.persistence.sqlalchemy.errors import (
    storage_errors,
)

T = TypeVar("T")


class SQLAlchemyRepository:
    """Base class binding a repository to a session.

    Every round-trip goes through ``_execute`` / ``_flush`` so it is bounded
    by ``timeout`` seconds and its failures come out as domain storage
    errors. Repositories flush only; the unit of work commits.
    """

    def __init__(self, session: AsyncSession, timeout: float | None = None) -> None:
        self._session = session
        self._timeout = timeout

    async def _bounded(self, awaitable: Awaitable[T]) -> T:
        if self._timeout is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, timeout=self._timeout)

    async def _execute(self, stmt: Executable, operation: str) -> Result[Any]:
        async with storage_errors(operation):
            return await self._bounded(self._session.execute(stmt))

    async def _flush(self, operation: str) -> None:
        async with storage_errors(operation):
            await self._bounded(self._session.flush())
