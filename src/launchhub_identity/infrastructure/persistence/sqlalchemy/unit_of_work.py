"""SQLAlchemy implementation of IdentityUnitOfWork."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from launchhub_identity.application.unit_of_work import IdentityUnitOfWork
from launchhub_identity.infrastructure.persistence.sqlalchemy.errors import (
    storage_errors,
)
from launchhub_identity.infrastructure.persistence.sqlalchemy.repositories import (
    FreelancerProfileRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

T = TypeVar("T")


class SQLAlchemyIdentityUnitOfWork(IdentityUnitOfWork):
    """Opens a fresh AsyncSession per ``async with`` block.

    Both repositories share that session, so everything written inside one
    block commits or rolls back together.
    """

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        timeout: float | None = None,
    ) -> None:
        super().__init__()
        self._session_maker = session_maker
        self._timeout = timeout
        self._session: AsyncSession | None = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            msg = "Unit of work is not active"
            raise RuntimeError(msg)
        return self._session

    async def _begin(self) -> None:
        self._session = self._session_maker()
        self.users = UserRepositorySQLAlchemy(self._session, self._timeout)
        self.profiles = FreelancerProfileRepositorySQLAlchemy(
            self._session,
            self._timeout,
        )

    async def commit(self) -> None:
        async with storage_errors("commit"):
            await self._bounded(self.session.commit())

    async def rollback(self) -> None:
        if self._session is None:
            return
        async with storage_errors("rollback"):
            await self._session.rollback()

    async def _close(self) -> None:
        if self._session is None:
            return
        try:
            await self._session.close()
        finally:
            self._session = None

    async def _bounded(self, awaitable: Awaitable[T]) -> T:
        if self._timeout is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, timeout=self._timeout)
