"""Storage round-trips are bounded by the configured timeout."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from launchhub_identity.domain.shared.exceptions import StorageUnavailableError
from launchhub_identity.domain.user import User
from launchhub_identity.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyIdentityUnitOfWork,
    UserRepositorySQLAlchemy,
)


async def _hang(*_args, **_kwargs):
    await asyncio.sleep(10)


def _slow_session() -> MagicMock:
    session = MagicMock()
    session.execute = AsyncMock(side_effect=_hang)
    session.flush = AsyncMock(side_effect=_hang)
    session.commit = AsyncMock(side_effect=_hang)
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


class TestRepositoryTimeouts:
    @pytest.mark.asyncio
    async def test_slow_query_becomes_storage_unavailable(self):
        repo = UserRepositorySQLAlchemy(_slow_session(), timeout=0.05)

        with pytest.raises(StorageUnavailableError):
            await repo.find_by_id(1)

    @pytest.mark.asyncio
    async def test_slow_flush_becomes_storage_unavailable(self):
        repo = UserRepositorySQLAlchemy(_slow_session(), timeout=0.05)

        with pytest.raises(StorageUnavailableError):
            await repo.save(User.create("slow@example.com", "$2b$04$hash", "client"))


class TestUnitOfWorkTimeouts:
    @pytest.mark.asyncio
    async def test_slow_commit_becomes_storage_unavailable_and_rolls_back(self):
        session = _slow_session()
        uow = SQLAlchemyIdentityUnitOfWork(lambda: session, timeout=0.05)

        with pytest.raises(StorageUnavailableError):
            async with uow:
                pass

        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()
