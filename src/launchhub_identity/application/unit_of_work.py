"""Unit of work port: one transaction per service call."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType

from launchhub_identity.domain.profile import FreelancerProfileRepository
from launchhub_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class IdentityUnitOfWork(ABC):
    """Owns one transaction and the repositories bound to it.

    Use as ``async with uow:``. Leaving the block normally commits, leaving
    it with an exception rolls back. Repositories are only available while
    the block is active. A unit of work is not re-entrant but can be used
    again once the previous block has finished.
    """

    users: UserRepository
    profiles: FreelancerProfileRepository

    def __init__(self) -> None:
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    async def __aenter__(self) -> IdentityUnitOfWork:
        if self._active:
            msg = "Unit of work is already active"
            raise RuntimeError(msg)
        await self._begin()
        self._active = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if exc_type is not None:
                logger.debug("Rolling back unit of work after %s", exc_type.__name__)
                await self._safe_rollback()
                return
            try:
                await self.commit()
            except BaseException:
                # Commit failed: make sure nothing half-written survives
                await self._safe_rollback()
                raise
        finally:
            self._active = False
            await self._safe_close()

    async def _safe_rollback(self) -> None:
        # The error that triggered the rollback is the one callers must see
        try:
            await self.rollback()
        except Exception:
            logger.exception("Rollback failed")

    async def _safe_close(self) -> None:
        try:
            await self._close()
        except Exception:
            logger.exception("Closing unit of work failed")

    @abstractmethod
    async def _begin(self) -> None:
        """Open the transaction and bind ``users`` / ``profiles``."""

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""

    @abstractmethod
    async def rollback(self) -> None:
        """Roll back the current transaction."""

    @abstractmethod
    async def _close(self) -> None:
        """Release the underlying resources."""


# Services open a fresh unit of work per call, so concurrent calls never share one
UnitOfWorkFactory = Callable[[], IdentityUnitOfWork]
