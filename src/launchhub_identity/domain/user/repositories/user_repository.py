"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from launchhub_identity.domain.user.aggregates.user import User
from launchhub_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations raise ``ConstraintViolationError`` when the store rejects
    a write and ``StorageUnavailableError`` when it cannot be reached.
    """

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user or update an existing one.

        Returns the persisted user with its identifier populated.
        """

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Delete a user by ID. Returns False if there was nothing to delete."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""

    @abstractmethod
    async def list_all(self, include_inactive: bool = True) -> list[User]:
        """List users ordered by creation time."""
