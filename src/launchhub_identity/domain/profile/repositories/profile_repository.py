"""Freelancer profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from launchhub_identity.domain.profile.entities.freelancer_profile import (
    FreelancerProfile,
)


class FreelancerProfileRepository(ABC):
    """Repository interface for FreelancerProfile entities."""

    @abstractmethod
    async def find_by_id(self, profile_id: int) -> Optional[FreelancerProfile]:
        """Find a profile by its own ID."""

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> Optional[FreelancerProfile]:
        """Find the profile owned by a user."""

    @abstractmethod
    async def save(self, profile: FreelancerProfile) -> FreelancerProfile:
        """Insert a new profile or update an existing one.

        Returns the persisted profile with its identifier populated. The
        owning user reference is written on insert only.
        """

    @abstractmethod
    async def delete(self, profile_id: int) -> bool:
        """Delete a profile by ID."""

    @abstractmethod
    async def delete_by_user_id(self, user_id: int) -> bool:
        """Delete the profile owned by a user, if any."""
