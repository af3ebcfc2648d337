"""Freelancer profile service."""

import logging

from launchhub_identity.application.unit_of_work import UnitOfWorkFactory
from launchhub_identity.domain.profile import (
    FreelancerProfile,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)
from launchhub_identity.domain.shared.exceptions import (
    ConstraintKind,
    ConstraintViolationError,
    ValidationFailedError,
)
from launchhub_identity.domain.user import UserNotFoundError

logger = logging.getLogger(__name__)


class FreelancerProfileService:
    """Manages the optional one-to-one profile of a user."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory):
        self._uow_factory = unit_of_work_factory

    async def create_profile(self, user_id: int, **fields) -> FreelancerProfile:
        """Attach a new profile to an existing user.

        Raises
        ------
        UserNotFoundError
            If the user does not exist
        ProfileAlreadyExistsError
            If the user already owns a profile
        InvalidProfileError
            If a field is malformed
        """
        profile = FreelancerProfile.create(user_id, **fields)

        async with self._uow_factory() as uow:
            if await uow.users.find_by_id(user_id) is None:
                raise UserNotFoundError(user_id)
            if await uow.profiles.find_by_user_id(user_id) is not None:
                raise ProfileAlreadyExistsError(user_id)
            try:
                saved = await uow.profiles.save(profile)
            except ConstraintViolationError as e:
                translated = self._translate(e, user_id)
                if translated is None:
                    raise
                raise translated from e

        logger.info("Profile created for user %s", user_id)
        return saved

    async def get_profile(self, user_id: int) -> FreelancerProfile:
        async with self._uow_factory() as uow:
            profile = await uow.profiles.find_by_user_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def update_profile(self, user_id: int, **changes) -> FreelancerProfile:
        """Apply partial changes; omitted fields stay, ``None`` clears a field."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.find_by_user_id(user_id)
            if profile is None:
                raise ProfileNotFoundError(user_id)
            if not profile.update_details(**changes):
                return profile
            try:
                saved = await uow.profiles.save(profile)
            except ConstraintViolationError as e:
                translated = self._translate(e, user_id)
                if translated is None:
                    raise
                raise translated from e

        logger.debug("Profile of user %s updated", user_id)
        return saved

    async def delete_profile(self, user_id: int) -> None:
        async with self._uow_factory() as uow:
            deleted = await uow.profiles.delete_by_user_id(user_id)
        if not deleted:
            raise ProfileNotFoundError(user_id)

    def _translate(self, error: ConstraintViolationError, user_id: int) -> Exception | None:
        if error.kind == ConstraintKind.FOREIGN_KEY:
            return UserNotFoundError(user_id)
        if error.kind == ConstraintKind.UNIQUE and error.involves("user_id"):
            return ProfileAlreadyExistsError(user_id)
        if error.kind in (ConstraintKind.NOT_NULL, ConstraintKind.CHECK):
            return ValidationFailedError(
                f"Profile rejected by storage ({error.kind.value}): {error.constraint}",
            )
        return None
