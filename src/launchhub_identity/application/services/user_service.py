"""User service: the write and lookup paths for user accounts."""

import logging
from typing import Union

from launchhub_identity.application.unit_of_work import (
    IdentityUnitOfWork,
    UnitOfWorkFactory,
)
from launchhub_identity.domain.profile import FreelancerProfile
from launchhub_identity.domain.shared.exceptions import (
    ConstraintKind,
    ConstraintViolationError,
    ValidationFailedError,
)
from launchhub_identity.domain.user import (
    DuplicateEmailError,
    Email,
    User,
    UserNotFoundError,
    UserRole,
)
from launchhub_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)


def translate_user_violation(
    error: ConstraintViolationError,
    email: Union[str, Email],
) -> Exception | None:
    """Map a rejected user write onto the matching domain error, if any."""
    if error.kind == ConstraintKind.UNIQUE and error.involves("email"):
        return DuplicateEmailError(Email.of(email).value)
    if error.kind in (ConstraintKind.NOT_NULL, ConstraintKind.CHECK):
        return ValidationFailedError(
            f"User record rejected by storage ({error.kind.value}): {error.constraint}",
        )
    return None


class UserService:
    """Creates, looks up and maintains user accounts.

    Every public method opens its own unit of work from the factory, so a
    call either persists all of its writes or none of them, and overlapping
    calls on one service never share a transaction.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        password_service: PasswordHashingService,
    ):
        self._uow_factory = unit_of_work_factory
        self._password_service = password_service

    async def create_user(
        self,
        email: Union[str, Email],
        password: str,
        role: Union[str, UserRole],
        *,
        is_active: bool = True,
    ) -> User:
        """Create and persist a new user.

        Raises
        ------
        ValidationFailedError
            If email, role or password are malformed
        DuplicateEmailError
            If the email is already registered
        StorageUnavailableError
            If the store cannot be reached in time
        """
        user = self._build_user(email, password, role, is_active=is_active)

        async with self._uow_factory() as uow:
            saved = await self._insert_user(uow, user)

        logger.info("User created: %s (%s)", saved.id, saved.role.value)
        return saved

    async def get_or_create_user(
        self,
        email: Union[str, Email],
        password: str,
        role: Union[str, UserRole],
    ) -> User:
        """Return the user registered under ``email``, creating it if needed.

        An existing user is returned unchanged; ``password`` and ``role`` are
        ignored in that case.
        """
        email_obj = Email.of(email)

        async with self._uow_factory() as uow:
            existing = await uow.users.find_by_email(email_obj)
        if existing is not None:
            return existing

        try:
            return await self.create_user(email_obj, password, role)
        except DuplicateEmailError:
            # Lost a race against a concurrent registration
            async with self._uow_factory() as uow:
                existing = await uow.users.find_by_email(email_obj)
            if existing is None:
                raise
            return existing

    async def register_freelancer(
        self,
        email: Union[str, Email],
        password: str,
        **profile_fields,
    ) -> tuple[User, FreelancerProfile]:
        """Create a freelancer account together with its profile.

        Both records are written in one transaction; if the profile is
        rejected the user is not persisted either.
        """
        user = self._build_user(email, password, UserRole.FREELANCER)

        async with self._uow_factory() as uow:
            saved_user = await self._insert_user(uow, user)
            profile = FreelancerProfile.create(saved_user.id, **profile_fields)
            try:
                saved_profile = await uow.profiles.save(profile)
            except ConstraintViolationError as e:
                if e.kind in (ConstraintKind.NOT_NULL, ConstraintKind.CHECK):
                    msg = f"Profile rejected by storage ({e.kind.value}): {e.constraint}"
                    raise ValidationFailedError(msg) from e
                raise

        logger.info(
            "Freelancer registered: user %s, profile %s",
            saved_user.id,
            saved_profile.id,
        )
        return saved_user, saved_profile

    async def get_user(self, user_id: int) -> User:
        async with self._uow_factory() as uow:
            user = await uow.users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def find_user_by_email(self, email: Union[str, Email]) -> User | None:
        async with self._uow_factory() as uow:
            return await uow.users.find_by_email(email)

    async def list_users(self, include_inactive: bool = True) -> list[User]:
        async with self._uow_factory() as uow:
            return await uow.users.list_all(include_inactive=include_inactive)

    async def change_role(self, user_id: int, role: Union[str, UserRole]) -> User:
        new_role = UserRole.parse(role)
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            user.change_role(new_role)
            saved = await self._update_user(uow, user)
        logger.debug("Role of user %s set to %s", user_id, new_role.value)
        return saved

    async def change_email(self, user_id: int, email: Union[str, Email]) -> User:
        """Move a user to a new email address.

        Raises
        ------
        DuplicateEmailError
            If another user already holds the address
        """
        new_email = Email.of(email)
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            if user.email_obj == new_email:
                return user
            if await uow.users.exists_by_email(new_email):
                raise DuplicateEmailError(new_email.value)
            user.change_email(new_email)
            saved = await self._update_user(uow, user)
        logger.info("Email changed for user %s", user_id)
        return saved

    async def change_password(self, user_id: int, new_password: str) -> User:
        password_hash = self._password_service.hash(new_password)
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            user.change_password_hash(password_hash)
            saved = await self._update_user(uow, user)
        logger.debug("Password changed for user %s", user_id)
        return saved

    async def deactivate_user(self, user_id: int) -> User:
        """Soft delete: the record stays but is marked inactive."""
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            if not user.is_active:
                return user
            user.deactivate()
            saved = await self._update_user(uow, user)
        logger.warning("User deactivated: %s", user_id)
        return saved

    async def activate_user(self, user_id: int) -> User:
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            if user.is_active:
                return user
            user.activate()
            saved = await self._update_user(uow, user)
        logger.info("User reactivated: %s", user_id)
        return saved

    async def delete_user(self, user_id: int) -> None:
        """Hard delete a user and its freelancer profile.

        Raises
        ------
        UserNotFoundError
            If no user has this id
        """
        async with self._uow_factory() as uow:
            if await uow.users.find_by_id(user_id) is None:
                raise UserNotFoundError(user_id)
            await uow.profiles.delete_by_user_id(user_id)
            await uow.users.delete(user_id)
        logger.info("User deleted: %s", user_id)

    def _build_user(
        self,
        email: Union[str, Email],
        password: str,
        role: Union[str, UserRole],
        *,
        is_active: bool = True,
    ) -> User:
        # Validate everything before touching storage
        email_obj = Email.of(email)
        user_role = UserRole.parse(role)
        password_hash = self._password_service.hash(password)
        return User.create(
            email=email_obj,
            password_hash=password_hash,
            role=user_role,
            is_active=is_active,
        )

    async def _insert_user(self, uow: IdentityUnitOfWork, user: User) -> User:
        if await uow.users.exists_by_email(user.email_obj):
            raise DuplicateEmailError(user.email)
        try:
            return await uow.users.save(user)
        except ConstraintViolationError as e:
            translated = translate_user_violation(e, user.email_obj)
            if translated is None:
                raise
            raise translated from e

    async def _update_user(self, uow: IdentityUnitOfWork, user: User) -> User:
        try:
            return await uow.users.save(user)
        except ConstraintViolationError as e:
            translated = translate_user_violation(e, user.email_obj)
            if translated is None:
                raise
            raise translated from e

    async def _load(self, uow: IdentityUnitOfWork, user_id: int) -> User:
        user = await uow.users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
