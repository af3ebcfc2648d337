"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Union

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from launchhub_identity.domain.shared.time import ensure_tz_aware
from launchhub_identity.domain.user import (
    Email,
    User,
    UserNotFoundError,
    UserRepository,
)
from launchhub_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from launchhub_identity.infrastructure.persistence.sqlalchemy.repositories.base import (
    SQLAlchemyRepository,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(SQLAlchemyRepository, UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession, timeout: float | None = None) -> None:
        super().__init__(session, timeout)

    async def find_by_id(self, user_id: int) -> User | None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = Email.of(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._execute(stmt, "find user by email")
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        email_value = Email.of(email).value
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.email == email_value)
        )
        result = await self._execute(stmt, "check user email")
        return result.scalar_one() > 0

    async def save(self, user: User) -> User:
        if user.id is None:
            model = self._map_to_model(user)
            self._session.add(model)
            await self._flush("insert user")
            logger.info("Created user: %s (email: %s)", model.id, model.email)
            return self._map_to_domain(model)

        existing = await self._find_model_by_id(user.id)
        if existing is None:
            raise UserNotFoundError(user.id)

        self._update_model(existing, user)
        await self._flush("update user")
        logger.debug("Updated user: %s", user.id)
        return self._map_to_domain(existing)

    async def delete(self, user_id: int) -> bool:
        stmt = delete(UserModel).where(UserModel.id == user_id)
        result = await self._execute(stmt, "delete user")
        deleted = bool(result.rowcount)  # type: ignore[attr-defined]
        if deleted:
            logger.info("Deleted user: %s", user_id)
        return deleted

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._execute(stmt, "count users")
        return result.scalar_one()

    async def list_all(self, include_inactive: bool = True) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.id)
        if not include_inactive:
            stmt = stmt.where(UserModel.is_active.is_(True))
        result = await self._execute(stmt, "list users")
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def _find_model_by_id(self, user_id: int) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._execute(stmt, "find user by id")
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            role=model.role,
            is_active=model.is_active,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        # id and created_at are never rewritten
        model.email = user.email
        model.password_hash = user.password_hash
        model.role = user.role.value
        model.is_active = user.is_active
        model.updated_at = user.updated_at
