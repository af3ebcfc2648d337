"""SQLAlchemy implementation of FreelancerProfileRepository."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from launchhub_identity.domain.profile import (
    FreelancerProfile,
    FreelancerProfileRepository,
    ProfileNotFoundError,
)
from launchhub_identity.domain.shared.time import ensure_tz_aware
from launchhub_identity.infrastructure.persistence.sqlalchemy.models import (
    FreelancerProfileModel,
)
from launchhub_identity.infrastructure.persistence.sqlalchemy.repositories.base import (
    SQLAlchemyRepository,
)

logger = logging.getLogger(__name__)


class FreelancerProfileRepositorySQLAlchemy(
    SQLAlchemyRepository,
    FreelancerProfileRepository,
):
    """SQLAlchemy implementation of FreelancerProfileRepository."""

    def __init__(self, session: AsyncSession, timeout: float | None = None) -> None:
        super().__init__(session, timeout)

    async def find_by_id(self, profile_id: int) -> FreelancerProfile | None:
        stmt = select(FreelancerProfileModel).where(
            FreelancerProfileModel.id == profile_id,
        )
        result = await self._execute(stmt, "find profile by id")
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_user_id(self, user_id: int) -> FreelancerProfile | None:
        model = await self._find_model_by_user_id(user_id)
        return self._map_to_domain(model) if model else None

    async def save(self, profile: FreelancerProfile) -> FreelancerProfile:
        if profile.id is None:
            model = self._map_to_model(profile)
            self._session.add(model)
            await self._flush("insert profile")
            logger.info("Created profile %s for user %s", model.id, model.user_id)
            return self._map_to_domain(model)

        stmt = select(FreelancerProfileModel).where(
            FreelancerProfileModel.id == profile.id,
        )
        result = await self._execute(stmt, "find profile by id")
        existing = result.scalar_one_or_none()
        if existing is None or existing.user_id != profile.user_id:
            raise ProfileNotFoundError(profile.user_id)

        self._update_model(existing, profile)
        await self._flush("update profile")
        logger.debug("Updated profile %s", profile.id)
        return self._map_to_domain(existing)

    async def delete(self, profile_id: int) -> bool:
        stmt = delete(FreelancerProfileModel).where(
            FreelancerProfileModel.id == profile_id,
        )
        result = await self._execute(stmt, "delete profile")
        deleted = bool(result.rowcount)  # type: ignore[attr-defined]
        if deleted:
            logger.info("Deleted profile: %s", profile_id)
        return deleted

    async def delete_by_user_id(self, user_id: int) -> bool:
        stmt = delete(FreelancerProfileModel).where(
            FreelancerProfileModel.user_id == user_id,
        )
        result = await self._execute(stmt, "delete profile by user")
        deleted = bool(result.rowcount)  # type: ignore[attr-defined]
        if deleted:
            logger.info("Deleted profile of user: %s", user_id)
        return deleted

    async def _find_model_by_user_id(self, user_id: int) -> FreelancerProfileModel | None:
        stmt = select(FreelancerProfileModel).where(
            FreelancerProfileModel.user_id == user_id,
        )
        result = await self._execute(stmt, "find profile by user")
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: FreelancerProfileModel) -> FreelancerProfile:
        return FreelancerProfile.reconstitute(
            id=model.id,
            user_id=model.user_id,
            first_name=model.first_name,
            last_name=model.last_name,
            bio=model.bio,
            location=model.location,
            hourly_rate=model.hourly_rate,
            skills=list(model.skills or []),
            portfolio=model.portfolio,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, profile: FreelancerProfile) -> FreelancerProfileModel:
        return FreelancerProfileModel(
            user_id=profile.user_id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            bio=profile.bio,
            location=profile.location,
            hourly_rate=profile.hourly_rate,
            skills=list(profile.skills),
            portfolio=profile.portfolio,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

    def _update_model(
        self,
        model: FreelancerProfileModel,
        profile: FreelancerProfile,
    ) -> None:
        # user_id is the owning reference and is never rewritten
        model.first_name = profile.first_name
        model.last_name = profile.last_name
        model.bio = profile.bio
        model.location = profile.location
        model.hourly_rate = profile.hourly_rate
        model.skills = list(profile.skills)
        model.portfolio = profile.portfolio
        model.updated_at = profile.updated_at
