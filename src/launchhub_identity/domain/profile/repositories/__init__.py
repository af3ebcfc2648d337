from launchhub_identity.domain.profile.repositories.profile_repository import (
    FreelancerProfileRepository,
)

__all__ = ["FreelancerProfileRepository"]
