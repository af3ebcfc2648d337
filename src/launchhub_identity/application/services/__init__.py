from launchhub_identity.application.services.profile_service import (
    FreelancerProfileService,
)
from launchhub_identity.application.services.user_service import UserService

__all__ = ["FreelancerProfileService", "UserService"]
