from launchhub_identity.domain.profile.entities.freelancer_profile import (
    FreelancerProfile,
)

__all__ = ["FreelancerProfile"]
