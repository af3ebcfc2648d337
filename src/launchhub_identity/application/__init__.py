"""Application layer: unit of work port and the user/profile services."""

from launchhub_identity.application.services import (
    FreelancerProfileService,
    UserService,
)
from launchhub_identity.application.unit_of_work import (
    IdentityUnitOfWork,
    UnitOfWorkFactory,
)

__all__ = [
    "FreelancerProfileService",
    "IdentityUnitOfWork",
    "UnitOfWorkFactory",
    "UserService",
]
