"""LaunchHub Identity - user accounts and freelancer profiles.

This package handles the account side of the marketplace:
- User management (create, look up, roles, activation, deletion)
- Freelancer profiles (one optional profile per user)
- Password hashing
- Persistence through an async SQLAlchemy unit of work

Transport (HTTP) and authentication are handled elsewhere; other parts of
the system only reference ``user_id``.
"""

from launchhub_identity.application import (
    FreelancerProfileService,
    IdentityUnitOfWork,
    UserService,
)
from launchhub_identity.domain.profile import (
    FreelancerProfile,
    FreelancerProfileRepository,
    HourlyRate,
    InvalidProfileError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)
from launchhub_identity.domain.shared import (
    ConstraintKind,
    ConstraintViolationError,
    DomainException,
    ErrorCode,
    StorageUnavailableError,
    ValidationFailedError,
)
from launchhub_identity.domain.user import (
    DuplicateEmailError,
    Email,
    InvalidEmailError,
    InvalidRoleError,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
    WeakPasswordError,
)
from launchhub_identity.services import PasswordHashingService

__all__ = [
    # Domain - User
    "DuplicateEmailError",
    "Email",
    "InvalidEmailError",
    "InvalidRoleError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "WeakPasswordError",
    # Domain - Profile
    "FreelancerProfile",
    "FreelancerProfileRepository",
    "HourlyRate",
    "InvalidProfileError",
    "ProfileAlreadyExistsError",
    "ProfileNotFoundError",
    # Shared errors
    "ConstraintKind",
    "ConstraintViolationError",
    "DomainException",
    "ErrorCode",
    "StorageUnavailableError",
    "ValidationFailedError",
    # Services
    "PasswordHashingService",
    # Application
    "FreelancerProfileService",
    "IdentityUnitOfWork",
    "UserService",
]
