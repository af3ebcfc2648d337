"""User domain manages account identity.

This domain handles:
- User aggregate (id, email, password hash, role, active flag, timestamps)
- Email and role validation
- The repository port used to persist users
"""

from launchhub_identity.domain.user.aggregates import User
from launchhub_identity.domain.user.exceptions import (
    DuplicateEmailError,
    InvalidEmailError,
    InvalidRoleError,
    UserNotFoundError,
    WeakPasswordError,
)
from launchhub_identity.domain.user.repositories import UserRepository
from launchhub_identity.domain.user.value_objects import (
    Email,
    UserRole,
)

__all__ = [
    "DuplicateEmailError",
    "Email",
    "InvalidEmailError",
    "InvalidRoleError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "WeakPasswordError",
]
