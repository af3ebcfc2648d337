"""Value objects for the user domain."""

from launchhub_identity.domain.user.value_objects.email import Email
from launchhub_identity.domain.user.value_objects.user_role import UserRole

__all__ = [
    "Email",
    "UserRole",
]
