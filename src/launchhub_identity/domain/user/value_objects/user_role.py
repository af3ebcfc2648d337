from enum import Enum

from launchhub_identity.domain.user.exceptions import InvalidRoleError


class UserRole(str, Enum):
    """Account roles on the marketplace."""

    CLIENT = "client"
    FREELANCER = "freelancer"
    ADMIN = "admin"

    @classmethod
    def parse(cls, role: "str | UserRole | None") -> "UserRole":
        """Accept a member, its value or its name (case-insensitive)."""
        if isinstance(role, UserRole):
            return role
        if isinstance(role, str):
            candidate = role.strip().lower()
            for member in cls:
                if member.value == candidate:
                    return member
        raise InvalidRoleError(role)
