"""Identity services - password hashing."""

from launchhub_identity.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
]
