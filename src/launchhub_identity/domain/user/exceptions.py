"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from launchhub_identity.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationFailedError,
)


class InvalidEmailError(ValidationFailedError):
    """Raised when email is missing or its format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class InvalidRoleError(ValidationFailedError):
    """Raised when a role is not one of the known account roles."""

    def __init__(self, role: object) -> None:
        self.role = role
        super().__init__(f"Invalid role: {role!r}", ErrorCode.INVALID_ROLE)


class WeakPasswordError(ValidationFailedError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class DuplicateEmailError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            ErrorCode.DUPLICATE_EMAIL,
            {"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            ErrorCode.USER_NOT_FOUND,
            {"user_id": user_id},
        )
