"""Freelancer profile domain exceptions."""

from launchhub_identity.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationFailedError,
)


class InvalidProfileError(ValidationFailedError):
    """Raised when a profile field is malformed (e.g. negative hourly rate)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_PROFILE)


class ProfileAlreadyExistsError(ConflictError):
    """A user can own at most one profile."""

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(
            f"User {user_id} already has a profile",
            ErrorCode.PROFILE_ALREADY_EXISTS,
            {"user_id": user_id},
        )


class ProfileNotFoundError(EntityNotFoundError):
    """Profile not found."""

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(
            f"Profile not found for user: {user_id}",
            ErrorCode.PROFILE_NOT_FOUND,
            {"user_id": user_id},
        )
