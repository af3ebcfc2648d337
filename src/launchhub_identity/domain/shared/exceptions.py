"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
identity domain. All domain exceptions inherit from DomainException so
callers can handle them in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for callers.

    These codes are part of the public contract. Should not be changed.
    """

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_ROLE = "INVALID_ROLE"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_PROFILE = "INVALID_PROFILE"

    # Not Found Errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Conflict Errors
    CONFLICT = "CONFLICT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    PROFILE_ALREADY_EXISTS = "PROFILE_ALREADY_EXISTS"

    # Storage Errors
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationFailedError(DomainException):
    """Raised when a required field is missing or malformed."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class StorageUnavailableError(DomainException):
    """Raised when the backing store cannot be reached or times out."""

    def __init__(
        self,
        message: str = "Storage is unavailable",
        code: ErrorCode = ErrorCode.STORAGE_UNAVAILABLE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConstraintKind(str, Enum):
    """Kind of storage constraint that rejected a write."""

    UNIQUE = "unique"
    NOT_NULL = "not_null"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"
    UNKNOWN = "unknown"


class ConstraintViolationError(DomainException):
    """Raised by repositories when the store rejects a write.

    Services translate this into DuplicateEmailError, ValidationFailedError
    and friends before it reaches their callers.

    Attributes
    ----------
    kind
        Which kind of constraint failed
    constraint
        Constraint name or ``table.column`` reported by the store, if known
    """

    def __init__(
        self,
        kind: ConstraintKind,
        constraint: str | None = None,
        message: str | None = None,
    ) -> None:
        self.kind = kind
        self.constraint = constraint
        super().__init__(
            message or f"Storage constraint violated ({kind.value}): {constraint}",
            ErrorCode.CONSTRAINT_VIOLATION,
            {"kind": kind.value, "constraint": constraint},
        )

    def involves(self, column: str) -> bool:
        """Check whether the reported constraint mentions ``column``."""
        if not self.constraint:
            return False
        return column.lower() in self.constraint.lower()
