"""Shared building blocks for the identity domain."""

from launchhub_identity.domain.shared.exceptions import (
    ConflictError,
    ConstraintKind,
    ConstraintViolationError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    StorageUnavailableError,
    ValidationFailedError,
)
from launchhub_identity.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "ConstraintKind",
    "ConstraintViolationError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "StorageUnavailableError",
    "ValidationFailedError",
    "ensure_tz_aware",
    "utc_now",
]
