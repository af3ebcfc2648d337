# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for identity management."""

from launchhub_identity.infrastructure.persistence.sqlalchemy.repositories.profile_repository import (
    FreelancerProfileRepositorySQLAlchemy,
)
from launchhub_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "FreelancerProfileRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
