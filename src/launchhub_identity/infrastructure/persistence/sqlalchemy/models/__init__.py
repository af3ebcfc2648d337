# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for identity management."""

from launchhub_identity.infrastructure.persistence.sqlalchemy.models.freelancer_profile_model import (
    FreelancerProfileModel,
)
from launchhub_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "FreelancerProfileModel",
    "UserModel",
]
