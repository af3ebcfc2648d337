"""Freelancer profile domain.

A profile is an optional, one-to-one extension of a User holding
freelancer-specific attributes. It cannot exist without its User.
"""

from launchhub_identity.domain.profile.entities import FreelancerProfile
from launchhub_identity.domain.profile.exceptions import (
    InvalidProfileError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)
from launchhub_identity.domain.profile.repositories import FreelancerProfileRepository
from launchhub_identity.domain.profile.value_objects import HourlyRate

__all__ = [
    "FreelancerProfile",
    "FreelancerProfileRepository",
    "HourlyRate",
    "InvalidProfileError",
    "ProfileAlreadyExistsError",
    "ProfileNotFoundError",
]
