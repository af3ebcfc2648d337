"""Value objects for the freelancer profile domain."""

from launchhub_identity.domain.profile.value_objects.hourly_rate import HourlyRate

__all__ = ["HourlyRate"]
