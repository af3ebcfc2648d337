"""FreelancerProfile entity: the optional one-to-one extension of a User."""

from collections.abc import Iterable
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Union

from launchhub_identity.domain.profile.exceptions import InvalidProfileError
from launchhub_identity.domain.profile.value_objects import HourlyRate
from launchhub_identity.domain.shared.time import ensure_tz_aware, utc_now

MAX_NAME_LENGTH = 100
MAX_LOCATION_LENGTH = 255
MAX_SKILL_LENGTH = 100

# Smallest step that survives a round trip through storage
_TICK = timedelta(microseconds=1)

RateInput = Union[HourlyRate, Decimal, int, float, str, None]

# Sentinel for "argument not given" in update_details, since None clears a field
_UNSET = object()


def _clean_text(value: str | None, field: str, max_length: int | None = None) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"{field} must be a string"
        raise InvalidProfileError(msg)
    stripped = value.strip()
    if not stripped:
        return None
    if max_length is not None and len(stripped) > max_length:
        msg = f"{field} cannot exceed {max_length} characters"
        raise InvalidProfileError(msg)
    return stripped


def _clean_skills(skills: Iterable[str] | None) -> list[str]:
    if skills is None:
        return []
    if isinstance(skills, str):
        msg = "skills must be a sequence of strings, not a single string"
        raise InvalidProfileError(msg)

    cleaned: list[str] = []
    seen: set[str] = set()
    for skill in skills:
        text = _clean_text(skill, "skill", MAX_SKILL_LENGTH)
        if text is None:
            continue
        key = text.lower()
        if key in seen:
            continue
        seen.add(key)
        cleaned.append(text)
    return cleaned


def _clean_portfolio(value: str | None) -> str | None:
    # Portfolio is free-form; keep it verbatim
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        msg = "portfolio must be text"
        raise InvalidProfileError(msg)
    return value


def _to_rate(value: RateInput) -> HourlyRate | None:
    if value is None or isinstance(value, HourlyRate):
        return value
    return HourlyRate(value)


class FreelancerProfile:
    """
    Freelancer-specific attributes owned by exactly one User.

    The owning ``user_id`` is fixed at construction. Skills keep their
    order; blank entries and case-insensitive duplicates are dropped.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_id: int,
        first_name: str | None = None,
        last_name: str | None = None,
        bio: str | None = None,
        location: str | None = None,
        hourly_rate: RateInput = None,
        skills: Iterable[str] | None = None,
        portfolio: str | None = None,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if user_id is None or isinstance(user_id, bool) or not isinstance(user_id, int):
            msg = "A profile must belong to a persisted user"
            raise InvalidProfileError(msg)

        self._id = id
        self._user_id = user_id
        self._first_name = _clean_text(first_name, "first_name", MAX_NAME_LENGTH)
        self._last_name = _clean_text(last_name, "last_name", MAX_NAME_LENGTH)
        self._bio = _clean_text(bio, "bio")
        self._location = _clean_text(location, "location", MAX_LOCATION_LENGTH)
        self._hourly_rate = _to_rate(hourly_rate)
        self._skills = _clean_skills(skills)
        self._portfolio = _clean_portfolio(portfolio)
        self._created_at = ensure_tz_aware(created_at) if created_at else utc_now()
        self._updated_at = ensure_tz_aware(updated_at) if updated_at else self._created_at

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def first_name(self) -> str | None:
        return self._first_name

    @property
    def last_name(self) -> str | None:
        return self._last_name

    @property
    def full_name(self) -> str | None:
        parts = [p for p in (self._first_name, self._last_name) if p]
        return " ".join(parts) if parts else None

    @property
    def bio(self) -> str | None:
        return self._bio

    @property
    def location(self) -> str | None:
        return self._location

    @property
    def hourly_rate(self) -> Decimal | None:
        return self._hourly_rate.amount if self._hourly_rate else None

    @property
    def skills(self) -> tuple[str, ...]:
        return tuple(self._skills)

    @property
    def portfolio(self) -> str | None:
        return self._portfolio

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_details(  # noqa: PLR0913
        self,
        first_name: object = _UNSET,
        last_name: object = _UNSET,
        bio: object = _UNSET,
        location: object = _UNSET,
        hourly_rate: object = _UNSET,
        skills: object = _UNSET,
        portfolio: object = _UNSET,
    ) -> bool:
        """Apply the given changes; omitted fields stay, ``None`` clears.

        Returns True if anything changed.
        """
        before = self._snapshot()
        updates: dict[str, object] = {}

        if first_name is not _UNSET:
            updates["_first_name"] = _clean_text(first_name, "first_name", MAX_NAME_LENGTH)  # type: ignore[arg-type]
        if last_name is not _UNSET:
            updates["_last_name"] = _clean_text(last_name, "last_name", MAX_NAME_LENGTH)  # type: ignore[arg-type]
        if bio is not _UNSET:
            updates["_bio"] = _clean_text(bio, "bio")  # type: ignore[arg-type]
        if location is not _UNSET:
            updates["_location"] = _clean_text(location, "location", MAX_LOCATION_LENGTH)  # type: ignore[arg-type]
        if hourly_rate is not _UNSET:
            updates["_hourly_rate"] = _to_rate(hourly_rate)  # type: ignore[arg-type]
        if skills is not _UNSET:
            updates["_skills"] = _clean_skills(skills)  # type: ignore[arg-type]
        if portfolio is not _UNSET:
            updates["_portfolio"] = _clean_portfolio(portfolio)  # type: ignore[arg-type]

        # Validated everything above; only now mutate
        for attr, value in updates.items():
            setattr(self, attr, value)

        changed = self._snapshot() != before
        if changed:
            # Strictly after the previous value, even within one clock tick
            self._updated_at = max(utc_now(), self._updated_at + _TICK)
        return changed

    def _snapshot(self) -> tuple:
        return (
            self._first_name,
            self._last_name,
            self._bio,
            self._location,
            self._hourly_rate,
            tuple(self._skills),
            self._portfolio,
        )

    @classmethod
    def create(cls, user_id: int, **details) -> "FreelancerProfile":
        return cls(user_id=user_id, **details)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        user_id: int,
        first_name: str | None,
        last_name: str | None,
        bio: str | None,
        location: str | None,
        hourly_rate: Decimal | None,
        skills: Iterable[str] | None,
        portfolio: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "FreelancerProfile":
        return cls(
            id=id,
            user_id=user_id,
            first_name=first_name,
            last_name=last_name,
            bio=bio,
            location=location,
            hourly_rate=hourly_rate,
            skills=skills,
            portfolio=portfolio,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FreelancerProfile):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash(self._id)

    def __repr__(self) -> str:
        return f"FreelancerProfile(id={self._id}, user_id={self._user_id})"
