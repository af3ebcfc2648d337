"""User aggregate, the one canonical account entity."""

from datetime import datetime, timedelta
from typing import Union

from launchhub_identity.domain.shared.exceptions import ValidationFailedError
from launchhub_identity.domain.shared.time import ensure_tz_aware, utc_now
from launchhub_identity.domain.user.value_objects import Email, UserRole

# Smallest step that survives a round trip through storage
_TICK = timedelta(microseconds=1)


class User:
    """
    User aggregate root.

    The identifier is a storage-assigned surrogate key: it is ``None`` until
    the user has been saved and never changes afterwards. The password is
    only ever held as a hash.
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email],
        password_hash: str,
        role: Union[str, UserRole],
        id: int | None = None,
        is_active: bool = True,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if not password_hash:
            msg = "Password hash cannot be empty"
            raise ValidationFailedError(msg)

        now = utc_now()
        self._id = id
        self._email = Email.of(email)
        self._password_hash = password_hash
        self._role = UserRole.parse(role)
        self._is_active = bool(is_active)
        self._created_at = ensure_tz_aware(created_at) if created_at else now
        self._updated_at = ensure_tz_aware(updated_at) if updated_at else self._created_at

        if self._updated_at < self._created_at:
            msg = "updated_at cannot be earlier than created_at"
            raise ValidationFailedError(msg)

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_role(self, role: Union[str, UserRole]) -> None:
        new_role = UserRole.parse(role)
        if new_role == self._role:
            return
        self._role = new_role
        self._touch()

    def change_email(self, email: Union[str, Email]) -> None:
        new_email = Email.of(email)
        if new_email == self._email:
            return
        self._email = new_email
        self._touch()

    def change_password_hash(self, password_hash: str) -> None:
        if not password_hash:
            msg = "Password hash cannot be empty"
            raise ValidationFailedError(msg)
        self._password_hash = password_hash
        self._touch()

    def deactivate(self) -> None:
        if not self._is_active:
            return
        self._is_active = False
        self._touch()

    def activate(self) -> None:
        if self._is_active:
            return
        self._is_active = True
        self._touch()

    def _touch(self) -> None:
        # Strictly after the previous value, even within one clock tick
        self._updated_at = max(utc_now(), self._updated_at + _TICK)

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password_hash: str,
        role: Union[str, UserRole],
        is_active: bool = True,
    ) -> "User":
        return cls(
            email=email,
            password_hash=password_hash,
            role=role,
            is_active=is_active,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        email: Union[str, Email],
        password_hash: str,
        role: Union[str, UserRole],
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            role=role,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role.value})"
