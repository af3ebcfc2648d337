"""SQLAlchemy model for FreelancerProfile entity."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from launchhub_identity.infrastructure.persistence.sqlalchemy.base import (
    IdentityBase,
    TimestampMixin,
)


class FreelancerProfileModel(IdentityBase, TimestampMixin):
    """
    SQLAlchemy model for persisting FreelancerProfile entities.

    One row per user at most (unique ``user_id``); the row goes away with
    its user (ON DELETE CASCADE).
    """

    __tablename__ = "freelancer_profiles"

    __table_args__ = (
        UniqueConstraint("user_id"),
        CheckConstraint(
            "hourly_rate IS NULL OR hourly_rate >= 0",
            name="hourly_rate_non_negative",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    hourly_rate: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 2, asdecimal=True),
        nullable=True,
    )

    # Ordered list of skill names (JSON keeps order on every backend)
    skills: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    portfolio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<FreelancerProfileModel(id={self.id}, user_id={self.user_id})>"
