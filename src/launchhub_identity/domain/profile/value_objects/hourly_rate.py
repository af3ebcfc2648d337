"""Hourly rate value object."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from launchhub_identity.domain.profile.exceptions import InvalidProfileError

CENTS = Decimal("0.01")
MAX_HOURLY_RATE = Decimal("99999999.99")


@dataclass(frozen=True)
class HourlyRate:
    """Non-negative monetary rate, quantized to cents."""

    amount: Decimal

    def __post_init__(self) -> None:
        try:
            amount = Decimal(str(self.amount))
        except (InvalidOperation, ValueError, TypeError) as e:
            msg = f"Invalid hourly rate: {self.amount!r}"
            raise InvalidProfileError(msg) from e

        if not amount.is_finite():
            msg = f"Invalid hourly rate: {self.amount!r}"
            raise InvalidProfileError(msg)

        if amount < 0:
            msg = "Hourly rate cannot be negative"
            raise InvalidProfileError(msg)

        # Bound the magnitude first; quantize fails past the context precision
        if amount > MAX_HOURLY_RATE:
            msg = f"Hourly rate cannot exceed {MAX_HOURLY_RATE}"
            raise InvalidProfileError(msg)

        quantized = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
        object.__setattr__(self, "amount", quantized)

    def __str__(self) -> str:
        return str(self.amount)
