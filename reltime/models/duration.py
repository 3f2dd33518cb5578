"""Signed duration value with tolerance-aware rounding."""

import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from reltime.models.time_unit import TimeUnit

DEFAULT_TOLERANCE = 50

Quantity = int | float | Decimal | Fraction


def to_fraction(value: Quantity) -> Fraction:
    """Convert a quantity to an exact rational.

    Floats go through their decimal repr so 1.49 stays 149/100.
    """
    if isinstance(value, bool):
        raise TypeError("quantity must be a number, not bool")
    if isinstance(value, float):
        return Fraction(repr(value))
    return Fraction(value)


def rounded_magnitude(raw: Fraction, tolerance: int = DEFAULT_TOLERANCE) -> int:
    """Round a non-negative magnitude up when its fractional part reaches tolerance percent."""
    whole = math.floor(raw)
    remainder = raw - whole
    if remainder and remainder * 100 >= tolerance:
        return whole + 1
    return whole


@dataclass(frozen=True)
class DurationValue:
    """A signed quantity of units from now.

    quantity < 0 is in the past, quantity >= 0 is in the future.
    """

    quantity: Fraction
    unit: TimeUnit
    tolerance: int = DEFAULT_TOLERANCE
    delta: int = 0  # remainder in milliseconds, set by approximation

    @classmethod
    def of(
        cls,
        quantity: Quantity,
        unit: TimeUnit | str,
        tolerance: int = DEFAULT_TOLERANCE,
    ) -> "DurationValue":
        return cls(to_fraction(quantity), TimeUnit.parse(unit), tolerance)

    @property
    def is_past(self) -> bool:
        return self.quantity < 0

    @property
    def is_future(self) -> bool:
        return self.quantity >= 0

    @property
    def magnitude(self) -> Fraction:
        return abs(self.quantity)

    @property
    def whole(self) -> int:
        """Exact unit count, fractional part dropped."""
        return math.floor(self.magnitude)

    @property
    def rounded(self) -> int:
        return rounded_magnitude(self.magnitude, self.tolerance)

    def count(self, round_: bool = True) -> int:
        return self.rounded if round_ else self.whole
