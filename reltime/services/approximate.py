"""Approximation: pick the unit that best describes a time difference."""

from datetime import datetime, timedelta
from fractions import Fraction

from reltime.models.duration import DEFAULT_TOLERANCE, DurationValue
from reltime.models.time_unit import SCALED_UNITS, TimeUnit

_ONE_MS = timedelta(milliseconds=1)


def _sign(value: int) -> int:
    return -1 if value < 0 else 1


def approximate(difference_ms: int, tolerance: int = DEFAULT_TOLERANCE) -> DurationValue:
    """Express a signed millisecond difference in its best-fitting unit.

    A unit fits when the difference is below what the next unit starts at;
    the largest unit takes everything else. The quantity keeps the exact
    fraction so rounding can see it, delta keeps the leftover milliseconds.
    """
    abs_diff = abs(difference_ms)
    if abs_diff < TimeUnit.NOW.max_quantity:
        return DurationValue(Fraction(difference_ms), TimeUnit.NOW, tolerance)

    last = len(SCALED_UNITS) - 1
    for i, unit in enumerate(SCALED_UNITS):
        scale = unit.scale
        limit = unit.max_quantity
        if not limit and i < last:
            limit = SCALED_UNITS[i + 1].scale // scale
        if scale * limit > abs_diff or i == last:
            if scale > abs_diff:
                return DurationValue(Fraction(_sign(difference_ms)), unit, tolerance)
            whole = _sign(difference_ms) * (abs_diff // scale)
            return DurationValue(
                Fraction(difference_ms, scale),
                unit,
                tolerance,
                delta=difference_ms - whole * scale,
            )
    raise AssertionError("unreachable: the last unit always matches")


def difference_ms(target: datetime, reference: datetime | None = None) -> int:
    """Signed milliseconds from reference (default: now) to target."""
    if reference is None:
        reference = datetime.now(tz=target.tzinfo)
    return (target - reference) // _ONE_MS


def approximate_between(
    target: datetime,
    reference: datetime | None = None,
    tolerance: int = DEFAULT_TOLERANCE,
) -> DurationValue:
    return approximate(difference_ms(target, reference), tolerance)


def decompose(difference: int, tolerance: int = DEFAULT_TOLERANCE) -> list[DurationValue]:
    """Split a difference into precise parts: 3 days 4 hours 12 minutes.

    Leftovers below a minute are dropped.
    """
    duration = approximate(difference, tolerance)
    result = [duration]
    while duration.delta:
        duration = approximate(duration.delta, tolerance)
        if result[-1].unit is duration.unit:
            break
        if duration.unit.is_precise:
            result.append(duration)
    return result
