"""Catalog of supported time units."""

from enum import Enum

from reltime.errors import UnsupportedUnitError


class TimeUnit(str, Enum):
    NOW = "now"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"
    MILLENNIUM = "millennium"

    @property
    def scale(self) -> int | None:
        """Milliseconds per unit, or None for the instant pseudo-unit."""
        return _SCALE.get(self)

    @property
    def key_prefix(self) -> str:
        """Resource key prefix: 'Day' for DayPattern, DayPastSuffix, ..."""
        return _KEY_PREFIX[self]

    @property
    def max_quantity(self) -> int:
        """Largest quantity this unit covers before the next one takes over (0 = derived)."""
        return _MAX_QUANTITY.get(self, 0)

    @property
    def is_precise(self) -> bool:
        return self is not TimeUnit.NOW

    @classmethod
    def parse(cls, value: "TimeUnit | str") -> "TimeUnit":
        """Resolve a unit from an enum member or a case-insensitive name.

        A trailing plural 's' is accepted: 'days' -> TimeUnit.DAY.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedUnitError(value)
        name = value.strip().lower()
        try:
            return cls(name)
        except ValueError:
            pass
        if name.endswith("s"):
            try:
                return cls(name[:-1])
            except ValueError:
                pass
        raise UnsupportedUnitError(value)


_SCALE: dict[TimeUnit, int] = {
    TimeUnit.MILLISECOND: 1,
    TimeUnit.SECOND: 1000,
    TimeUnit.MINUTE: 1000 * 60,
    TimeUnit.HOUR: 1000 * 60 * 60,
    TimeUnit.DAY: 1000 * 60 * 60 * 24,
    TimeUnit.WEEK: 1000 * 60 * 60 * 24 * 7,
    TimeUnit.MONTH: 2629743830,
    TimeUnit.YEAR: 31556926000,
    TimeUnit.DECADE: 315569260000,
    TimeUnit.CENTURY: 3155692597470,
    TimeUnit.MILLENNIUM: 31556926000000,
}

_KEY_PREFIX: dict[TimeUnit, str] = {
    TimeUnit.NOW: "JustNow",
    TimeUnit.MILLISECOND: "Millisecond",
    TimeUnit.SECOND: "Second",
    TimeUnit.MINUTE: "Minute",
    TimeUnit.HOUR: "Hour",
    TimeUnit.DAY: "Day",
    TimeUnit.WEEK: "Week",
    TimeUnit.MONTH: "Month",
    TimeUnit.YEAR: "Year",
    TimeUnit.DECADE: "Decade",
    TimeUnit.CENTURY: "Century",
    TimeUnit.MILLENNIUM: "Millennium",
}

# Anything closer than a minute reads as "now"
_MAX_QUANTITY: dict[TimeUnit, int] = {
    TimeUnit.NOW: 1000 * 60,
}

SCALED_UNITS: tuple[TimeUnit, ...] = tuple(u for u in TimeUnit if u.scale is not None)
