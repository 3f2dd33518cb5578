from reltime.models.duration import DEFAULT_TOLERANCE, DurationValue, rounded_magnitude
from reltime.models.time_unit import SCALED_UNITS, TimeUnit

__all__ = [
    "DEFAULT_TOLERANCE",
    "DurationValue",
    "SCALED_UNITS",
    "TimeUnit",
    "rounded_magnitude",
]
