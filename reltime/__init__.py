"""Localized relative-time phrases: "3 days ago", "через 3 хвилини", "3日後"."""

from reltime.errors import ConfigurationError, ReltimeError, UnsupportedUnitError
from reltime.models import DurationValue, TimeUnit
from reltime.services import (
    DurationFormatter,
    LocaleRegistry,
    approximate,
    decompose,
    format_relative,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DurationFormatter",
    "DurationValue",
    "LocaleRegistry",
    "ReltimeError",
    "TimeUnit",
    "UnsupportedUnitError",
    "approximate",
    "decompose",
    "format_relative",
]
