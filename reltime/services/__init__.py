from reltime.services.approximate import approximate, approximate_between, decompose
from reltime.services.formatter import DurationFormatter, format_relative, get_formatter
from reltime.services.registry import LocaleRegistry

__all__ = [
    "DurationFormatter",
    "LocaleRegistry",
    "approximate",
    "approximate_between",
    "decompose",
    "format_relative",
    "get_formatter",
]
