"""Exceptions raised by reltime."""


class ReltimeError(Exception):
    """Base class for all reltime errors."""


class ConfigurationError(ReltimeError):
    """Locale data, grammar configuration or tolerance is unusable."""


class UnsupportedUnitError(ReltimeError, ValueError):
    def __init__(self, unit: object):
        self.unit = unit
        super().__init__(f"Unsupported time unit: {unit!r}")
