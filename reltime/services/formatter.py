"""Duration formatter: public facade over the registry and grammar strategies."""

import logging
from collections.abc import Sequence
from datetime import datetime

from reltime.config import settings
from reltime.errors import ConfigurationError
from reltime.models.duration import DEFAULT_TOLERANCE, DurationValue, Quantity, to_fraction
from reltime.models.time_unit import TimeUnit
from reltime.services.approximate import approximate_between, decompose, difference_ms
from reltime.services.registry import LocaleRegistry
from reltime.utils import metrics

logger = logging.getLogger(__name__)


def check_tolerance(tolerance: int) -> int:
    if isinstance(tolerance, bool) or not isinstance(tolerance, int):
        raise ConfigurationError(f"Rounding tolerance must be an integer, got {tolerance!r}")
    if not 0 <= tolerance <= 100:
        raise ConfigurationError(f"Rounding tolerance must be within 0..100, got {tolerance}")
    return tolerance


class DurationFormatter:
    """Turns signed unit counts into localized phrases.

    Usage:
        formatter = DurationFormatter(LocaleRegistry.from_bundled())
        formatter.format(-3, "day", "uk")  # '3 дні тому'
    """

    def __init__(
        self,
        registry: LocaleRegistry | None = None,
        tolerance: int = DEFAULT_TOLERANCE,
        default_locale: str | None = None,
    ):
        self.tolerance = check_tolerance(tolerance)
        self.registry = registry or LocaleRegistry.from_bundled()
        self.default_locale = default_locale or self.registry.default_locale

    def format(
        self,
        quantity: Quantity,
        unit: TimeUnit | str,
        locale: str | None = None,
        rounded: bool = True,
        tolerance: int | None = None,
    ) -> str:
        """Format quantity units from now; negative quantities are in the past.

        Example: format(2, 'year', 'en') -> '2 years from now'
        """
        duration = self._duration(quantity, unit, tolerance)
        return self.format_duration(duration, locale, rounded)

    def format_duration(
        self,
        duration: DurationValue,
        locale: str | None = None,
        rounded: bool = True,
    ) -> str:
        tag = self.registry.resolve(locale or self.default_locale)
        strategy = self.registry.provider_for(tag).strategy_for(duration.unit)
        if rounded:
            result = strategy.decorate(duration, strategy.format(duration))
        else:
            result = strategy.decorate_unrounded(duration, strategy.format_unrounded(duration))
        self._count(tag, duration.unit)
        return result

    def format_without_tense(
        self,
        quantity: Quantity,
        unit: TimeUnit | str,
        locale: str | None = None,
        rounded: bool = True,
        tolerance: int | None = None,
    ) -> str:
        """Quantity and unit word only: '3 days' rather than '3 days ago'."""
        duration = self._duration(quantity, unit, tolerance)
        tag = self.registry.resolve(locale or self.default_locale)
        strategy = self.registry.provider_for(tag).strategy_for(duration.unit)
        result = strategy.format(duration) if rounded else strategy.format_unrounded(duration)
        self._count(tag, duration.unit)
        return result

    def format_precise(
        self,
        durations: Sequence[DurationValue],
        locale: str | None = None,
        rounded: bool = True,
    ) -> str:
        """Join several durations and decorate once: '3 days 4 hours ago'.

        Only the last part is rounded; tense comes from the last part.
        """
        if not durations:
            raise ValueError("durations must not be empty")
        tag = self.registry.resolve(locale or self.default_locale)
        provider = self.registry.provider_for(tag)
        *head, last = durations
        parts = [provider.strategy_for(d.unit).format_unrounded(d) for d in head]
        strategy = provider.strategy_for(last.unit)
        if rounded:
            parts.append(strategy.format(last))
            result = strategy.decorate(last, " ".join(parts))
        else:
            parts.append(strategy.format_unrounded(last))
            result = strategy.decorate_unrounded(last, " ".join(parts))
        self._count(tag, last.unit)
        return result

    def format_datetime(
        self,
        target: datetime,
        reference: datetime | None = None,
        locale: str | None = None,
        rounded: bool = True,
        precise: bool = False,
    ) -> str:
        """Format a point in time relative to reference (default: now)."""
        if precise:
            durations = decompose(difference_ms(target, reference), self.tolerance)
            return self.format_precise(durations, locale, rounded)
        duration = approximate_between(target, reference, self.tolerance)
        return self.format_duration(duration, locale, rounded)

    def _duration(
        self, quantity: Quantity, unit: TimeUnit | str, tolerance: int | None
    ) -> DurationValue:
        unit = TimeUnit.parse(unit)
        if tolerance is None:
            tolerance = self.tolerance
        else:
            check_tolerance(tolerance)
        return DurationValue(to_fraction(quantity), unit, tolerance)

    @staticmethod
    def _count(tag: str, unit: TimeUnit) -> None:
        if settings.metrics_enabled:
            metrics.format_total.labels(locale=tag, unit=unit.value).inc()


_formatter: DurationFormatter | None = None


def get_formatter() -> DurationFormatter:
    """Process-wide formatter over all bundled locales, built on first use."""
    global _formatter
    if _formatter is None:
        registry = LocaleRegistry.from_bundled(default_locale="en")
        _formatter = DurationFormatter(
            registry,
            tolerance=settings.rounding_tolerance,
            default_locale=settings.default_locale,
        )
        logger.info("Registered locales: %s", ", ".join(registry.locales))
    return _formatter


def format_relative(
    quantity: Quantity,
    unit: TimeUnit | str,
    locale: str | None = None,
    rounded: bool = True,
) -> str:
    """Shortcut for get_formatter().format(...)."""
    return get_formatter().format(quantity, unit, locale, rounded)
