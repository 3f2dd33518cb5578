"""Locale registry: owns the loaded locales and their strategy providers."""

import logging
from collections.abc import Iterable, Mapping

from reltime.errors import ConfigurationError
from reltime.i18n.loader import (
    DEFAULT_LOCALE,
    LocaleBundle,
    ResourceTable,
    language_of,
    load_all,
    load_locale,
    normalize_tag,
)
from reltime.services.strategies.provider import LocaleProvider
from reltime.utils import metrics

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """Locales registered once at startup and passed to the formatter.

    Tag resolution never fails: exact tag, then its language, then the
    default locale.
    """

    def __init__(
        self,
        bundles: Mapping[str, LocaleBundle],
        default_locale: str = DEFAULT_LOCALE,
    ):
        self._bundles = {normalize_tag(tag): bundle for tag, bundle in bundles.items()}
        self._default = normalize_tag(default_locale)
        if self._default not in self._bundles:
            raise ConfigurationError(
                f"Default locale '{default_locale}' is not registered"
            )
        self._providers = {
            tag: LocaleProvider(bundle) for tag, bundle in self._bundles.items()
        }

    @classmethod
    def from_bundled(
        cls,
        locales: Iterable[str] | None = None,
        default_locale: str = DEFAULT_LOCALE,
    ) -> "LocaleRegistry":
        """Register bundled locales: all of them, or just the listed tags plus the default."""
        if locales is None:
            return cls(load_all(), default_locale)

        bundles: dict[str, LocaleBundle] = {}
        for tag in {*locales, default_locale}:
            bundle = load_locale(tag)
            if bundle is None:
                logger.warning("Locale %s is not bundled, skipping", tag)
                continue
            bundles[bundle.tag] = bundle
        return cls(bundles, default_locale)

    @property
    def default_locale(self) -> str:
        return self._default

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(sorted(self._bundles))

    def resolve(self, tag: str | None) -> str:
        """Map a requested tag onto a registered locale."""
        if not tag:
            return self._default
        normalized = normalize_tag(tag)
        if normalized in self._bundles:
            return normalized

        language = language_of(normalized)
        if language in self._bundles:
            metrics.locale_fallback_total.labels(via="language").inc()
            return language

        logger.debug("Locale %s not registered, falling back to %s", tag, self._default)
        metrics.locale_fallback_total.labels(via="default").inc()
        return self._default

    def table_for(self, tag: str | None) -> ResourceTable:
        return self._bundles[self.resolve(tag)].table

    def provider_for(self, tag: str | None) -> LocaleProvider:
        return self._providers[self.resolve(tag)]
