"""Shared fixtures: one registry over every bundled locale."""

import pytest

from reltime.services.formatter import DurationFormatter
from reltime.services.registry import LocaleRegistry


@pytest.fixture(scope="session")
def registry() -> LocaleRegistry:
    """All bundled locales, English as the default."""
    return LocaleRegistry.from_bundled(default_locale="en")


@pytest.fixture
def formatter(registry) -> DurationFormatter:
    return DurationFormatter(registry)
