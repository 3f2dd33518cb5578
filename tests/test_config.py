"""Tests for environment-driven settings."""

from reltime.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_LOCALE", "ROUNDING_TOLERANCE", "METRICS_ENABLED", "LOG_LEVEL"):
            monkeypatch.delenv(f"RELTIME_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.default_locale == "en"
        assert settings.rounding_tolerance == 50
        assert settings.metrics_enabled is True
        assert settings.log_format == "text"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("RELTIME_DEFAULT_LOCALE", "uk")
        monkeypatch.setenv("RELTIME_ROUNDING_TOLERANCE", "30")
        monkeypatch.setenv("RELTIME_METRICS_ENABLED", "false")
        settings = Settings(_env_file=None)
        assert settings.default_locale == "uk"
        assert settings.rounding_tolerance == 30
        assert settings.metrics_enabled is False
