"""Tests for the locale loader and registry."""

import logging

import pytest

from reltime.errors import ConfigurationError
from reltime.i18n.loader import (
    DEFAULT_LOCALE,
    ResourceTable,
    _flatten_dict,
    available_locales,
    language_of,
    load_all,
    load_locale,
    normalize_tag,
    parse_locale,
)
from reltime.schemas.grammar import StrategyKind
from reltime.services.registry import LocaleRegistry

BUNDLED = {"cs", "de", "en", "fi", "hr", "ja", "kk", "ru", "sk", "uk"}


class TestLoader:
    def test_bundled_locales(self):
        assert BUNDLED <= set(available_locales())

    def test_default_locale_is_english(self):
        assert DEFAULT_LOCALE == "en"

    def test_flatten_concatenates_keys(self):
        data = {"Day": {"Pattern": "%n %u", "Past": {"Suffix": "ago"}}}
        assert _flatten_dict(data) == {"DayPattern": "%n %u", "DayPastSuffix": "ago"}

    def test_load_english(self):
        bundle = load_locale("en")
        assert bundle is not None
        assert bundle.tag == "en"
        assert bundle.table.try_get("DayPluralName") == "days"
        assert bundle.grammar.strategy is StrategyKind.PATTERN

    def test_load_grammar(self):
        bundle = load_locale("uk")
        assert bundle.grammar.strategy is StrategyKind.SLAVIC_TRIPLET
        assert bundle.grammar.forms["day"] == ["день", "дні", "днів"]
        assert bundle.grammar.now.past == "щойно"

    def test_missing_locale_returns_none(self):
        assert load_locale("xx") is None

    def test_every_bundled_locale_parses(self):
        bundles = load_all()
        assert BUNDLED <= set(bundles)

    def test_malformed_file(self, tmp_path):
        (tmp_path / "zz.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_locale("zz", tmp_path)

    def test_unknown_strategy(self):
        with pytest.raises(ConfigurationError):
            parse_locale("zz", {"grammar": {"strategy": "bogus"}})

    def test_unknown_grammar_key(self):
        with pytest.raises(ConfigurationError):
            parse_locale("zz", {"grammar": {"strategy": "pattern", "colour": "red"}})

    def test_load_from_directory(self, tmp_path):
        (tmp_path / "zz.json").write_text(
            '{"strings": {"Day": {"Pattern": "%n %u"}}}', encoding="utf-8"
        )
        bundles = load_all(tmp_path)
        assert list(bundles) == ["zz"]
        assert bundles["zz"].table.require("DayPattern") == "%n %u"


class TestResourceTable:
    def test_try_get_missing(self):
        table = ResourceTable("zz", {"DayPattern": "%n %u"})
        assert table.try_get("DayPastPluralName") is None
        assert "DayPattern" in table
        assert len(table) == 1

    def test_require_missing(self):
        table = ResourceTable("zz", {})
        with pytest.raises(ConfigurationError, match="DayPattern"):
            table.require("DayPattern")

    def test_immutable(self):
        source = {"DayPattern": "%n %u"}
        table = ResourceTable("zz", source)
        source["DayPattern"] = "changed"
        assert table.require("DayPattern") == "%n %u"
        with pytest.raises(TypeError):
            table.entries["DayPattern"] = "x"


class TestTags:
    def test_normalize(self):
        assert normalize_tag("uk_UA") == "uk-ua"
        assert normalize_tag(" EN ") == "en"

    def test_language(self):
        assert language_of("pt_BR") == "pt"
        assert language_of("fi") == "fi"


class TestRegistry:
    def test_exact_tag(self, registry):
        assert registry.resolve("uk") == "uk"

    def test_language_fallback(self, registry):
        assert registry.resolve("uk_UA") == "uk"
        assert registry.resolve("de-AT") == "de"

    def test_default_fallback(self, registry):
        assert registry.resolve("xx-does-not-exist") == "en"
        assert registry.resolve(None) == "en"
        assert registry.resolve("") == "en"

    def test_fallback_is_logged(self, registry, caplog):
        with caplog.at_level(logging.DEBUG, logger="reltime.services.registry"):
            registry.resolve("zz")
        assert "zz" in caplog.text

    def test_default_must_be_registered(self):
        with pytest.raises(ConfigurationError):
            LocaleRegistry({}, default_locale="en")

    def test_from_bundled_subset(self, caplog):
        with caplog.at_level(logging.WARNING, logger="reltime.services.registry"):
            registry = LocaleRegistry.from_bundled(["uk", "zz"], default_locale="en")
        assert registry.locales == ("en", "uk")
        assert "zz" in caplog.text

    def test_custom_default(self):
        registry = LocaleRegistry.from_bundled(["en"], default_locale="fi")
        assert registry.default_locale == "fi"
        assert registry.resolve("xx") == "fi"

    def test_table_for(self, registry):
        assert registry.table_for("ja").require("DaySingularName") == "日"

    def test_provider_is_shared(self, registry):
        assert registry.provider_for("uk") is registry.provider_for("uk-UA")
