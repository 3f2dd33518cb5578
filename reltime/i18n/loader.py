"""Bundled locale loader: flat resource tables plus grammar configuration."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError

from reltime.errors import ConfigurationError
from reltime.schemas.grammar import LocaleGrammar

logger = logging.getLogger(__name__)

_locales_dir = Path(__file__).parent / "locales"

DEFAULT_LOCALE = "en"


@dataclass(frozen=True, eq=False)
class ResourceTable:
    """Immutable string table of one locale.

    Keys are opaque ('DayPattern', 'DayPastPluralName'); a missing key is a
    normal state, use try_get() to probe for it.
    """

    locale: str
    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def try_get(self, key: str) -> str | None:
        return self.entries.get(key)

    def require(self, key: str) -> str:
        value = self.entries.get(key)
        if value is None:
            raise ConfigurationError(
                f"Locale '{self.locale}' is missing required resource key '{key}'"
            )
        return value

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class LocaleBundle:
    tag: str
    table: ResourceTable
    grammar: LocaleGrammar


def normalize_tag(tag: str) -> str:
    """Normalize a language tag: 'pt_BR' -> 'pt-br'."""
    return tag.strip().replace("_", "-").lower()


def language_of(tag: str) -> str:
    """Language portion of a tag: 'uk-ua' -> 'uk'."""
    return normalize_tag(tag).split("-", 1)[0]


def _flatten_dict(d: dict, prefix: str = "") -> dict[str, str]:
    """Flatten nested dict by concatenating keys: {'Day': {'Pattern': 'x'}} -> {'DayPattern': 'x'}."""
    items: dict[str, str] = {}
    for k, v in d.items():
        key = f"{prefix}{k}"
        if isinstance(v, dict):
            items.update(_flatten_dict(v, key))
        else:
            items[key] = str(v)
    return items


def available_locales() -> tuple[str, ...]:
    """Tags of all bundled locale files."""
    return tuple(sorted(p.stem for p in _locales_dir.glob("*.json")))


def parse_locale(tag: str, data: dict) -> LocaleBundle:
    """Build a bundle from the decoded JSON of a locale file."""
    tag = normalize_tag(tag)
    try:
        grammar = LocaleGrammar.model_validate(data.get("grammar", {}))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid grammar for locale '{tag}': {exc}") from exc
    table = ResourceTable(tag, _flatten_dict(data.get("strings", {})))
    return LocaleBundle(tag=tag, table=table, grammar=grammar)


def load_locale(tag: str, directory: Path | None = None) -> LocaleBundle | None:
    """Load one locale file. Returns None if the locale is not bundled."""
    tag = normalize_tag(tag)
    file_path = (directory or _locales_dir) / f"{tag}.json"
    if not file_path.exists():
        return None
    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Malformed locale file {file_path}: {exc}") from exc
    bundle = parse_locale(tag, data)
    logger.debug(
        "Loaded locale %s: %d strings, %s grammar",
        tag,
        len(bundle.table),
        bundle.grammar.strategy.value,
    )
    return bundle


def load_all(directory: Path | None = None) -> dict[str, LocaleBundle]:
    """Load every locale file in a directory (bundled locales by default)."""
    directory = directory or _locales_dir
    bundles: dict[str, LocaleBundle] = {}
    for file_path in sorted(directory.glob("*.json")):
        bundle = load_locale(file_path.stem, directory)
        if bundle is not None:
            bundles[bundle.tag] = bundle
    return bundles
