"""Base class and shared parts for grammar strategies."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from reltime.i18n.loader import ResourceTable
from reltime.models.duration import DurationValue
from reltime.utils.pattern import NEGATIVE, collapse_whitespace

logger = logging.getLogger(__name__)


class GrammarStrategy(ABC):
    """Abstract base for all grammar strategies.

    A strategy turns a duration into text in two steps: format() renders the
    quantity and unit word, decorate() adds the tense affixes around it.
    """

    @abstractmethod
    def format(self, duration: DurationValue) -> str:
        """Render the rounded quantity and unit word."""
        ...

    @abstractmethod
    def format_unrounded(self, duration: DurationValue) -> str:
        """Render the exact quantity and unit word."""
        ...

    @abstractmethod
    def decorate(self, duration: DurationValue, text: str) -> str:
        """Wrap rendered text with past or future decoration."""
        ...

    def decorate_unrounded(self, duration: DurationValue, text: str) -> str:
        return self.decorate(duration, text)


def sign_of(duration: DurationValue) -> str:
    return NEGATIVE if duration.quantity < 0 else ""


def optional_key(table: ResourceTable, key: str) -> str | None:
    """Look up a tense-specific key that a locale may leave out."""
    value = table.try_get(key)
    if value is None:
        logger.debug("Locale %s has no resource %s, using generic form", table.locale, key)
    return value


@dataclass(frozen=True)
class WordForms:
    """Singular/plural unit words with optional per-tense overrides."""

    singular: str
    plural: str
    future_singular: str | None = None
    future_plural: str | None = None
    past_singular: str | None = None
    past_plural: str | None = None

    @classmethod
    def from_table(cls, table: ResourceTable, prefix: str) -> "WordForms":
        return cls(
            singular=table.require(f"{prefix}SingularName"),
            plural=table.require(f"{prefix}PluralName"),
            future_singular=optional_key(table, f"{prefix}FutureSingularName"),
            future_plural=optional_key(table, f"{prefix}FuturePluralName"),
            past_singular=optional_key(table, f"{prefix}PastSingularName"),
            past_plural=optional_key(table, f"{prefix}PastPluralName"),
        )

    def select(self, duration: DurationValue, count: int) -> str:
        """Word for count units: tense-specific form first, generic form otherwise."""
        if count == 1:
            specific = self.past_singular if duration.is_past else self.future_singular
            return specific or self.singular
        specific = self.past_plural if duration.is_past else self.future_plural
        return specific or self.plural


@dataclass(frozen=True)
class Affixes:
    future_prefix: str = ""
    future_suffix: str = ""
    past_prefix: str = ""
    past_suffix: str = ""

    @classmethod
    def from_table(cls, table: ResourceTable, prefix: str) -> "Affixes":
        return cls(
            future_prefix=table.require(f"{prefix}FuturePrefix").strip(),
            future_suffix=table.require(f"{prefix}FutureSuffix").strip(),
            past_prefix=table.require(f"{prefix}PastPrefix").strip(),
            past_suffix=table.require(f"{prefix}PastSuffix").strip(),
        )

    def wrap(self, duration: DurationValue, text: str, separator: str = " ") -> str:
        if duration.is_past:
            parts = (self.past_prefix, text, self.past_suffix)
        else:
            parts = (self.future_prefix, text, self.future_suffix)
        return collapse_whitespace(separator.join(parts))
