"""Finnic case strategy: tense-declined names and a singular/plural pattern pair."""

from dataclasses import dataclass

from reltime.i18n.loader import ResourceTable
from reltime.models.duration import DurationValue
from reltime.models.time_unit import TimeUnit
from reltime.services.strategies.base import Affixes, GrammarStrategy, sign_of
from reltime.utils.pattern import render


@dataclass(frozen=True)
class FinnicCaseStrategy(GrammarStrategy):
    unit: TimeUnit
    pattern: str
    plural_pattern: str
    future_name: str
    past_name: str
    future_plural_name: str
    past_plural_name: str
    affixes: Affixes

    @classmethod
    def supports(cls, table: ResourceTable, unit: TimeUnit) -> bool:
        """The case forms are only used when the locale declines this unit by tense."""
        return f"{unit.key_prefix}PastSingularName" in table

    @classmethod
    def from_table(cls, table: ResourceTable, unit: TimeUnit) -> "FinnicCaseStrategy":
        prefix = unit.key_prefix
        pattern = table.require(f"{prefix}Pattern")
        future_name = table.require(f"{prefix}FutureSingularName")
        past_name = table.require(f"{prefix}PastSingularName")
        return cls(
            unit=unit,
            pattern=pattern,
            plural_pattern=table.try_get(f"{prefix}PluralPattern") or pattern,
            future_name=future_name,
            past_name=past_name,
            future_plural_name=table.try_get(f"{prefix}FuturePluralName") or future_name,
            past_plural_name=table.try_get(f"{prefix}PastPluralName") or past_name,
            affixes=Affixes(
                future_suffix=table.require(f"{prefix}FutureSuffix").strip(),
                past_suffix=table.require(f"{prefix}PastSuffix").strip(),
            ),
        )

    def format(self, duration: DurationValue) -> str:
        return self._format(duration, duration.rounded)

    def format_unrounded(self, duration: DurationValue) -> str:
        return self._format(duration, duration.whole)

    def decorate(self, duration: DurationValue, text: str) -> str:
        return self._decorate(duration, duration.rounded, text)

    def decorate_unrounded(self, duration: DurationValue, text: str) -> str:
        return self._decorate(duration, duration.whole, text)

    def _decorate(self, duration: DurationValue, count: int, text: str) -> str:
        # "eilen" / "huomenna" stand alone, no "sitten" / "päästä";
        # a joined multi-unit text still gets its suffix
        if (
            self.unit is TimeUnit.DAY
            and count == 1
            and text == self._format(duration, count)
        ):
            return self.past_name if duration.is_past else self.future_name
        return self.affixes.wrap(duration, text)

    def _format(self, duration: DurationValue, count: int) -> str:
        if count == 1:
            word = self.past_name if duration.is_past else self.future_name
            pattern = self.pattern
        else:
            word = self.past_plural_name if duration.is_past else self.future_plural_name
            pattern = self.plural_pattern
        return render(pattern, sign_of(duration), count, word)
