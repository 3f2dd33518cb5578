"""Pattern strategy: singular/plural word, prefix and suffix affixes."""

from dataclasses import dataclass

from reltime.i18n.loader import ResourceTable
from reltime.models.duration import DurationValue
from reltime.models.time_unit import TimeUnit
from reltime.services.strategies.base import (
    Affixes,
    GrammarStrategy,
    WordForms,
    sign_of,
)
from reltime.utils.pattern import render


@dataclass(frozen=True)
class PatternBasedStrategy(GrammarStrategy):
    unit: TimeUnit
    pattern: str
    words: WordForms
    affixes: Affixes

    @classmethod
    def from_table(cls, table: ResourceTable, unit: TimeUnit) -> "PatternBasedStrategy":
        """Build from the generic {Unit}Pattern/Prefix/Suffix/SingularName/PluralName keys."""
        prefix = unit.key_prefix
        return cls(
            unit=unit,
            pattern=table.require(f"{prefix}Pattern"),
            words=WordForms.from_table(table, prefix),
            affixes=Affixes.from_table(table, prefix),
        )

    def format(self, duration: DurationValue) -> str:
        return self._format(duration, round_=True)

    def format_unrounded(self, duration: DurationValue) -> str:
        return self._format(duration, round_=False)

    def decorate(self, duration: DurationValue, text: str) -> str:
        return self.affixes.wrap(duration, text)

    def _format(self, duration: DurationValue, round_: bool) -> str:
        count = duration.count(round_)
        word = self.words.select(duration, count)
        return render(self.pattern, sign_of(duration), count, word)
