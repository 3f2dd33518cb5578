"""CJK counter strategy: counter words glued to the number (Japanese)."""

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

MAX_DISPLAY_QUANTITY = 2**63 - 1

# Decades and millennia are counted in years: 3 decades -> 30年
_DISPLAY_SCALE: dict[TimeUnit, int] = {
    TimeUnit.DECADE: 10,
    TimeUnit.MILLENNIUM: 1000,
}


def display_quantity(unit: TimeUnit, count: int) -> int:
    value = count * _DISPLAY_SCALE.get(unit, 1)
    if value > MAX_DISPLAY_QUANTITY:
        raise OverflowError(f"{count} {unit.value}(s) cannot be displayed in years")
    return value


@dataclass(frozen=True)
class CJKCounterStrategy(GrammarStrategy):
    unit: TimeUnit
    pattern: str
    words: WordForms
    affixes: Affixes

    @classmethod
    def from_table(cls, table: ResourceTable, unit: TimeUnit) -> "CJKCounterStrategy":
        prefix = unit.key_prefix
        return cls(
            unit=unit,
            pattern=table.require(f"{prefix}Pattern"),
            words=WordForms.from_table(table, prefix),
            affixes=Affixes.from_table(table, prefix),
        )

    def format(self, duration: DurationValue) -> str:
        return self._format(duration, duration.rounded)

    def format_unrounded(self, duration: DurationValue) -> str:
        return self._format(duration, duration.whole)

    def decorate(self, duration: DurationValue, text: str) -> str:
        return self.affixes.wrap(duration, text, separator="")

    def _format(self, duration: DurationValue, count: int) -> str:
        word = self.words.select(duration, count)
        quantity = display_quantity(self.unit, count)
        return render(self.pattern, sign_of(duration), quantity, word)
