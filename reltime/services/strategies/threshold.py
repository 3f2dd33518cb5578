"""Threshold forms strategy: word picked by count limits (Czech, Slovak, Croatian)."""

from dataclasses import dataclass

from reltime.errors import ConfigurationError
from reltime.i18n.loader import ResourceTable
from reltime.models.duration import DurationValue
from reltime.models.time_unit import TimeUnit
from reltime.schemas.grammar import ThresholdForms, ThresholdWord
from reltime.services.strategies.base import Affixes, GrammarStrategy, sign_of
from reltime.utils.declension import threshold_form
from reltime.utils.pattern import render

Forms = tuple[tuple[int | None, str], ...]


def _sorted_forms(words: list[ThresholdWord]) -> Forms:
    # unbounded entry goes last
    ordered = sorted(words, key=lambda w: (w.limit is None, w.limit or 0))
    return tuple((w.limit, w.word) for w in ordered)


@dataclass(frozen=True)
class ThresholdFormsStrategy(GrammarStrategy):
    unit: TimeUnit
    pattern: str
    future_forms: Forms
    past_forms: Forms
    affixes: Affixes

    @classmethod
    def from_table(
        cls, table: ResourceTable, unit: TimeUnit, forms: ThresholdForms
    ) -> "ThresholdFormsStrategy":
        prefix = unit.key_prefix
        return cls(
            unit=unit,
            pattern=table.require(f"{prefix}Pattern"),
            future_forms=_sorted_forms(forms.future),
            past_forms=_sorted_forms(forms.past),
            affixes=Affixes.from_table(table, prefix),
        )

    def format(self, duration: DurationValue) -> str:
        return self._format(duration, duration.rounded)

    def format_unrounded(self, duration: DurationValue) -> str:
        return self._format(duration, duration.whole)

    def decorate(self, duration: DurationValue, text: str) -> str:
        return self.affixes.wrap(duration, text)

    def _format(self, duration: DurationValue, count: int) -> str:
        forms = self.past_forms if duration.is_past else self.future_forms
        word = threshold_form(count, forms)
        if word is None:
            raise ConfigurationError(
                f"No {self.unit.value} word form covers quantity {count}"
            )
        return render(self.pattern, sign_of(duration), count, word)
