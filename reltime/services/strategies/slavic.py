"""Slavic triplet strategy: one/few/many word forms (Ukrainian, Russian)."""

from dataclasses import dataclass

from reltime.errors import ConfigurationError
from reltime.models.duration import DurationValue
from reltime.models.time_unit import TimeUnit
from reltime.services.strategies.base import GrammarStrategy
from reltime.utils.declension import SLAVIC_PLURAL_FORMS, decline
from reltime.utils.pattern import collapse_whitespace


@dataclass(frozen=True)
class SlavicTripletStrategy(GrammarStrategy):
    unit: TimeUnit
    forms: tuple[str, ...]
    future_connector: str = ""
    past_connector: str = ""

    def __post_init__(self) -> None:
        if len(self.forms) != SLAVIC_PLURAL_FORMS:
            raise ConfigurationError(
                f"Wrong plural forms number for {self.unit.value}: "
                f"got {len(self.forms)}, expected {SLAVIC_PLURAL_FORMS}"
            )
        object.__setattr__(self, "forms", tuple(self.forms))

    def format(self, duration: DurationValue) -> str:
        return decline(duration.rounded, self.forms)

    def format_unrounded(self, duration: DurationValue) -> str:
        return decline(duration.whole, self.forms)

    def decorate(self, duration: DurationValue, text: str) -> str:
        if duration.is_past:
            return collapse_whitespace(f"{text} {self.past_connector}")
        return collapse_whitespace(f"{self.future_connector} {text}")
