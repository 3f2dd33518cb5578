"""Agglutinative postposition strategy: base/ablative forms plus a postposition (Kazakh)."""

from dataclasses import dataclass

from reltime.errors import ConfigurationError
from reltime.models.duration import DurationValue
from reltime.models.time_unit import TimeUnit
from reltime.services.strategies.base import GrammarStrategy
from reltime.utils.pattern import collapse_whitespace

POSTPOSITION_FORMS = 2


@dataclass(frozen=True)
class AgglutinativePostpositionStrategy(GrammarStrategy):
    unit: TimeUnit
    forms: tuple[str, ...]  # (base, ablative)
    future_connector: str = ""
    past_connector: str = ""

    def __post_init__(self) -> None:
        if len(self.forms) != POSTPOSITION_FORMS:
            raise ConfigurationError(
                f"Future and past forms must be provided for {self.unit.value}: "
                f"got {len(self.forms)}, expected {POSTPOSITION_FORMS}"
            )
        object.__setattr__(self, "forms", tuple(self.forms))

    def format(self, duration: DurationValue) -> str:
        return f"{duration.rounded} {self._word(duration)}"

    def format_unrounded(self, duration: DurationValue) -> str:
        return f"{duration.whole} {self._word(duration)}"

    def decorate(self, duration: DurationValue, text: str) -> str:
        connector = self.past_connector if duration.is_past else self.future_connector
        return collapse_whitespace(f"{text} {connector}")

    def _word(self, duration: DurationValue) -> str:
        # past takes the base form, future the ablative
        base, ablative = self.forms
        return base if duration.is_past else ablative


@dataclass(frozen=True)
class AgglutinativeNowStrategy(GrammarStrategy):
    """Fixed phrase for the instant pseudo-unit; the quantity is never read."""

    future_phrase: str
    past_phrase: str

    def format(self, duration: DurationValue) -> str:
        return self.past_phrase if duration.is_past else self.future_phrase

    def format_unrounded(self, duration: DurationValue) -> str:
        return self.format(duration)

    def decorate(self, duration: DurationValue, text: str) -> str:
        return text
