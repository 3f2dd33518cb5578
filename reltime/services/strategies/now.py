"""Now strategy: fixed phrase for the instant pseudo-unit."""

from dataclasses import dataclass

from reltime.i18n.loader import ResourceTable
from reltime.models.duration import DurationValue
from reltime.models.time_unit import TimeUnit
from reltime.services.strategies.base import GrammarStrategy
from reltime.utils.pattern import collapse_whitespace


@dataclass(frozen=True)
class NowSpecialStrategy(GrammarStrategy):
    future_phrase: str
    past_phrase: str

    @classmethod
    def from_table(cls, table: ResourceTable) -> "NowSpecialStrategy":
        """Join the JustNow prefix/suffix keys of each tense into one phrase."""
        prefix = TimeUnit.NOW.key_prefix
        future = (
            f"{table.require(f'{prefix}FuturePrefix')} "
            f"{table.require(f'{prefix}FutureSuffix')}"
        )
        past = (
            f"{table.require(f'{prefix}PastPrefix')} "
            f"{table.require(f'{prefix}PastSuffix')}"
        )
        return cls(collapse_whitespace(future), collapse_whitespace(past))

    def format(self, duration: DurationValue) -> str:
        return self.past_phrase if duration.is_past else self.future_phrase

    def format_unrounded(self, duration: DurationValue) -> str:
        return self.format(duration)

    def decorate(self, duration: DurationValue, text: str) -> str:
        return text
