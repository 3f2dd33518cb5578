"""Strategy provider: per-locale registry and lazy strategy cache."""

import logging
from collections.abc import Callable

from reltime.i18n.loader import LocaleBundle
from reltime.models.time_unit import TimeUnit
from reltime.schemas.grammar import StrategyKind
from reltime.services.strategies.agglutinative import (
    AgglutinativeNowStrategy,
    AgglutinativePostpositionStrategy,
)
from reltime.services.strategies.base import GrammarStrategy
from reltime.services.strategies.cjk import CJKCounterStrategy
from reltime.services.strategies.finnic import FinnicCaseStrategy
from reltime.services.strategies.now import NowSpecialStrategy
from reltime.services.strategies.pattern import PatternBasedStrategy
from reltime.services.strategies.slavic import SlavicTripletStrategy
from reltime.services.strategies.threshold import ThresholdFormsStrategy
from reltime.utils import metrics

logger = logging.getLogger(__name__)

Builder = Callable[[LocaleBundle, TimeUnit], GrammarStrategy | None]


def _build_slavic(bundle: LocaleBundle, unit: TimeUnit) -> GrammarStrategy | None:
    forms = bundle.grammar.forms.get(unit.value)
    if forms is None:
        return None
    return SlavicTripletStrategy(
        unit=unit,
        forms=tuple(forms),
        future_connector=bundle.grammar.future_connector,
        past_connector=bundle.grammar.past_connector,
    )


def _build_agglutinative(bundle: LocaleBundle, unit: TimeUnit) -> GrammarStrategy | None:
    forms = bundle.grammar.forms.get(unit.value)
    if forms is None:
        return None
    return AgglutinativePostpositionStrategy(
        unit=unit,
        forms=tuple(forms),
        future_connector=bundle.grammar.future_connector,
        past_connector=bundle.grammar.past_connector,
    )


def _build_finnic(bundle: LocaleBundle, unit: TimeUnit) -> GrammarStrategy | None:
    if not FinnicCaseStrategy.supports(bundle.table, unit):
        return None
    return FinnicCaseStrategy.from_table(bundle.table, unit)


def _build_cjk(bundle: LocaleBundle, unit: TimeUnit) -> GrammarStrategy | None:
    return CJKCounterStrategy.from_table(bundle.table, unit)


def _build_threshold(bundle: LocaleBundle, unit: TimeUnit) -> GrammarStrategy | None:
    forms = bundle.grammar.thresholds.get(unit.value)
    if forms is None:
        return None
    return ThresholdFormsStrategy.from_table(bundle.table, unit, forms)


# Strategy kind -> builder; a builder returning None means "use the pattern fallback"
_STRATEGY_REGISTRY: dict[StrategyKind, Builder] = {
    StrategyKind.SLAVIC_TRIPLET: _build_slavic,
    StrategyKind.AGGLUTINATIVE: _build_agglutinative,
    StrategyKind.FINNIC_CASE: _build_finnic,
    StrategyKind.CJK_COUNTER: _build_cjk,
    StrategyKind.THRESHOLD: _build_threshold,
}


def _build_now(bundle: LocaleBundle) -> GrammarStrategy:
    phrases = bundle.grammar.now
    if phrases is None:
        return NowSpecialStrategy.from_table(bundle.table)
    if bundle.grammar.strategy is StrategyKind.AGGLUTINATIVE:
        return AgglutinativeNowStrategy(phrases.future, phrases.past)
    return NowSpecialStrategy(phrases.future, phrases.past)


def build_strategy(bundle: LocaleBundle, unit: TimeUnit) -> GrammarStrategy:
    """Construct the strategy a locale uses for one unit.

    Raises ConfigurationError if the locale cannot support the unit at all.
    """
    if unit is TimeUnit.NOW:
        return _build_now(bundle)

    strategy: GrammarStrategy | None = None
    builder = _STRATEGY_REGISTRY.get(bundle.grammar.strategy)
    if builder is not None:
        strategy = builder(bundle, unit)
    if strategy is None:
        strategy = PatternBasedStrategy.from_table(bundle.table, unit)
    return strategy


class LocaleProvider:
    """Lazily built, never evicted unit -> strategy cache for one locale.

    Strategies are built outside the cache and published with setdefault, so
    concurrent first calls may build twice but never see a partial object.
    """

    def __init__(self, bundle: LocaleBundle):
        self._bundle = bundle
        self._cache: dict[TimeUnit, GrammarStrategy] = {}

    @property
    def locale(self) -> str:
        return self._bundle.tag

    def strategy_for(self, unit: TimeUnit) -> GrammarStrategy:
        strategy = self._cache.get(unit)
        if strategy is not None:
            return strategy

        built = build_strategy(self._bundle, unit)
        strategy = self._cache.setdefault(unit, built)
        if strategy is built:
            metrics.strategy_builds_total.labels(
                locale=self.locale, strategy=type(built).__name__
            ).inc()
            logger.debug(
                "Built %s for %s/%s", type(built).__name__, self.locale, unit.value
            )
        return strategy

    def cached_units(self) -> tuple[TimeUnit, ...]:
        return tuple(self._cache)
