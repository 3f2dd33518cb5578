"""Grammar strategies and the per-locale provider."""

from reltime.services.strategies.agglutinative import (
    AgglutinativeNowStrategy,
    AgglutinativePostpositionStrategy,
)
from reltime.services.strategies.base import GrammarStrategy
from reltime.services.strategies.cjk import CJKCounterStrategy
from reltime.services.strategies.finnic import FinnicCaseStrategy
from reltime.services.strategies.now import NowSpecialStrategy
from reltime.services.strategies.pattern import PatternBasedStrategy
from reltime.services.strategies.provider import LocaleProvider, build_strategy
from reltime.services.strategies.slavic import SlavicTripletStrategy
from reltime.services.strategies.threshold import ThresholdFormsStrategy

__all__ = [
    "AgglutinativeNowStrategy",
    "AgglutinativePostpositionStrategy",
    "CJKCounterStrategy",
    "FinnicCaseStrategy",
    "GrammarStrategy",
    "LocaleProvider",
    "NowSpecialStrategy",
    "PatternBasedStrategy",
    "SlavicTripletStrategy",
    "ThresholdFormsStrategy",
    "build_strategy",
]
