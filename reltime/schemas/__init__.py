from reltime.schemas.grammar import (
    LocaleGrammar,
    NowPhrases,
    StrategyKind,
    ThresholdForms,
    ThresholdWord,
)

__all__ = [
    "LocaleGrammar",
    "NowPhrases",
    "StrategyKind",
    "ThresholdForms",
    "ThresholdWord",
]
