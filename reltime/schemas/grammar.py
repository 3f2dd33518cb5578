from enum import Enum

from pydantic import BaseModel


class StrategyKind(str, Enum):
    PATTERN = "pattern"
    SLAVIC_TRIPLET = "slavic_triplet"
    FINNIC_CASE = "finnic_case"
    AGGLUTINATIVE = "agglutinative"
    CJK_COUNTER = "cjk_counter"
    THRESHOLD = "threshold"


class NowPhrases(BaseModel):
    future: str
    past: str

    model_config = {"frozen": True, "extra": "forbid"}


class ThresholdWord(BaseModel):
    word: str
    limit: int | None = None  # None = no upper bound

    model_config = {"frozen": True, "extra": "forbid"}


class ThresholdForms(BaseModel):
    future: list[ThresholdWord]
    past: list[ThresholdWord]

    model_config = {"frozen": True, "extra": "forbid"}


class LocaleGrammar(BaseModel):
    """Grammar section of a bundled locale file."""

    strategy: StrategyKind = StrategyKind.PATTERN
    future_connector: str = ""
    past_connector: str = ""
    # unit id -> word forms; count depends on the strategy
    forms: dict[str, list[str]] = {}
    thresholds: dict[str, ThresholdForms] = {}
    now: NowPhrases | None = None

    model_config = {"frozen": True, "extra": "forbid"}
