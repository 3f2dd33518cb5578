"""Pattern token substitution: %s sign, %n quantity, %u unit word."""

import re

SIGN = "%s"
QUANTITY = "%n"
UNIT = "%u"
NEGATIVE = "-"

_TOKEN_RE = re.compile(r"%[snu]")
_SPACES_RE = re.compile(r"\s+")


def render(pattern: str, sign: str, quantity: int | str, unit_word: str) -> str:
    """Substitute pattern tokens in a single pass.

    Example: render('%n %u', '', 3, 'days') -> '3 days'
    """
    values = {SIGN: sign, QUANTITY: str(quantity), UNIT: unit_word}
    return _TOKEN_RE.sub(lambda m: values[m.group()], pattern)


def collapse_whitespace(text: str) -> str:
    """Squash whitespace runs into single spaces and trim the ends."""
    return _SPACES_RE.sub(" ", text).strip()
