"""Plural form selection helpers."""

from collections.abc import Sequence

# see http://translate.sourceforge.net/wiki/l10n/pluralforms
SLAVIC_PLURAL_FORMS = 3


def slavic_plural_index(n: int) -> int:
    """Return index 0/1/2 for the East Slavic plural form of number n."""
    abs_n = abs(n)
    if abs_n % 10 == 1 and abs_n % 100 != 11:
        return 0  # один день
    if 2 <= abs_n % 10 <= 4 and (abs_n % 100 < 10 or abs_n % 100 >= 20):
        return 1  # два дні
    return 2  # п'ять днів


def threshold_form(n: int, forms: Sequence[tuple[int | None, str]]) -> str | None:
    """Pick the first word whose limit is at least n.

    A limit of None is unbounded. Forms must be sorted by limit.

    Example: threshold_form(3, [(1, 'den'), (4, 'dny'), (None, 'dní')]) -> 'dny'
    """
    abs_n = abs(n)
    for limit, word in forms:
        if limit is None or limit >= abs_n:
            return word
    return None


def decline(n: int, forms: Sequence[str]) -> str:
    """Decline a number with three Slavic word forms.

    Example: decline(5, ('день', 'дні', 'днів')) -> '5 днів'
    """
    return f"{n} {forms[slavic_plural_index(n)]}"
