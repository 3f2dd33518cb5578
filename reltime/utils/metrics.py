"""Prometheus counters for formatting activity."""

from prometheus_client import Counter

format_total = Counter(
    "reltime_format_total",
    "Total relative-time phrases formatted",
    ["locale", "unit"],
)

locale_fallback_total = Counter(
    "reltime_locale_fallback_total",
    "Locale tags resolved through the fallback chain",
    ["via"],  # language, default
)

strategy_builds_total = Counter(
    "reltime_strategy_builds_total",
    "Grammar strategies constructed",
    ["locale", "strategy"],
)
