"""Tests for unit approximation and precise decomposition."""

from datetime import datetime, timedelta, timezone
from fractions import Fraction

from reltime.models.time_unit import TimeUnit
from reltime.services.approximate import (
    approximate,
    approximate_between,
    decompose,
    difference_ms,
)

MINUTE = 60_000
HOUR = 60 * MINUTE
DAY = 24 * HOUR
REFERENCE = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestApproximate:
    def test_under_a_minute_is_now(self):
        assert approximate(0).unit is TimeUnit.NOW
        assert approximate(59_999).unit is TimeUnit.NOW
        assert approximate(-59_999).is_past

    def test_one_minute(self):
        duration = approximate(MINUTE)
        assert duration.unit is TimeUnit.MINUTE
        assert duration.quantity == 1

    def test_keeps_fraction(self):
        duration = approximate(90 * MINUTE)
        assert duration.unit is TimeUnit.HOUR
        assert duration.quantity == Fraction(3, 2)
        assert duration.rounded == 2
        assert duration.delta == 30 * MINUTE

    def test_past(self):
        duration = approximate(-3 * DAY)
        assert duration.unit is TimeUnit.DAY
        assert duration.quantity == -3
        assert duration.is_past

    def test_week_limit(self):
        assert approximate(6 * DAY).unit is TimeUnit.DAY
        assert approximate(7 * DAY).unit is TimeUnit.WEEK

    def test_below_scale_counts_as_one(self):
        duration = approximate(29 * DAY)
        assert duration.unit is TimeUnit.MONTH
        assert duration.quantity == 1

    def test_largest_unit_takes_the_rest(self):
        duration = approximate(10**20)
        assert duration.unit is TimeUnit.MILLENNIUM

    def test_tolerance_is_carried(self):
        assert approximate(90 * MINUTE, tolerance=60).rounded == 1


class TestBetween:
    def test_difference(self):
        assert difference_ms(REFERENCE + timedelta(seconds=2), REFERENCE) == 2000
        assert difference_ms(REFERENCE - timedelta(days=1), REFERENCE) == -DAY

    def test_default_reference_is_now(self):
        target = datetime.now(tz=timezone.utc) + timedelta(days=3, hours=1)
        assert approximate_between(target).unit is TimeUnit.DAY

    def test_between(self):
        duration = approximate_between(REFERENCE - timedelta(hours=2), REFERENCE)
        assert duration.unit is TimeUnit.HOUR
        assert duration.quantity == -2


class TestDecompose:
    def test_parts(self):
        parts = decompose(3 * DAY + 4 * HOUR + 10 * MINUTE)
        assert [p.unit for p in parts] == [TimeUnit.DAY, TimeUnit.HOUR, TimeUnit.MINUTE]
        assert [p.whole for p in parts] == [3, 4, 10]

    def test_past_parts(self):
        parts = decompose(-(2 * HOUR + 5 * MINUTE))
        assert [p.unit for p in parts] == [TimeUnit.HOUR, TimeUnit.MINUTE]
        assert all(p.is_past for p in parts)

    def test_seconds_dropped(self):
        parts = decompose(2 * HOUR + 30_000)
        assert [p.unit for p in parts] == [TimeUnit.HOUR]

    def test_exact(self):
        parts = decompose(5 * DAY)
        assert len(parts) == 1
        assert parts[0].delta == 0

    def test_now(self):
        parts = decompose(1000)
        assert [p.unit for p in parts] == [TimeUnit.NOW]
