"""Tests for the date-difference helper."""

from datetime import date, datetime, timedelta

import pytest

from apps.core.dates import days_between


class TestDaysBetween:
    """days_between()."""

    def test_nine_days(self) -> None:
        """Whole calendar dates."""
        assert days_between(date(2024, 1, 1), date(2024, 1, 10)) == 9

    def test_same_instant_is_zero(self) -> None:
        """A date is zero days from itself."""
        moment = datetime(2024, 3, 15, 12, 30)
        assert days_between(moment, moment) == 0

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (date(2024, 1, 1), date(2024, 12, 31)),
            (datetime(2023, 5, 1, 8), datetime(2023, 5, 3, 20)),
            (date(2020, 2, 28), datetime(2020, 3, 1, 6)),
        ],
    )
    def test_commutative(self, a, b) -> None:
        """Argument order does not matter."""
        assert days_between(a, b) == days_between(b, a)

    def test_rounds_to_nearest_day(self) -> None:
        """Partial days round to the closest whole day."""
        start = datetime(2024, 1, 1)
        assert days_between(start, start + timedelta(hours=11)) == 0
        assert days_between(start, start + timedelta(hours=13)) == 1
        assert days_between(start, start + timedelta(days=2, hours=20)) == 3

    def test_half_day_rounds_up(self) -> None:
        """Exactly half a day rounds away from zero."""
        start = datetime(2024, 1, 1)
        assert days_between(start, start + timedelta(hours=12)) == 1
        assert days_between(start + timedelta(hours=12), start) == 1

    def test_leap_year(self) -> None:
        """2024 has 366 days."""
        assert days_between(date(2024, 1, 1), date(2025, 1, 1)) == 366
