"""Date arithmetic helpers."""

import math
from datetime import date, datetime

MS_PER_DAY = 24 * 60 * 60 * 1000


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def days_between(begin: date | datetime, end: date | datetime) -> int:
    """Return the whole number of days between two instants.

    A day is exactly 86,400,000 ms; DST shifts and leap seconds are ignored.
    The result is the absolute difference rounded to the nearest day, halves
    rounding up, so the argument order does not matter.
    """
    delta = _as_datetime(end) - _as_datetime(begin)
    diff_ms = abs(delta.total_seconds() * 1000)
    return math.floor(diff_ms / MS_PER_DAY + 0.5)
