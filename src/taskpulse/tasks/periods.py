# tasks/periods.py

"""
Date arithmetic shared by the statistics and productivity views.

All helpers take an aware `now` and stay in its timezone, so "today" means the
caller's calendar day. Window starts are computed on the wall clock: "a week
ago" is the same local time seven calendar days back, even across a DST change.
"""

from __future__ import annotations

import calendar
import math
from datetime import datetime, timedelta, timezone

from .task_models import Period

DAY = timedelta(days=1)

# Number of days each period spans for the per-day series.
PERIOD_DAYS: dict[Period, int] = {
    Period.TODAY: 1,
    Period.WEEK: 7,
    Period.MONTH: 30,
    Period.YEAR: 365,
}

MAX_DAILY_POINTS = 30


def local_now() -> datetime:
    return datetime.now().astimezone()


def as_aware(ts: datetime) -> datetime:
    """Naive timestamps are taken as local time."""
    return ts if ts.tzinfo is not None else ts.astimezone()


def _is_local(ts: datetime) -> bool:
    # A fixed offset that matches the machine's zone: what local_now() returns.
    return isinstance(ts.tzinfo, timezone) and ts.astimezone().utcoffset() == ts.utcoffset()


def relocalize(wall: datetime, like: datetime) -> datetime:
    """
    Attach the zone of `like` to the naive wall-clock time `wall`.

    For local timestamps the offset is looked up again for `wall`, so a DST
    change in between shifts the offset rather than the clock time.
    """
    if _is_local(like):
        return wall.astimezone()
    return wall.replace(tzinfo=like.tzinfo)


def start_of_day(now: datetime) -> datetime:
    wall = now.replace(tzinfo=None, hour=0, minute=0, second=0, microsecond=0)
    return relocalize(wall, now)


def subtract_days(ts: datetime, days: int) -> datetime:
    """Calendar day subtraction on the wall clock."""
    return relocalize(ts.replace(tzinfo=None) - timedelta(days=days), ts)


def subtract_months(ts: datetime, months: int) -> datetime:
    """Calendar month subtraction; the day is clamped to the target month's length."""
    index = ts.year * 12 + (ts.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(ts.day, calendar.monthrange(year, month)[1])
    return relocalize(ts.replace(tzinfo=None, year=year, month=month, day=day), ts)


def window_start(period: Period | str, now: datetime) -> datetime:
    period = Period(period)
    now = as_aware(now)
    if period is Period.TODAY:
        return start_of_day(now)
    if period is Period.WEEK:
        return subtract_days(now, 7)
    if period is Period.MONTH:
        return subtract_months(now, 1)
    return subtract_months(now, 12)


def daily_points(period: Period | str) -> int:
    return min(PERIOD_DAYS[Period(period)], MAX_DAILY_POINTS)


def round_half_up(value: float) -> int:
    # round() is banker's rounding; rates and day counts round .5 up.
    return int(math.floor(value + 0.5))
