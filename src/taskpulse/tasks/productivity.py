# tasks/productivity.py

"""
Productivity breakdowns.

Only the per-day completed series depends on the period; tag, priority,
overdue and upcoming figures always cover every task in the store.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from datetime import datetime, timedelta

from .periods import as_aware, daily_points, start_of_day
from .task_models import (
    Period,
    PriorityCount,
    ProductivityReport,
    TagCount,
    Task,
    TaskPriority,
    TaskStatus,
)

UPCOMING_DAYS = 7

BREAKDOWN_ORDER = (TaskPriority.HIGH, TaskPriority.MEDIUM, TaskPriority.LOW)


def daily_completed(tasks: Iterable[Task], period: Period | str, now: datetime) -> list[int]:
    """
    Completed tasks per calendar day, oldest first; the last entry is today.

    A task counts on the day of its updated_at, the closest thing to a
    completion timestamp the model has.
    """
    points = daily_points(period)
    today = start_of_day(now).date()
    first = today - timedelta(days=points - 1)

    series = [0] * points
    for t in tasks:
        if t.status is not TaskStatus.COMPLETED:
            continue
        day = t.updated_at.astimezone(now.tzinfo).date()
        if first <= day <= today:
            series[(day - first).days] += 1
    return series


def tags_distribution(tasks: Iterable[Task]) -> list[TagCount]:
    counts: Counter[str] = Counter()
    for t in tasks:
        counts.update(t.tags or [])
    # most_common keeps first-seen order among equal counts.
    return [TagCount(tag=tag, count=n) for tag, n in counts.most_common()]


def priority_breakdown(tasks: Iterable[Task]) -> list[PriorityCount]:
    counts = Counter(t.priority for t in tasks)
    return [PriorityCount(priority=p, count=counts.get(p, 0)) for p in BREAKDOWN_ORDER]


def _open_with_due(tasks: Iterable[Task]) -> list[Task]:
    return [t for t in tasks if t.due_date is not None and t.status is not TaskStatus.COMPLETED]


def overdue_count(tasks: Iterable[Task], now: datetime) -> int:
    today = start_of_day(now)
    return sum(1 for t in _open_with_due(tasks) if t.due_date < today)


def upcoming_count(tasks: Iterable[Task], now: datetime) -> int:
    today = start_of_day(now)
    horizon = today + timedelta(days=UPCOMING_DAYS)
    return sum(1 for t in _open_with_due(tasks) if today <= t.due_date <= horizon)


def compute_productivity(tasks: Iterable[Task], period: Period | str, now: datetime) -> ProductivityReport:
    tasks = list(tasks)
    now = as_aware(now)
    return ProductivityReport(
        daily_completed=daily_completed(tasks, period, now),
        tags_distribution=tags_distribution(tasks),
        priority_breakdown=priority_breakdown(tasks),
        overdue_count=overdue_count(tasks, now),
        upcoming_count=upcoming_count(tasks, now),
    )
