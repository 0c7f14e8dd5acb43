# tasks/task_stats.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .periods import DAY, as_aware, round_half_up, window_start
from .task_models import Period, Task, TaskStats, TaskStatus


def tasks_in_window(tasks: Iterable[Task], period: Period | str, now: datetime) -> list[Task]:
    """Tasks created on or after the period's window start (no upper bound)."""
    start = window_start(period, now)
    return [t for t in tasks if t.created_at >= start]


def average_completion_days(completed: list[Task]) -> int:
    """
    Mean of (updated_at - created_at) in whole days.

    updated_at stands in for the completion time, so an edit made after
    completion lengthens the figure.
    """
    if not completed:
        return 0
    total = sum((t.updated_at - t.created_at).total_seconds() for t in completed)
    return round_half_up(total / len(completed) / DAY.total_seconds())


def compute_stats(tasks: Iterable[Task], period: Period | str, now: datetime) -> TaskStats:
    now = as_aware(now)
    relevant = tasks_in_window(tasks, period, now)
    completed = [t for t in relevant if t.status is TaskStatus.COMPLETED]
    in_progress = sum(1 for t in relevant if t.status is TaskStatus.IN_PROGRESS)
    pending = sum(1 for t in relevant if t.status is TaskStatus.PENDING)

    total = len(relevant)
    rate = round_half_up(len(completed) / total * 100) if total > 0 else 0

    return TaskStats(
        total=total,
        completed=len(completed),
        in_progress=in_progress,
        pending=pending,
        completion_rate=rate,
        avg_completion_time=average_completion_days(completed),
    )
