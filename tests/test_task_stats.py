# tests/test_task_stats.py

from __future__ import annotations

from datetime import timedelta

from taskpulse.tasks.task_api import get_task_stats
from taskpulse.tasks.task_models import TaskStats, TaskStatus
from taskpulse.tasks.task_stats import compute_stats

DAY = timedelta(days=1)


def test_empty_window_is_all_zero(store, now) -> None:
    stats = get_task_stats(store, "week", now=now)
    assert stats == TaskStats(
        total=0, completed=0, in_progress=0, pending=0, completion_rate=0, avg_completion_time=0
    )


def test_counts_per_status(make_task, now) -> None:
    tasks = [
        make_task(status=TaskStatus.COMPLETED, created_at=now - DAY),
        make_task(status=TaskStatus.IN_PROGRESS, created_at=now - DAY),
        make_task(status=TaskStatus.PENDING, created_at=now - DAY),
        make_task(status=TaskStatus.PENDING, created_at=now - DAY),
    ]
    stats = compute_stats(tasks, "week", now)
    assert (stats.total, stats.completed, stats.in_progress, stats.pending) == (4, 1, 1, 2)
    assert stats.completion_rate == 25


def test_completion_rate_rounds_half_up(make_task, now) -> None:
    tasks = [make_task(status=TaskStatus.COMPLETED, created_at=now - DAY)]
    tasks += [make_task(created_at=now - DAY) for _ in range(7)]
    # 1/8 = 12.5%
    assert compute_stats(tasks, "week", now).completion_rate == 13


def test_today_window_starts_at_midnight(make_task, now) -> None:
    midnight = now.replace(hour=0, minute=0)
    tasks = [
        make_task(created_at=midnight),
        make_task(created_at=midnight - timedelta(seconds=1)),
        make_task(created_at=now + timedelta(hours=1)),
    ]
    assert compute_stats(tasks, "today", now).total == 2


def test_week_and_month_windows(make_task, now) -> None:
    tasks = [
        make_task(created_at=now - 6 * DAY),
        make_task(created_at=now - 8 * DAY),
        make_task(created_at=now - 27 * DAY),
        make_task(created_at=now - 40 * DAY),
    ]
    assert compute_stats(tasks, "week", now).total == 1
    assert compute_stats(tasks, "month", now).total == 3
    assert compute_stats(tasks, "year", now).total == 4


def test_avg_completion_time_in_days(make_task, now) -> None:
    tasks = [
        make_task(status=TaskStatus.COMPLETED, created_at=now - 3 * DAY, updated_at=now - 2 * DAY),
        make_task(status=TaskStatus.COMPLETED, created_at=now - 3 * DAY, updated_at=now - DAY),
        # Not completed: ignored even though it has a long lifetime.
        make_task(status=TaskStatus.IN_PROGRESS, created_at=now - 6 * DAY, updated_at=now),
    ]
    # mean of 1 and 2 days = 1.5 -> 2
    assert compute_stats(tasks, "week", now).avg_completion_time == 2


def test_avg_completion_time_zero_without_completed(make_task, now) -> None:
    tasks = [make_task(created_at=now - DAY, updated_at=now)]
    assert compute_stats(tasks, "week", now).avg_completion_time == 0


def test_stats_read_through_repo(store, make_task, now) -> None:
    store.insert(make_task(status=TaskStatus.COMPLETED, created_at=now - DAY))
    store.insert(make_task(created_at=now - 10 * DAY))
    stats = get_task_stats(store, "week", now=now)
    assert stats.total == 1
    assert stats.completion_rate == 100
    assert stats.to_dict()["completed"] == 1
