# tests/test_productivity.py

from __future__ import annotations

from datetime import timedelta

import pytest

from taskpulse.tasks.productivity import (
    compute_productivity,
    daily_completed,
    overdue_count,
    priority_breakdown,
    tags_distribution,
    upcoming_count,
)
from taskpulse.tasks.task_api import get_productivity_data
from taskpulse.tasks.task_models import TaskPriority, TaskStatus

DAY = timedelta(days=1)


@pytest.mark.parametrize("period, length", [("today", 1), ("week", 7), ("month", 30), ("year", 30)])
def test_daily_completed_length(store, now, period, length) -> None:
    series = get_productivity_data(store, period, now=now).daily_completed
    assert len(series) == length
    assert all(n == 0 for n in series)


def test_daily_completed_tallies_by_updated_day(make_task, now) -> None:
    tasks = [
        make_task(status=TaskStatus.COMPLETED, created_at=now - 5 * DAY, updated_at=now),
        make_task(status=TaskStatus.COMPLETED, created_at=now - 5 * DAY, updated_at=now - timedelta(hours=3)),
        make_task(status=TaskStatus.COMPLETED, created_at=now - 5 * DAY, updated_at=now - 2 * DAY),
        make_task(status=TaskStatus.COMPLETED, created_at=now - 20 * DAY, updated_at=now - 10 * DAY),
        make_task(status=TaskStatus.IN_PROGRESS, created_at=now - 5 * DAY, updated_at=now),
    ]
    series = daily_completed(tasks, "week", now)
    assert series == [0, 0, 0, 0, 1, 0, 2]
    assert daily_completed(tasks, "today", now) == [2]
    assert sum(daily_completed(tasks, "month", now)) == 4


def test_tags_distribution_sorted_by_count(make_task) -> None:
    tasks = [
        make_task(tags=["docs", "api"]),
        make_task(tags=["api"]),
        make_task(tags=["api", "finance"]),
        make_task(tags=None),
    ]
    dist = tags_distribution(tasks)
    assert dist[0].tag == "api"
    assert dist[0].count == 3
    assert {(t.tag, t.count) for t in dist[1:]} == {("docs", 1), ("finance", 1)}
    counts = [t.count for t in dist]
    assert counts == sorted(counts, reverse=True)


def test_priority_breakdown_fixed_order_with_zeros(make_task) -> None:
    tasks = [make_task(priority=TaskPriority.LOW), make_task(priority=TaskPriority.LOW)]
    breakdown = priority_breakdown(tasks)
    assert [(p.priority.value, p.count) for p in breakdown] == [("high", 0), ("medium", 0), ("low", 2)]


def test_overdue_excludes_completed_and_today(make_task, now) -> None:
    start_today = now.replace(hour=0, minute=0)
    tasks = [
        make_task(due_date=now - 2 * DAY),
        make_task(due_date=now - 2 * DAY, status=TaskStatus.COMPLETED),
        make_task(due_date=start_today - timedelta(seconds=1), status=TaskStatus.IN_PROGRESS),
        # Due earlier today: not overdue yet.
        make_task(due_date=start_today + timedelta(hours=1)),
        make_task(due_date=None),
    ]
    assert overdue_count(tasks, now) == 2


def test_upcoming_window_is_inclusive(make_task, now) -> None:
    start_today = now.replace(hour=0, minute=0)
    tasks = [
        make_task(due_date=start_today),
        make_task(due_date=start_today + 7 * DAY),
        make_task(due_date=start_today + 7 * DAY + timedelta(seconds=1)),
        make_task(due_date=now + 2 * DAY, status=TaskStatus.COMPLETED),
        make_task(due_date=start_today - timedelta(seconds=1)),
    ]
    assert upcoming_count(tasks, now) == 2


def test_global_metrics_ignore_period(make_task, now) -> None:
    old = make_task(
        created_at=now - 400 * DAY,
        priority=TaskPriority.HIGH,
        tags=["legacy"],
        due_date=now - 300 * DAY,
    )
    report = compute_productivity([old], "today", now)
    assert report.tags_distribution[0].tag == "legacy"
    assert report.priority_breakdown[0].count == 1
    assert report.overdue_count == 1
    assert report.to_dict()["priority_breakdown"][0] == {"priority": "high", "count": 1}
