# tasks/task_query.py

from __future__ import annotations

from ..core.ports import TaskRepo
from .task_models import ALL, PRIORITY_RANK, Task, TaskFilter, TaskPriority, TaskStatus


def _is_concrete(value: object) -> bool:
    return value is not None and value != ALL


def sort_key(task: Task) -> tuple[int, float]:
    return PRIORITY_RANK[task.priority], task.created_at.timestamp()


def filter_tasks(tasks: list[Task], task_filter: TaskFilter) -> list[Task]:
    """
    Apply a TaskFilter to an already-snapshotted list.

    Order: priority high -> low, then newest created first. Ties keep their
    input order (the sort is stable).
    """
    out = list(tasks)

    if _is_concrete(task_filter.status):
        status = TaskStatus(task_filter.status)
        out = [t for t in out if t.status is status]

    if _is_concrete(task_filter.priority):
        priority = TaskPriority(task_filter.priority)
        out = [t for t in out if t.priority is priority]

    out.sort(key=sort_key, reverse=True)

    if task_filter.limit:
        out = out[: task_filter.limit]
    return out


def query_tasks(repo: TaskRepo, task_filter: TaskFilter) -> list[Task]:
    return filter_tasks(repo.list_all(), task_filter)
