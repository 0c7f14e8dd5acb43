# src/taskpulse/tasks/task_api.py

"""
Core task operations.

Tool handlers and console commands call these; they reach the data only
through the TaskRepo port.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ..core.ports import TaskRepo
from .periods import as_aware, local_now
from .productivity import compute_productivity
from .task_models import (
    ALL,
    Period,
    ProductivityReport,
    Task,
    TaskFilter,
    TaskPriority,
    TaskStats,
    TaskStatus,
)
from .task_query import query_tasks
from .task_stats import compute_stats

logger = logging.getLogger(__name__)


def new_task_id() -> str:
    return f"task-{uuid.uuid4().hex[:12]}"


def get_tasks(repo: TaskRepo, task_filter: TaskFilter | None = None) -> list[Task]:
    return query_tasks(repo, task_filter or TaskFilter())


def find_task(repo: TaskRepo, task_id: str) -> Task | None:
    return repo.get(task_id)


def search_tasks(repo: TaskRepo, query: str, *, limit: int = 50) -> list[Task]:
    """Case-insensitive substring match on title, description and tags."""
    needle = query.lower()
    out: list[Task] = []
    for t in get_tasks(repo, TaskFilter(status=ALL, limit=limit)):
        if needle in t.title.lower():
            out.append(t)
        elif t.description and needle in t.description.lower():
            out.append(t)
        elif any(needle in tag.lower() for tag in t.tags or []):
            out.append(t)
    return out


def create_task(
    repo: TaskRepo,
    *,
    title: str,
    priority: TaskPriority | str,
    description: str | None = None,
    due_date: datetime | None = None,
    tags: list[str] | None = None,
    now: datetime | None = None,
) -> Task:
    """Create a task. Status always starts as pending."""
    if not title or not title.strip():
        raise ValueError("title is required")

    ts = as_aware(now) if now is not None else local_now()
    task = Task(
        id=new_task_id(),
        title=title,
        description=description,
        status=TaskStatus.PENDING,
        priority=TaskPriority(priority),
        due_date=as_aware(due_date) if due_date is not None else None,
        tags=list(tags) if tags is not None else None,
        created_at=ts,
        updated_at=ts,
    )
    repo.insert(task)
    logger.info("Created task id=%s priority=%s", task.id, task.priority.value)
    return task


def update_task(repo: TaskRepo, task_id: str, changes: Mapping[str, Any]) -> Task | None:
    """
    Partial update. Returns None when the id is unknown.

    {"due_date": None} clears the due date; leaving the key out keeps it.
    """
    task = repo.update(task_id, changes)
    if task is None:
        logger.info("Update for unknown task id=%s", task_id)
        return None
    logger.info("Updated task id=%s fields=%s", task_id, sorted(changes))
    return task


def delete_task(repo: TaskRepo, task_id: str) -> bool:
    removed = repo.delete(task_id)
    logger.info("Delete task id=%s removed=%s", task_id, removed)
    return removed


def get_task_stats(repo: TaskRepo, period: Period | str, *, now: datetime | None = None) -> TaskStats:
    return compute_stats(repo.list_all(), period, now or local_now())


def get_productivity_data(
    repo: TaskRepo, period: Period | str, *, now: datetime | None = None
) -> ProductivityReport:
    return compute_productivity(repo.list_all(), period, now or local_now())
