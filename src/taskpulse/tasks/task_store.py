# tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from ..core.ports import Clock
from .periods import as_aware, local_now
from .task_models import MUTABLE_FIELDS, Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)


def _copy(task: Task) -> Task:
    return replace(task, tags=list(task.tags) if task.tags is not None else None)


def _aware(task: Task) -> Task:
    return replace(
        task,
        created_at=as_aware(task.created_at),
        updated_at=as_aware(task.updated_at),
        due_date=as_aware(task.due_date) if task.due_date is not None else None,
    )


class InMemoryTaskStore:
    """
    Process-memory task store.

    - tasks live for the process lifetime, in insertion order
    - every read returns copies, so callers never hold the live records
    - one lock guards mutations and snapshots

    Thread-safety:
    - safe to share between the event loop and worker threads
    """

    def __init__(self, tasks: list[Task] | None = None, *, clock: Clock = local_now) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._tasks: dict[str, Task] = {}
        for task in tasks or []:
            self.insert(task)
        logger.info("TaskStore ready total=%s", len(self._tasks))

    # ---- low-level helpers ----

    @staticmethod
    def _apply(task: Task, changes: Mapping[str, Any]) -> dict[str, Any]:
        unknown = set(changes) - MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update task fields: {', '.join(sorted(unknown))}")

        fields: dict[str, Any] = {}
        for name, value in changes.items():
            if name == "status":
                value = TaskStatus(value)
            elif name == "priority":
                value = TaskPriority(value)
            elif name == "due_date" and value is not None:
                value = as_aware(value)
            elif name == "tags" and value is not None:
                value = list(value)
            elif name == "title" and (value is None or not str(value).strip()):
                raise ValueError("title is required")
            fields[name] = value
        return fields

    # ---- public API ----

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def insert(self, task: Task) -> None:
        with self._lock:
            if task.id in self._tasks:
                raise ValueError(f"Duplicate task id: {task.id}")
            self._tasks[task.id] = _copy(_aware(task))
        logger.debug(
            "Task added id=%s status=%s priority=%s due=%s",
            task.id,
            task.status.value,
            task.priority.value,
            task.due_date,
        )

    def get(self, task_id: str) -> Task | None:
        with self._lock:
            task = self._tasks.get(task_id)
            return _copy(task) if task is not None else None

    def update(self, task_id: str, changes: Mapping[str, Any]) -> Task | None:
        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                return None

            fields = self._apply(current, changes)
            # updated_at never moves backwards, even if the clock does.
            fields["updated_at"] = max(as_aware(self._clock()), current.updated_at)
            updated = replace(current, **fields)
            self._tasks[task_id] = updated
            logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
            return _copy(updated)

    def delete(self, task_id: str) -> bool:
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is None:
            return False
        logger.debug("Task deleted id=%s", task_id)
        return True

    def list_all(self) -> list[Task]:
        with self._lock:
            return [_copy(t) for t in self._tasks.values()]
