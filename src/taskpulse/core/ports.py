# src/taskpulse/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The query/statistics/productivity code depends on these Protocols instead of
a concrete store, so the in-memory store can be swapped for a real backend
and tests can pass fakes.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, Protocol

from ..tasks.task_models import Task

Clock = Callable[[], datetime]
# Returns a timezone-aware "now".


class TaskRepo(Protocol):
    def insert(self, task: Task) -> None: ...
    def get(self, task_id: str) -> Task | None: ...

    def update(self, task_id: str, changes: Mapping[str, Any]) -> Task | None:
        """
        Merge `changes` onto the stored task and refresh updated_at.

        A "due_date" key mapped to None clears the due date; a missing key
        leaves the field unchanged. Returns None if the id is unknown.
        """
        ...

    def delete(self, task_id: str) -> bool: ...
    def list_all(self) -> list[Task]: ...
    def count(self) -> int: ...
