# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - transitions are unconstrained: any status may follow any other.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self]


PRIORITY_RANK: dict[TaskPriority, int] = {
    TaskPriority.HIGH: 3,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 1,
}


class Period(StrEnum):
    """Named lookback window used by the statistics and productivity views."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


# Filter value meaning "no constraint" for status/priority.
ALL = "all"

# Fields that update_task may replace. id and created_at are never overwritten.
MUTABLE_FIELDS = frozenset({"title", "description", "status", "priority", "due_date", "tags"})


def _iso(ts: datetime | None) -> str | None:
    return ts.isoformat() if ts is not None else None


@dataclass(slots=True)
class Task:
    id: str
    title: str
    status: TaskStatus
    priority: TaskPriority
    created_at: datetime
    updated_at: datetime

    description: str | None = None
    due_date: datetime | None = None
    tags: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "due_date": _iso(self.due_date),
            "tags": list(self.tags) if self.tags is not None else None,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


@dataclass(slots=True)
class TaskFilter:
    """
    Listing request: status/priority subset plus an optional size cap.

    "all" (or None) for status/priority means no constraint.
    """

    status: TaskStatus | str | None = ALL
    priority: TaskPriority | str | None = None
    limit: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": str(self.status) if self.status is not None else None,
            "priority": str(self.priority) if self.priority is not None else None,
            "limit": self.limit,
        }


@dataclass(slots=True)
class TaskStats:
    total: int
    completed: int
    in_progress: int
    pending: int
    completion_rate: int
    avg_completion_time: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "completed": self.completed,
            "in_progress": self.in_progress,
            "pending": self.pending,
            "completion_rate": self.completion_rate,
            "avg_completion_time": self.avg_completion_time,
        }


@dataclass(slots=True)
class TagCount:
    tag: str
    count: int


@dataclass(slots=True)
class PriorityCount:
    priority: TaskPriority
    count: int


@dataclass(slots=True)
class ProductivityReport:
    daily_completed: list[int]
    tags_distribution: list[TagCount] = field(default_factory=list)
    priority_breakdown: list[PriorityCount] = field(default_factory=list)
    overdue_count: int = 0
    upcoming_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "daily_completed": list(self.daily_completed),
            "tags_distribution": [{"tag": t.tag, "count": t.count} for t in self.tags_distribution],
            "priority_breakdown": [
                {"priority": p.priority.value, "count": p.count} for p in self.priority_breakdown
            ],
            "overdue_count": self.overdue_count,
            "upcoming_count": self.upcoming_count,
        }
