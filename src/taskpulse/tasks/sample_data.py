# tasks/sample_data.py

"""Demo records loaded into the store at start-up."""

from __future__ import annotations

from datetime import datetime, timedelta

from .task_models import Task, TaskPriority, TaskStatus


def sample_tasks(now: datetime) -> list[Task]:
    day = timedelta(days=1)
    return [
        Task(
            id="task-001",
            title="Review quarterly reports",
            description="Analyze Q4 financial and performance reports for the board meeting",
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.HIGH,
            due_date=now + 2 * day,
            tags=["finance", "quarterly"],
            created_at=now - 5 * day,
            updated_at=now,
        ),
        Task(
            id="task-002",
            title="Update documentation",
            description="Update API documentation with new endpoints",
            status=TaskStatus.PENDING,
            priority=TaskPriority.MEDIUM,
            tags=["docs", "api"],
            created_at=now - 3 * day,
            updated_at=now - 2 * day,
        ),
        Task(
            id="task-003",
            title="Team standup preparation",
            status=TaskStatus.COMPLETED,
            priority=TaskPriority.LOW,
            tags=["meetings"],
            created_at=now - 1 * day,
            updated_at=now,
        ),
    ]
