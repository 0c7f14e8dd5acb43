# src/taskpulse/server/tools.py

"""
Tool handlers.

Each handler takes the AppState and a validated input model, calls the core
task API and returns a ToolResult: a human-readable summary plus the
structured payload a widget renders. The MCP adapter (server/app.py) and the
console commands both go through these functions.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.periods import local_now
from ..tasks.task_models import Task, TaskFilter
from .tool_inputs import (
    CreateTaskInput,
    DeleteTaskInput,
    FetchInput,
    ListTasksInput,
    ProductivityStatsInput,
    SearchInput,
    UpdateTaskInput,
)

logger = logging.getLogger(__name__)

TASK_LIST_WIDGET = "task-list"
TASK_DETAILS_WIDGET = "task-details"
PRODUCTIVITY_WIDGET = "productivity-stats"

NO_TASKS_TEXT = "No tasks found with the specified filters."


@dataclass(slots=True)
class ToolResult:
    text: str
    structured: dict[str, Any] | None = None
    template: str | None = None


def _settings_attr(state: AppState, name: str, default: Any) -> Any:
    return getattr(state.settings, name, default)


def task_url(state: AppState, task_id: str) -> str:
    base = str(_settings_attr(state, "widget_base_url", "http://localhost:8000/widgets")).rstrip("/")
    return f"{base}/{TASK_DETAILS_WIDGET}?id={task_id}"


def _fmt_date(ts: datetime) -> str:
    return ts.strftime("%Y-%m-%d")


def task_document(state: AppState, task: Task) -> dict[str, Any]:
    """Fetch-style document: a plain-text rendition plus metadata."""
    text = "\n".join(
        [
            f"Task: {task.title}",
            f"Description: {task.description or 'No description'}",
            f"Status: {task.status.value}",
            f"Priority: {task.priority.value}",
            f"Due Date: {task.due_date.isoformat() if task.due_date else 'No due date'}",
            f"Tags: {', '.join(task.tags) if task.tags else 'No tags'}",
            f"Created: {_fmt_date(task.created_at)}",
            f"Last Updated: {_fmt_date(task.updated_at)}",
        ]
    )
    return {
        "id": task.id,
        "title": task.title,
        "text": text,
        "url": task_url(state, task.id),
        "metadata": {
            "status": task.status.value,
            "priority": task.priority.value,
            "tags": list(task.tags) if task.tags is not None else None,
            "source": "task_management_system",
        },
    }


def search(state: AppState, params: SearchInput) -> ToolResult:
    limit = int(_settings_attr(state, "search_limit", 50))
    try:
        matches = task_api.search_tasks(state.task_store, params.query, limit=limit)
        results = [{"id": t.id, "title": t.title, "url": task_url(state, t.id)} for t in matches]
        payload: dict[str, Any] = {"results": results}
    except Exception:
        logger.exception("search failed query=%r", params.query)
        payload = {"results": [], "error": "Search failed"}

    logger.info("search query=%r results=%s", params.query, len(payload["results"]))
    return ToolResult(text=json.dumps(payload))


def fetch(state: AppState, params: FetchInput) -> ToolResult:
    try:
        task = task_api.find_task(state.task_store, params.id)
    except Exception:
        logger.exception("fetch failed id=%s", params.id)
        doc = {
            "id": params.id,
            "title": "Error",
            "text": "Failed to fetch task details.",
            "metadata": {"error": "fetch_failed"},
        }
        return ToolResult(text=json.dumps(doc))

    if task is None:
        logger.info("fetch id=%s not found", params.id)
        doc = {
            "id": params.id,
            "title": "Task not found",
            "text": "The requested task could not be found.",
            "url": task_url(state, params.id),
            "metadata": {"error": "not_found"},
        }
        return ToolResult(text=json.dumps(doc))

    return ToolResult(text=json.dumps(task_document(state, task)))


def list_tasks(state: AppState, params: ListTasksInput) -> ToolResult:
    task_filter = TaskFilter(status=params.status, priority=params.priority, limit=params.limit)
    tasks = task_api.get_tasks(state.task_store, task_filter)
    logger.info("list_tasks filter=%s found=%s", task_filter.to_dict(), len(tasks))

    if not tasks:
        return ToolResult(text=NO_TASKS_TEXT)

    return ToolResult(
        text=f"Found {len(tasks)} task(s)",
        structured={
            "tasks": [t.to_dict() for t in tasks],
            "filter": params.model_dump(mode="json"),
        },
        template=TASK_LIST_WIDGET,
    )


def create_task(state: AppState, params: CreateTaskInput) -> ToolResult:
    task = task_api.create_task(
        state.task_store,
        title=params.title,
        description=params.description,
        priority=params.priority,
        due_date=params.due_date,
        tags=params.tags,
    )
    return ToolResult(
        text=f'Created task: "{task.title}" with {task.priority.value} priority',
        structured={"task": task.to_dict(), "action": "created"},
        template=TASK_DETAILS_WIDGET,
    )


def update_task(state: AppState, params: UpdateTaskInput) -> ToolResult:
    task = task_api.update_task(state.task_store, params.id, params.changes())
    if task is None:
        return ToolResult(text=f"Task {params.id} not found.")

    return ToolResult(
        text=f'Updated task: "{task.title}"',
        structured={"task": task.to_dict(), "action": "updated"},
        template=TASK_DETAILS_WIDGET,
    )


def delete_task(state: AppState, params: DeleteTaskInput) -> ToolResult:
    if not params.confirm:
        return ToolResult(
            text=f"Refusing to delete task {params.id} without confirm=true.",
            structured={"id": params.id, "deleted": False},
        )

    removed = task_api.delete_task(state.task_store, params.id)
    if not removed:
        return ToolResult(
            text=f"Task {params.id} not found.",
            structured={"id": params.id, "deleted": False},
        )
    return ToolResult(
        text=f"Deleted task {params.id}.",
        structured={"id": params.id, "deleted": True},
    )


def get_productivity_stats(state: AppState, params: ProductivityStatsInput) -> ToolResult:
    period = params.period
    now = local_now()
    stats = task_api.get_task_stats(state.task_store, period, now=now)
    productivity = task_api.get_productivity_data(state.task_store, period, now=now)
    logger.info("productivity stats period=%s total=%s", period.value, stats.total)

    return ToolResult(
        text=(
            f"Productivity stats for {period.value}: {stats.completed} completed, "
            f"{stats.in_progress} in progress, {stats.pending} pending"
        ),
        structured={
            "stats": stats.to_dict(),
            "productivity": productivity.to_dict(),
            "period": period.value,
        },
        template=PRODUCTIVITY_WIDGET,
    )
