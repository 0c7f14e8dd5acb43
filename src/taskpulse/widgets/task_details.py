# src/taskpulse/widgets/task_details.py

"""Task details card, fed by the create_task / update_task payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any


def format_timestamp(iso: str) -> str:
    return datetime.fromisoformat(iso).strftime("%b %d, %Y, %H:%M")


def render_task_details(payload: dict[str, Any] | None) -> str:
    payload = payload or {}
    task = payload.get("task")
    if not task:
        return "No task data available"

    lines: list[str] = []
    action = payload.get("action")
    if action:
        lines.append(f"Task {action}")

    lines.append(task["title"])
    if task.get("description"):
        lines.append(f"  {task['description']}")

    lines.append(f"  Status:   {task['status'].replace('_', ' ')}")
    lines.append(f"  Priority: {task['priority']}")
    if task.get("due_date"):
        lines.append(f"  Due:      {format_timestamp(task['due_date'])}")
    if task.get("tags"):
        lines.append(f"  Tags:     {', '.join(task['tags'])}")
    lines.append(f"  Created:  {format_timestamp(task['created_at'])}")
    lines.append(f"  Updated:  {format_timestamp(task['updated_at'])}")
    lines.append(f"  ID: {task['id']}")
    return "\n".join(lines)
