# src/taskpulse/widgets/task_list.py

"""Task list widget: one line per task, fed by the list_tasks payload."""

from __future__ import annotations

from datetime import datetime
from typing import Any

STATUS_ICONS = {
    "completed": "✓",
    "in_progress": "⏱",
    "pending": "○",
}


def status_icon(status: str) -> str:
    return STATUS_ICONS.get(status, "•")


def due_label(due_iso: str, now: datetime) -> str:
    due = datetime.fromisoformat(due_iso)
    # Whole days until due, floored: anything already past is overdue.
    days = (due - now).total_seconds() // 86400
    if days < 0:
        return "Overdue"
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days <= 7:
        return f"{int(days)} days"
    return due.strftime("%Y-%m-%d")


def render_task_list(payload: dict[str, Any] | None, now: datetime) -> str:
    payload = payload or {}
    tasks = payload.get("tasks") or []
    task_filter = payload.get("filter") or {}
    status = task_filter.get("status") or "all"

    if not tasks:
        lines = ["No tasks found"]
        if status != "all":
            lines.append(f"No {status.replace('_', ' ')} tasks")
        return "\n".join(lines)

    lines = [f"Tasks ({len(tasks)})"]
    for t in tasks:
        line = f"  {status_icon(t['status'])} {t['title']}  [{t['priority']}]"
        if t.get("due_date"):
            line += f"  Due: {due_label(t['due_date'], now)}"
        lines.append(line)
        if t.get("description"):
            lines.append(f"      {t['description']}")
        if t.get("tags"):
            lines.append(f"      #{' #'.join(t['tags'])}")

    if status != "all":
        lines.append(f"Showing {status} tasks")
    return "\n".join(lines)
