# src/taskpulse/widgets/productivity_stats.py

"""Productivity dashboard, fed by the get_productivity_stats payload."""

from __future__ import annotations

from typing import Any

PERIOD_LABELS = {
    "today": "Today",
    "week": "Last 7 days",
    "month": "Last 30 days",
    "year": "Last year",
}

BAR_WIDTH = 20
TOP_TAGS = 8


def bar(value: float, maximum: float, width: int = BAR_WIDTH) -> str:
    if maximum <= 0:
        return ""
    filled = round(width * min(value, maximum) / maximum)
    return "█" * filled + "·" * (width - filled)


def render_productivity_stats(payload: dict[str, Any] | None) -> str:
    payload = payload or {}
    stats = payload.get("stats")
    productivity = payload.get("productivity")
    if not stats or not productivity:
        return "No productivity data available"

    period = payload.get("period") or ""
    lines = [
        "Productivity Dashboard",
        PERIOD_LABELS.get(period, "Last year"),
        "",
        f"  Total Tasks: {stats['total']}   Completed: {stats['completed']}   "
        f"In Progress: {stats['in_progress']}   Pending: {stats['pending']}",
        f"  Completion Rate: {bar(stats['completion_rate'], 100)} {stats['completion_rate']}%",
    ]

    daily = productivity.get("daily_completed") or []
    if daily:
        peak = max(max(daily), 1)
        lines += ["", "Daily Activity (tasks completed per day)"]
        for i, count in enumerate(daily, start=1):
            lines.append(f"  Day {i:>2}: {bar(count, peak)} {count}")

    breakdown = productivity.get("priority_breakdown") or []
    if breakdown:
        lines += ["", "Priority Distribution"]
        for item in breakdown:
            lines.append(f"  {item['priority']:<7} {bar(item['count'], stats['total'])} {item['count']}")

    lines += [
        "",
        f"  Avg. Completion Time: {stats['avg_completion_time']} days",
        f"  Overdue / Upcoming:   {productivity.get('overdue_count', 0)} / "
        f"{productivity.get('upcoming_count', 0)}",
    ]

    tags = productivity.get("tags_distribution") or []
    if tags:
        lines += ["", "Popular Tags"]
        lines.append("  " + "  ".join(f"{t['tag']} ({t['count']})" for t in tags[:TOP_TAGS]))
    return "\n".join(lines)
