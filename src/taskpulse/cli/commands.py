# src/taskpulse/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import ValidationError

from ..core.state import AppState
from ..server import tools
from ..server.tool_inputs import (
    CreateTaskInput,
    DeleteTaskInput,
    FetchInput,
    ListTasksInput,
    ProductivityStatsInput,
    SearchInput,
    UpdateTaskInput,
)
from ..tasks.periods import local_now
from ..tasks.task_api import find_task
from ..widgets.productivity_stats import render_productivity_stats
from ..widgets.task_details import render_task_details
from ..widgets.task_list import render_task_list

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

STATUS_WORDS = {"all", "pending", "in_progress", "completed"}
PRIORITY_WORDS = {"low", "medium", "high"}


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except ValidationError as e:
            logger.debug("Invalid arguments for /%s: %s", name, e)
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}" for err in e.errors()
            )
            return f"Invalid arguments: {problems}\n{self._help.get(name, '')}".rstrip()

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def render_result(result: tools.ToolResult) -> str:
    """Summary line plus the widget the result names (if any)."""
    if result.template == tools.TASK_LIST_WIDGET:
        body = render_task_list(result.structured, local_now())
    elif result.template == tools.TASK_DETAILS_WIDGET:
        body = render_task_details(result.structured)
    elif result.template == tools.PRODUCTIVITY_WIDGET:
        body = render_productivity_stats(result.structured)
    else:
        return result.text
    return f"{result.text}\n\n{body}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list                       -> all tasks (default limit)
    /list pending high 5        -> words may come in any order
    """
    fields: dict[str, object] = {}
    for arg in args:
        word = arg.lower()
        if word in STATUS_WORDS:
            fields["status"] = word
        elif word in PRIORITY_WORDS:
            fields["priority"] = word
        elif word.isdigit():
            fields["limit"] = int(word)
        else:
            return "Usage: /list [status] [priority] [limit]."
    return render_result(tools.list_tasks(state, ListTasksInput(**fields)))


def cmd_show(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /show <task_id>."
    task = find_task(state.task_store, args[0])
    if task is None:
        return f"Task {args[0]} not found."
    return render_task_details({"task": task.to_dict()})


def cmd_fetch(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /fetch <task_id>."
    return tools.fetch(state, FetchInput(id=args[0])).text


def cmd_search(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /search <query>."
    return tools.search(state, SearchInput(query=" ".join(args))).text


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title...>             -> medium priority
    /add high <title...>        -> explicit priority
    """
    priority = "medium"
    if args and args[0].lower() in PRIORITY_WORDS:
        priority = args[0].lower()
        args = args[1:]
    if not args:
        return "Usage: /add [low|medium|high] <title>."
    return render_result(tools.create_task(state, CreateTaskInput(title=" ".join(args), priority=priority)))


def cmd_status(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /status <task_id> <pending|in_progress|completed>."
    return render_result(tools.update_task(state, UpdateTaskInput(id=args[0], status=args[1].lower())))


def cmd_due(state: AppState, args: list[str]) -> str:
    """
    /due <id> 2025-01-31        -> set due date
    /due <id> none              -> clear due date
    """
    if len(args) != 2:
        return "Usage: /due <task_id> <YYYY-MM-DD|none>."
    due = None if args[1].lower() in ("none", "clear", "-") else args[1]
    return render_result(tools.update_task(state, UpdateTaskInput(id=args[0], due_date=due)))


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <task_id> confirm."
    confirm = len(args) > 1 and args[1].lower() == "confirm"
    return tools.delete_task(state, DeleteTaskInput(id=args[0], confirm=confirm)).text


def cmd_stats(state: AppState, args: list[str]) -> str:
    fields = {"period": args[0].lower()} if args else {}
    return render_result(tools.get_productivity_stats(state, ProductivityStatsInput(**fields)))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List tasks: /list [status] [priority] [limit].", aliases=["ls"])
registry.register("show", cmd_show, help_text="Show one task: /show <task_id>.")
registry.register("fetch", cmd_fetch, help_text="Fetch document for a task: /fetch <task_id>.")
registry.register("search", cmd_search, help_text="Search tasks: /search <query>.")
registry.register("add", cmd_add, help_text="Create a task: /add [low|medium|high] <title>.")
registry.register(
    "status", cmd_status, help_text="Change status: /status <task_id> <pending|in_progress|completed>."
)
registry.register("due", cmd_due, help_text="Set or clear due date: /due <task_id> <YYYY-MM-DD|none>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <task_id> confirm.", aliases=["rm"])
registry.register("stats", cmd_stats, help_text="Productivity stats: /stats [today|week|month|year].")
