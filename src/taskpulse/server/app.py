# src/taskpulse/server/app.py

"""MCP server: registers the task tools on a FastMCP instance."""

from __future__ import annotations

import logging
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent, ToolAnnotations
from pydantic import Field

from ..core.state import AppState
from ..tasks.task_models import Period, TaskPriority, TaskStatus
from . import tools
from .tool_inputs import (
    DEFAULT_LIMIT,
    CreateTaskInput,
    DeleteTaskInput,
    Description,
    DueDate,
    FetchInput,
    Limit,
    ListTasksInput,
    PriorityFilter,
    ProductivityStatsInput,
    Query,
    SearchInput,
    StatusFilter,
    Tags,
    TaskId,
    Title,
    UpdateTaskInput,
    sent_fields,
    unset,
)

logger = logging.getLogger(__name__)

INSTRUCTIONS = """\
Task manager with productivity statistics. Tasks have a status (pending, \
in_progress, completed), a priority (low, medium, high), an optional due date \
and tags.

- Use search / fetch to find a task and read its details.
- Use list_tasks to browse tasks by status and priority (high priority first, \
newest first within a priority).
- Use create_task / update_task to change tasks. In update_task, send \
"due_date": null to clear the due date; omit a field to leave it unchanged.
- delete_task only deletes when confirm is true.
- get_productivity_stats summarizes a period (today, week, month, year).\
"""

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)
WRITE = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=False, openWorldHint=False)
DESTRUCTIVE = ToolAnnotations(readOnlyHint=False, destructiveHint=True, idempotentHint=True, openWorldHint=False)


def to_call_result(result: tools.ToolResult) -> CallToolResult:
    """Summary text as content, payload as structuredContent, widget name in _meta."""
    meta = {"openai/outputTemplate": result.template} if result.template else None
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        structuredContent=result.structured,
        _meta=meta,
    )


def create_server(state: AppState) -> FastMCP:
    settings = state.settings
    mcp = FastMCP(
        str(getattr(settings, "app_name", "taskpulse")),
        instructions=INSTRUCTIONS,
        host=str(getattr(settings, "host", "127.0.0.1")),
        port=int(getattr(settings, "port", 8000)),
    )

    @mcp.tool(name="search", title="Search Tasks", annotations=READ_ONLY)
    def search(query: Query) -> CallToolResult:
        """Search through tasks by title, description and tags."""
        return to_call_result(tools.search(state, SearchInput(query=query)))

    @mcp.tool(name="fetch", title="Fetch Task Details", annotations=READ_ONLY)
    def fetch(id: TaskId) -> CallToolResult:
        """Fetch detailed information about a specific task."""
        return to_call_result(tools.fetch(state, FetchInput(id=id)))

    @mcp.tool(name="list_tasks", title="List Tasks", annotations=READ_ONLY)
    def list_tasks(
        status: Annotated[StatusFilter, Field(description="Filter by task status")] = "all",
        priority: Annotated[Optional[PriorityFilter], Field(description="Filter by priority level")] = None,
        limit: Limit = DEFAULT_LIMIT,
    ) -> CallToolResult:
        """Get a list of tasks with filtering options."""
        params = ListTasksInput(status=status, priority=priority, limit=limit)
        return to_call_result(tools.list_tasks(state, params))

    @mcp.tool(name="create_task", title="Create Task", annotations=WRITE)
    def create_task(
        title: Title,
        description: Description = None,
        priority: Annotated[TaskPriority, Field(description="Task priority")] = TaskPriority.MEDIUM,
        due_date: Annotated[DueDate, Field(description="Due date in ISO format")] = None,
        tags: Tags = None,
    ) -> CallToolResult:
        """Create a new task. New tasks always start as pending."""
        params = CreateTaskInput(
            title=title,
            description=description,
            priority=priority,
            due_date=due_date,
            tags=tags,
        )
        return to_call_result(tools.create_task(state, params))

    @mcp.tool(name="update_task", title="Update Task", annotations=WRITE)
    def update_task(
        id: TaskId,
        title: Optional[str] = Field(default_factory=unset, description="New title"),
        description: Optional[str] = Field(default_factory=unset, description="New description"),
        status: Optional[TaskStatus] = Field(default_factory=unset, description="New status"),
        priority: Optional[TaskPriority] = Field(default_factory=unset, description="New priority"),
        due_date: Optional[str] = Field(
            default_factory=unset,
            description="New due date in ISO format, or null to clear it",
        ),
        tags: Optional[list[str]] = Field(default_factory=unset, description="Replacement tag list"),
    ) -> CallToolResult:
        """Update fields of an existing task. Only provided fields are changed."""
        sent = sent_fields(
            id=id,
            title=title,
            description=description,
            status=status,
            priority=priority,
            due_date=due_date,
            tags=tags,
        )
        return to_call_result(tools.update_task(state, UpdateTaskInput.model_validate(sent)))

    @mcp.tool(name="delete_task", title="Delete Task", annotations=DESTRUCTIVE)
    def delete_task(
        id: TaskId,
        confirm: Annotated[bool, Field(description="Must be true to actually delete the task")] = False,
    ) -> CallToolResult:
        """Delete a task. Requires confirm=true."""
        return to_call_result(tools.delete_task(state, DeleteTaskInput(id=id, confirm=confirm)))

    @mcp.tool(name="get_productivity_stats", title="Productivity Stats", annotations=READ_ONLY)
    def get_productivity_stats(
        period: Annotated[Period, Field(description="Time period for statistics")] = Period.WEEK,
    ) -> CallToolResult:
        """Get productivity metrics and statistics for a period."""
        return to_call_result(tools.get_productivity_stats(state, ProductivityStatsInput(period=period)))

    logger.info("MCP server %s created.", mcp.name)
    return mcp


def run_server(state: AppState) -> None:
    transport = str(getattr(state.settings, "transport", "stdio"))
    mcp = create_server(state)
    logger.info("Serving MCP over %s.", transport)
    mcp.run(transport=transport)
