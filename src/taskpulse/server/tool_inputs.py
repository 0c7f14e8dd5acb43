# src/taskpulse/server/tool_inputs.py

"""Pydantic input schemas for the MCP tools."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from ..tasks.task_models import Period, TaskPriority, TaskStatus

StatusFilter = Literal["all", "pending", "in_progress", "completed"]
PriorityFilter = Literal["all", "low", "medium", "high"]

MAX_LIMIT = 100
DEFAULT_LIMIT = 20


class _Unset:
    """Default of an update argument the caller did not send."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def unset() -> Any:
    # Used as default_factory: factory defaults stay out of the JSON schema.
    return UNSET


def sent_fields(**fields: Any) -> dict[str, Any]:
    """Drop arguments that were left at UNSET."""
    return {name: value for name, value in fields.items() if value is not UNSET}


def parse_due_date(value: Any) -> Any:
    """ISO-8601 string -> aware datetime. Naive values are taken as local time."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise ValueError(f"Invalid due_date '{value}'. Use ISO 8601, e.g. 2025-01-31.") from e
    if isinstance(value, datetime) and value.tzinfo is None:
        value = value.astimezone()
    return value


DueDate = Annotated[Optional[datetime], BeforeValidator(parse_due_date)]

# Argument types shared by the input models and the flat MCP tool signatures.
TaskId = Annotated[str, Field(min_length=1, description="Unique identifier for the task")]
Query = Annotated[str, Field(description="Search query for tasks")]
Title = Annotated[str, Field(min_length=1, max_length=200, description="Task title")]
Description = Annotated[Optional[str], Field(max_length=1000, description="Task description")]
Tags = Annotated[Optional[list[str]], Field(description="Task tags")]
Limit = Annotated[int, Field(ge=1, le=MAX_LIMIT, description="Maximum number of tasks to return")]


class _ToolInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


class SearchInput(_ToolInput):
    query: Query


class FetchInput(_ToolInput):
    id: TaskId


class ListTasksInput(_ToolInput):
    status: StatusFilter = Field(default="all", description="Filter by task status")
    priority: Optional[PriorityFilter] = Field(default=None, description="Filter by priority level")
    limit: Limit = DEFAULT_LIMIT


class CreateTaskInput(_ToolInput):
    title: Title
    description: Description = None
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="Task priority")
    due_date: DueDate = Field(default=None, description="Due date in ISO format")
    tags: Tags = None


class UpdateTaskInput(_ToolInput):
    """
    Partial update. Only fields present in the request are changed;
    "due_date": null clears the due date.
    """

    id: TaskId
    title: Optional[str] = Field(default=None, min_length=1, max_length=200, description="New title")
    description: Description = None
    status: Optional[TaskStatus] = Field(default=None, description="New status")
    priority: Optional[TaskPriority] = Field(default=None, description="New priority")
    due_date: DueDate = Field(
        default=None,
        description="New due date in ISO format, or null to clear it",
    )
    tags: Tags = None

    @field_validator("title", "status", "priority")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        # These may be omitted but not cleared.
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

    def changes(self) -> dict[str, Any]:
        """Fields the caller actually sent, minus the id."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "id"
        }


class DeleteTaskInput(_ToolInput):
    id: TaskId
    confirm: bool = Field(default=False, description="Must be true to actually delete the task")


class ProductivityStatsInput(_ToolInput):
    period: Period = Field(default=Period.WEEK, description="Time period for statistics")
