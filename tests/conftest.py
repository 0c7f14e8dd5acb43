# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpulse.core.state import AppState
from taskpulse.tasks.periods import local_now
from taskpulse.tasks.sample_data import sample_tasks
from taskpulse.tasks.task_models import Task, TaskPriority, TaskStatus
from taskpulse.tasks.task_store import InMemoryTaskStore

# Mid-month, mid-day: window arithmetic never straddles a DST change in UTC.
FIXED_NOW = datetime(2025, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def make_task(now: datetime) -> Callable[..., Task]:
    """Task factory with sensible defaults; ids are sequential per test."""
    counter = {"n": 0}

    def _make(**overrides) -> Task:
        counter["n"] += 1
        created = overrides.pop("created_at", now)
        fields = dict(
            id=f"t{counter['n']}",
            title=f"Task {counter['n']}",
            status=TaskStatus.PENDING,
            priority=TaskPriority.MEDIUM,
            created_at=created,
            updated_at=created,
        )
        fields.update(overrides)
        return Task(**fields)

    return _make


@pytest.fixture()
def store(now: datetime) -> InMemoryTaskStore:
    """Empty store whose clock is frozen at `now`."""
    return InMemoryTaskStore(clock=lambda: now)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the tool layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskpulse-test",
        log_level="INFO",
        data_dir=tmp_path / "data",
        console_enabled=False,
        transport="stdio",
        host="127.0.0.1",
        port=8000,
        widget_base_url="https://widgets.example.test",
        search_limit=50,
        seed_sample_data=True,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState over a store seeded with the demo tasks.

    The tool layer reads the wall clock, so the seed is relative to the real now.
    """
    return AppState(settings=settings, task_store=InMemoryTaskStore(sample_tasks(local_now())))
