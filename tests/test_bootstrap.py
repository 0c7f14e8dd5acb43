# tests/test_bootstrap.py

from __future__ import annotations

import logging

from taskpulse.cli.bootstrap import create_initial_state
from taskpulse.logging_setup import _ConsoleNoiseFilter, level_from_name


def test_initial_state_is_seeded(settings) -> None:
    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    assert state.task_store.count() == 3
    assert state.task_store.get("task-001") is not None


def test_initial_state_without_seed(settings) -> None:
    settings.seed_sample_data = False
    state = create_initial_state(settings=settings)
    assert state.task_store.count() == 0


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_noise_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("taskpulse.server.tools", logging.DEBUG))
    assert not f.filter(_record("mcp.server.lowlevel", logging.INFO))
    assert f.filter(_record("mcp.server.lowlevel", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("urllib3.connectionpool", logging.WARNING))
    assert f.filter(_record("urllib3.connectionpool", logging.ERROR))
    assert f.filter(_record("httpx", logging.WARNING))
    assert not f.filter(_record("mcpx", logging.WARNING))


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name(" WARNING ") == logging.WARNING
    assert level_from_name("chatty") == logging.INFO
