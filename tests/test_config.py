# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskpulse.config import Settings

_VARS = (
    "APP_NAME",
    "LOG_LEVEL",
    "DATA_DIR",
    "CONSOLE_ENABLED",
    "TRANSPORT",
    "HOST",
    "PORT",
    "WIDGET_BASE_URL",
    "SEARCH_LIMIT",
    "SEED_SAMPLE_DATA",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(f"TASKPULSE_{name}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "taskpulse"
    assert s.transport == "stdio"
    assert s.port == 8000
    assert s.console_enabled is False
    assert s.seed_sample_data is True
    assert s.search_limit == 50
    assert s.data_dir == Path(".local/taskpulse")


def test_env_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("TASKPULSE_TRANSPORT", "Streamable-HTTP")
    monkeypatch.setenv("TASKPULSE_PORT", "9100")
    monkeypatch.setenv("TASKPULSE_CONSOLE_ENABLED", "yes")
    monkeypatch.setenv("TASKPULSE_SEED_SAMPLE_DATA", "0")
    monkeypatch.setenv("TASKPULSE_WIDGET_BASE_URL", "https://w.example/")
    monkeypatch.setenv("TASKPULSE_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.transport == "streamable-http"
    assert s.port == 9100
    assert s.console_enabled is True
    assert s.seed_sample_data is False
    assert s.widget_base_url == "https://w.example"
    assert s.data_dir == tmp_path


def test_bad_values_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("TASKPULSE_TRANSPORT", "carrier-pigeon")
    monkeypatch.setenv("TASKPULSE_PORT", "eighty")
    monkeypatch.setenv("TASKPULSE_SEARCH_LIMIT", "-3")

    s = Settings.from_env()
    assert s.transport == "stdio"
    assert s.port == 8000
    assert s.search_limit == 1
