# src/taskpulse/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- builds the task store and seeds the demo records.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.periods import local_now
from ..tasks.sample_data import sample_tasks
from ..tasks.task_store import InMemoryTaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    seed = sample_tasks(local_now()) if settings.seed_sample_data else []
    store = InMemoryTaskStore(seed)
    logger.info("Seeded %s sample task(s).", len(seed))

    return AppState(settings=settings, task_store=store)
