# src/task_glitch/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the JSON TaskStore into a TaskBoard and AppState,
- runs the one-off async initial load.
"""

from __future__ import annotations

import asyncio
import logging

from ..config import get_settings
from ..core.board import TaskBoard
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(
        settings.data_dir,
        slot=settings.storage_slot,
        seed_when_empty=settings.seed_when_empty,
    )
    board = TaskBoard(
        store,
        undo_timeout_seconds=settings.undo_timeout_seconds,
        grade_thresholds=settings.grade_thresholds,
    )
    return AppState(settings=settings, board=board)


def load_initial_tasks(state: AppState) -> None:
    """Run the board's initial load to completion (blocking)."""
    asyncio.run(state.board.load())
    logger.info("Initial load finished: %d tasks", len(state.board.tasks))
