# tests/conftest.py

from __future__ import annotations

import asyncio
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_glitch.core.board import TaskBoard
from task_glitch.core.state import AppState
from task_glitch.tasks.metrics import DEFAULT_GRADE_THRESHOLDS
from task_glitch.tasks.task_models import Priority

from .fakes import FakeTaskRepo, FakeTimerFactory, make_task


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace rather than the real config keeps tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="TaskGlitch",
        log_level="INFO",
        data_dir=tmp_path / "data",
        storage_slot="test_tasks",
        seed_when_empty=True,
        undo_timeout_seconds=5.0,
        grade_thresholds=DEFAULT_GRADE_THRESHOLDS,
    )


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo(
        [
            make_task("a1", title="Enterprise deal", revenue=5000, time_taken=10, priority=Priority.HIGH),
            make_task("b2", title="Renewal", revenue=2000, time_taken=5, created_at=1_700_000_100.0),
        ]
    )


@pytest.fixture()
def timers() -> FakeTimerFactory:
    return FakeTimerFactory()


@pytest.fixture()
def board(repo: FakeTaskRepo, timers: FakeTimerFactory) -> TaskBoard:
    """Board that has already finished its initial load."""
    b = TaskBoard(repo, undo_timeout_seconds=5.0, timer_factory=timers)
    asyncio.run(b.load())
    return b


@pytest.fixture()
def state(settings: SimpleNamespace, board: TaskBoard) -> AppState:
    return AppState(settings=settings, board=board)
