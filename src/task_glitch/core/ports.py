# src/task_glitch/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The board depends on Protocols instead of concrete implementations,
so storage and timers can be swapped for fakes in tests.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Persistence adapter: one async load at startup, full-list saves afterwards."""

    async def fetch_tasks(self) -> list[Task]: ...
    def save_tasks(self, tasks: Sequence[Task]) -> bool: ...
    def clear(self) -> None: ...


class CancelableTimer(Protocol):
    """A single deferred callback (threading.Timer-compatible)."""

    def start(self) -> None: ...
    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], CancelableTimer]
