# src/task_glitch/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .board import TaskBoard


@dataclass
class AppState:
    # Settings object (config.Settings, or a SimpleNamespace in tests).
    settings: Any
    board: TaskBoard

    @property
    def lock(self):
        return self.board.lock
