# src/task_glitch/tasks/task_store.py

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .seed import seed_tasks
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_SLOT = "taskglitch_tasks"


class TaskStore:
    """
    JSON task store: one named slot == one file `<data_dir>/<slot>.json`.

    The slot holds the full task list as a JSON array. There is no partial
    write and no migration: every save rewrites the whole list (last write wins).
    """

    def __init__(
        self,
        data_dir: str | Path = ".local/taskglitch",
        *,
        slot: str = DEFAULT_SLOT,
        seed_when_empty: bool = True,
    ) -> None:
        slot = (slot or "").strip()
        if not slot:
            raise ValueError("slot is required")
        self._path = Path(data_dir) / f"{slot}.json"
        self._seed_when_empty = seed_when_empty
        logger.info("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_slot(self) -> list[Task] | None:
        if not self._path.exists():
            return None
        data = json.loads(self._path.read_text("utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array in {self._path}")
        out: list[Task] = []
        for rec in data:
            if not isinstance(rec, dict):
                logger.warning("Skipping malformed task record in %s: %r", self._path, rec)
                continue
            out.append(Task.from_record(rec))
        return out

    # ---- public API ----

    async def fetch_tasks(self) -> list[Task]:
        """
        Load the saved list, or the seed list when the slot does not exist yet.

        Read/parse errors propagate; the caller decides how to recover.
        """
        tasks = await asyncio.to_thread(self._read_slot)
        if tasks is None:
            if not self._seed_when_empty:
                logger.info("No saved tasks at %s; starting empty", self._path)
                return []
            logger.info("No saved tasks at %s; using seed list", self._path)
            return seed_tasks()
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save_tasks(self, tasks: Sequence[Task]) -> bool:
        """Write the full list. Failures are logged and reported as False."""
        tmp = self._path.with_suffix(".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False, indent=2)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
            logger.debug("Saved %d tasks to %s", len(tasks), self._path)
            return True
        except Exception:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink()
            return False

    def clear(self) -> None:
        with contextlib.suppress(FileNotFoundError):
            self._path.unlink()
        logger.info("Cleared task slot %s", self._path)
