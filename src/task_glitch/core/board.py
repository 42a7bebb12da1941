# src/task_glitch/core/board.py

"""
In-memory task board.

Holds the authoritative task list for the session plus the view state
(search text, priority filter) and the single-slot undo buffer.

Derived values (visible list, summary) are recomputed from the list on every
read. Every mutation writes the whole list back through the TaskRepo once the
initial load has finished.
"""

from __future__ import annotations

import logging
import threading
import time
import uuid
from collections.abc import Callable, Iterable
from dataclasses import replace

from ..tasks.metrics import DEFAULT_GRADE_THRESHOLDS, calculate_roi, summarize_tasks
from ..tasks.seed import seed_tasks
from ..tasks.sorting import ALL_PRIORITIES, filter_tasks, sort_tasks
from ..tasks.task_models import Priority, Task, TaskDraft, TaskSummary
from .ports import CancelableTimer, TaskRepo, TimerFactory

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    pass


def _daemon_timer(interval: float, fn: Callable[[], None]) -> CancelableTimer:
    timer = threading.Timer(interval, fn)
    timer.daemon = True
    return timer


class TaskBoard:
    def __init__(
        self,
        store: TaskRepo,
        *,
        undo_timeout_seconds: float = 5.0,
        grade_thresholds: Iterable[tuple[str, float]] = DEFAULT_GRADE_THRESHOLDS,
        timer_factory: TimerFactory = _daemon_timer,
    ) -> None:
        self._store = store
        self._undo_timeout = max(0.0, float(undo_timeout_seconds))
        self._thresholds = tuple(grade_thresholds)
        self._timer_factory = timer_factory

        self.lock = threading.RLock()

        self._tasks: list[Task] = []
        self._loading = True
        self._mounted = True

        self.search = ""
        self.priority_filter = ALL_PRIORITIES

        self._last_deleted: Task | None = None
        self._undo_timer: CancelableTimer | None = None
        self._undo_generation = 0

    # ---- lifecycle ----

    @property
    def is_loading(self) -> bool:
        return self._loading

    async def load(self) -> None:
        """
        Initial load (run once at startup).

        If close() happens while the fetch is pending, the result is dropped.
        """
        try:
            tasks = await self._store.fetch_tasks()
        except Exception:
            logger.exception("Failed to load tasks")
            with self.lock:
                if self._mounted:
                    self._loading = False
            return

        with self.lock:
            if not self._mounted:
                logger.debug("Board closed during load; discarding %d tasks", len(tasks))
                return
            self._tasks = list(tasks)
            self._loading = False
        logger.info("Board loaded with %d tasks", len(tasks))

    def close(self) -> None:
        with self.lock:
            self._mounted = False
            self._cancel_undo_timer()

    # ---- reads ----

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def get_task(self, task_id: str) -> Task:
        for t in self._tasks:
            if t.id == task_id:
                return t
        raise TaskNotFoundError(task_id)

    def resolve_id(self, prefix: str) -> str:
        """Accept a full id or a unique id prefix."""
        prefix = (prefix or "").strip()
        if not prefix:
            raise TaskNotFoundError(prefix)
        exact = [t.id for t in self._tasks if t.id == prefix]
        if exact:
            return exact[0]
        matches = [t.id for t in self._tasks if t.id.startswith(prefix)]
        if len(matches) != 1:
            raise TaskNotFoundError(prefix)
        return matches[0]

    def visible_tasks(self) -> list[Task]:
        return sort_tasks(filter_tasks(self._tasks, self.search, self.priority_filter))

    def summary(self) -> TaskSummary:
        return summarize_tasks(self._tasks, self._thresholds)

    @property
    def last_deleted(self) -> Task | None:
        return self._last_deleted

    @property
    def undo_pending(self) -> bool:
        return self._last_deleted is not None

    # ---- view state ----

    def set_search(self, text: str) -> None:
        self.search = text or ""

    def set_priority_filter(self, value: str) -> None:
        raw = (value or ALL_PRIORITIES).strip()
        if raw.lower() == ALL_PRIORITIES.lower():
            self.priority_filter = ALL_PRIORITIES
            return
        self.priority_filter = Priority.parse(raw).value

    # ---- mutations ----

    def add_task(self, draft: TaskDraft) -> Task:
        task = Task(
            id=uuid.uuid4().hex,
            title=draft.title,
            revenue=draft.revenue,
            time_taken=draft.time_taken,
            roi=calculate_roi(draft.revenue, draft.time_taken),
            priority=draft.priority,
            status=draft.status,
            notes=draft.notes,
            created_at=time.time(),
        )
        self._tasks = [*self._tasks, task]
        logger.info("Task added id=%s title=%r", task.id, task.title)
        self._persist()
        return task

    def update_task(self, task_id: str, draft: TaskDraft) -> Task:
        current = self.get_task(task_id)
        updated = replace(
            current,
            title=draft.title,
            revenue=draft.revenue,
            time_taken=draft.time_taken,
            roi=calculate_roi(draft.revenue, draft.time_taken),
            priority=draft.priority,
            status=draft.status,
            notes=draft.notes,
        )
        self._tasks = [updated if t.id == task_id else t for t in self._tasks]
        logger.info("Task updated id=%s", task_id)
        self._persist()
        return updated

    def delete_task(self, task_id: str) -> Task:
        removed = self.get_task(task_id)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        logger.info("Task deleted id=%s", task_id)

        self._cancel_undo_timer()
        self._last_deleted = removed
        self._start_undo_timer()

        self._persist()
        return removed

    def undo(self) -> Task | None:
        restored = self._last_deleted
        if restored is None:
            return None
        self._tasks = [*self._tasks, restored]
        logger.info("Task restored id=%s", restored.id)
        self.dismiss_undo()
        self._persist()
        return restored

    def dismiss_undo(self) -> None:
        self._cancel_undo_timer()
        self._last_deleted = None

    def reset(self) -> None:
        """Drop every task and start over from the seed list."""
        self.dismiss_undo()
        self._store.clear()
        self._tasks = seed_tasks()
        logger.info("Board reset to %d seed tasks", len(self._tasks))
        self._persist()

    # ---- internals ----

    def _persist(self) -> None:
        if self._loading:
            return
        self._store.save_tasks(self._tasks)

    def _start_undo_timer(self) -> None:
        self._undo_generation += 1
        generation = self._undo_generation
        timer = self._timer_factory(self._undo_timeout, lambda: self._on_undo_expired(generation))
        self._undo_timer = timer
        timer.start()

    def _cancel_undo_timer(self) -> None:
        timer, self._undo_timer = self._undo_timer, None
        if timer is not None:
            timer.cancel()

    def _on_undo_expired(self, generation: int) -> None:
        with self.lock:
            # Cancelled or superseded by a newer delete.
            if self._undo_timer is None or generation != self._undo_generation:
                return
            self._undo_timer = None
            self._last_deleted = None
        logger.debug("Undo window expired")
