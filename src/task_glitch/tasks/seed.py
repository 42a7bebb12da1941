# src/task_glitch/tasks/seed.py

from __future__ import annotations

import time

from .metrics import calculate_roi
from .task_models import Priority, Status, Task


def seed_tasks(now_ts: float | None = None) -> list[Task]:
    """Initial data set used when nothing has been saved yet."""
    now = time.time() if now_ts is None else float(now_ts)

    return [
        Task(
            id="1",
            title="Enterprise Upsell - Tech Corp",
            revenue=5000.0,
            time_taken=10.0,
            roi=calculate_roi(5000, 10),
            priority=Priority.HIGH,
            status=Status.IN_PROGRESS,
            notes="Follow up on Q3 expansion",
            created_at=now - 100.0,
        ),
        Task(
            id="2",
            title="Mid-Market Renewal - Global Inc",
            revenue=2000.0,
            time_taken=5.0,
            roi=calculate_roi(2000, 5),
            priority=Priority.MEDIUM,
            status=Status.TODO,
            notes="Renewal due next week",
            created_at=now - 200.0,
        ),
    ]
