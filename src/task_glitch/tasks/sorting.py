# src/task_glitch/tasks/sorting.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Priority, Task

ALL_PRIORITIES = "All"


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """
    Priority descending (High > Medium > Low), then newest first.

    sorted() is stable, so ties on both keys keep their input order.
    Returns a new list; the input is left untouched.
    """
    return sorted(tasks, key=lambda t: (-t.priority.rank, -t.created_at))


def filter_tasks(
    tasks: Iterable[Task],
    search: str = "",
    priority: str = ALL_PRIORITIES,
) -> list[Task]:
    needle = (search or "").lower()
    wanted = (priority or ALL_PRIORITIES).strip()

    if wanted.lower() == ALL_PRIORITIES.lower():
        wanted_priority: Priority | None = None
    else:
        try:
            wanted_priority = Priority.parse(wanted)
        except ValueError:
            return []

    return [
        t
        for t in tasks
        if needle in t.title.lower() and (wanted_priority is None or t.priority == wanted_priority)
    ]
