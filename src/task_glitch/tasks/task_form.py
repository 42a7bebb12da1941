# src/task_glitch/tasks/task_form.py

"""
Parse `key=value` command arguments into a TaskDraft.

    /add title="Q4 renewal" revenue=1200 time=4 priority=high notes="call CFO"
    /edit 3f2a status=done

Bare words (no `=`) are appended to the title. Numeric fields that do not
parse become 0 (the ROI calculator's zero-guard handles the rest).
"""

from __future__ import annotations

import math
import shlex

from .task_models import Priority, Status, Task, TaskDraft

_FIELD_ALIASES = {
    "title": "title",
    "name": "title",
    "revenue": "revenue",
    "rev": "revenue",
    "time": "time_taken",
    "hours": "time_taken",
    "timetaken": "time_taken",
    "time_taken": "time_taken",
    "priority": "priority",
    "prio": "priority",
    "status": "status",
    "notes": "notes",
    "note": "notes",
}


def split_args(line: str) -> list[str]:
    """shlex split that tolerates unbalanced quotes (falls back to whitespace split)."""
    try:
        return shlex.split(line)
    except ValueError:
        return line.split()


def _to_number(raw: str) -> float:
    """Parse a non-negative amount; anything else becomes 0."""
    try:
        val = float(raw.strip().replace(",", "").lstrip("$"))
    except ValueError:
        return 0.0
    return max(0.0, val) if math.isfinite(val) else 0.0


def parse_task_form(args: list[str], base: Task | None = None) -> TaskDraft:
    """
    Build a TaskDraft from tokens.

    With `base`, unspecified fields keep the task's current values (edit form).
    Raises ValueError for an empty title or unknown priority/status values.
    """
    fields: dict[str, str] = {}
    title_words: list[str] = []

    for token in args:
        key, sep, value = token.partition("=")
        if not sep:
            title_words.append(token)
            continue
        name = _FIELD_ALIASES.get(key.strip().lower())
        if name is None:
            raise ValueError(f"Unknown field: {key!r}")
        fields[name] = value

    if title_words and "title" not in fields:
        fields["title"] = " ".join(title_words)

    if base is not None:
        draft = TaskDraft(
            title=base.title,
            revenue=base.revenue,
            time_taken=base.time_taken,
            priority=base.priority,
            status=base.status,
            notes=base.notes,
        )
    else:
        draft = TaskDraft(title="")

    if "title" in fields:
        draft.title = fields["title"].strip()
    if "revenue" in fields:
        draft.revenue = _to_number(fields["revenue"])
    if "time_taken" in fields:
        draft.time_taken = _to_number(fields["time_taken"])
    if "priority" in fields:
        draft.priority = Priority.parse(fields["priority"])
    if "status" in fields:
        draft.status = Status.parse(fields["status"])
    if "notes" in fields:
        draft.notes = fields["notes"]

    if not draft.title:
        raise ValueError("title is required")

    return draft
