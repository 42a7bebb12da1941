# src/task_glitch/tasks/task_models.py

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        return PRIORITY_ORDER[self]

    @classmethod
    def parse(cls, raw: Any, default: Priority | None = None) -> Priority:
        """
        Case-insensitive lookup ("high", "HIGH", "High" all work).

        Returns `default` for unknown values, or raises ValueError when no default is given.
        """
        text = str(raw or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        if default is not None:
            return default
        raise ValueError(f"Unknown priority: {raw!r}")


PRIORITY_ORDER: dict[Priority, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


class Status(StrEnum):
    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"

    @classmethod
    def parse(cls, raw: Any, default: Status | None = None) -> Status:
        """
        Lenient lookup: "to do", "todo", "in-progress", "IN_PROGRESS" are accepted.
        """
        text = str(raw or "").strip().lower().replace("-", " ").replace("_", " ")
        squashed = text.replace(" ", "")
        for member in cls:
            value = member.value.lower()
            if value == text or value.replace(" ", "") == squashed:
                return member
        if default is not None:
            return default
        raise ValueError(f"Unknown status: {raw!r}")


def _num(raw: Any) -> float:
    try:
        val = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return val if math.isfinite(val) else 0.0


@dataclass(slots=True)
class Task:
    id: str
    title: str
    revenue: float
    time_taken: float
    roi: float
    priority: Priority
    status: Status
    notes: str
    created_at: float  # epoch seconds

    def to_record(self) -> dict[str, Any]:
        """Serialize to the persisted record shape (camelCase keys, createdAt in ms)."""
        return {
            "id": self.id,
            "title": self.title,
            "revenue": self.revenue,
            "timeTaken": self.time_taken,
            "roi": self.roi,
            "priority": self.priority.value,
            "status": self.status.value,
            "notes": self.notes,
            "createdAt": int(round(self.created_at * 1000)),
        }

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> Task:
        return cls(
            id=str(data.get("id") or ""),
            title=str(data.get("title") or ""),
            revenue=max(0.0, _num(data.get("revenue"))),
            time_taken=max(0.0, _num(data.get("timeTaken"))),
            roi=_num(data.get("roi")),
            priority=Priority.parse(data.get("priority"), default=Priority.MEDIUM),
            status=Status.parse(data.get("status"), default=Status.TODO),
            notes=str(data.get("notes") or ""),
            created_at=_num(data.get("createdAt")) / 1000.0,
        )


@dataclass(slots=True)
class TaskDraft:
    """Editable fields of a task as submitted from the form / command line."""

    title: str
    revenue: float = 0.0
    time_taken: float = 0.0
    priority: Priority = Priority.MEDIUM
    status: Status = Status.TODO
    notes: str = ""


@dataclass(slots=True, frozen=True)
class TaskSummary:
    total_revenue: float
    avg_roi: float
    efficiency: float
    performance_grade: str
