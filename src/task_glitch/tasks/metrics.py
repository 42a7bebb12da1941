# src/task_glitch/tasks/metrics.py

"""
Derived task metrics.

- calculate_roi: revenue / hours, zero-guarded
- get_performance_grade: letter grade bucketed from average ROI
- summarize_tasks: TaskSummary over the whole list (recomputed on every read)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

from .task_models import Task, TaskSummary

# (grade, minimum average ROI). Anything below the lowest floor gets FALLBACK_GRADE.
DEFAULT_GRADE_THRESHOLDS: tuple[tuple[str, float], ...] = (
    ("A", 500.0),
    ("B", 200.0),
    ("C", 100.0),
    ("D", 50.0),
)
FALLBACK_GRADE = "F"


def _finite_or_zero(raw: Any) -> float:
    try:
        val = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return val if math.isfinite(val) else 0.0


def calculate_roi(revenue: Any, time_taken: Any) -> float:
    """
    Return revenue per hour.

    Total over any input: non-numeric values are treated as 0 and a
    non-positive time yields 0 instead of inf/NaN.
    """
    rev = _finite_or_zero(revenue)
    hours = _finite_or_zero(time_taken)
    if hours <= 0:
        return 0.0
    roi = rev / hours
    return roi if math.isfinite(roi) else 0.0


def get_performance_grade(
    avg_roi: Any,
    thresholds: Iterable[tuple[str, float]] = DEFAULT_GRADE_THRESHOLDS,
) -> str:
    value = _finite_or_zero(avg_roi)
    for grade, floor in sorted(thresholds, key=lambda t: t[1], reverse=True):
        if value >= floor:
            return grade
    return FALLBACK_GRADE


def summarize_tasks(
    tasks: Sequence[Task],
    thresholds: Iterable[tuple[str, float]] = DEFAULT_GRADE_THRESHOLDS,
) -> TaskSummary:
    total_revenue = sum(t.revenue for t in tasks)
    total_time = sum(t.time_taken for t in tasks)
    avg_roi = sum(t.roi for t in tasks) / len(tasks) if tasks else 0.0
    efficiency = total_revenue / total_time if total_time else 0.0

    return TaskSummary(
        total_revenue=total_revenue,
        avg_roi=round(avg_roi, 2),
        efficiency=round(efficiency, 2),
        performance_grade=get_performance_grade(avg_roi, thresholds),
    )
