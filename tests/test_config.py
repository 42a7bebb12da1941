# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_glitch.config import Settings, parse_grade_thresholds
from task_glitch.tasks.metrics import DEFAULT_GRADE_THRESHOLDS


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKGLITCH_APP_NAME",
        "TASKGLITCH_DATA_DIR",
        "TASKGLITCH_STORAGE_SLOT",
        "TASKGLITCH_UNDO_TIMEOUT_SECONDS",
        "TASKGLITCH_GRADE_THRESHOLDS",
        "TASKGLITCH_SEED_WHEN_EMPTY",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "TaskGlitch"
    assert s.data_dir == Path(".local/taskglitch")
    assert s.storage_slot == "taskglitch_tasks"
    assert s.undo_timeout_seconds == 5.0
    assert s.grade_thresholds == DEFAULT_GRADE_THRESHOLDS
    assert s.seed_when_empty is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKGLITCH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKGLITCH_STORAGE_SLOT", "team_a")
    monkeypatch.setenv("TASKGLITCH_UNDO_TIMEOUT_SECONDS", "not-a-number")
    monkeypatch.setenv("TASKGLITCH_GRADE_THRESHOLDS", "S:1000, A:300")
    monkeypatch.setenv("TASKGLITCH_SEED_WHEN_EMPTY", "no")

    s = Settings.from_env()
    assert s.data_dir == tmp_path
    assert s.storage_slot == "team_a"
    assert s.undo_timeout_seconds == 5.0
    assert s.grade_thresholds == (("S", 1000.0), ("A", 300.0))
    assert s.seed_when_empty is False


@pytest.mark.parametrize("raw", ["A500", "A:lots", ":10", "A:1,B"])
def test_malformed_thresholds_fall_back(raw: str) -> None:
    assert parse_grade_thresholds(raw) == DEFAULT_GRADE_THRESHOLDS


def test_empty_thresholds_fall_back() -> None:
    assert parse_grade_thresholds(None) == DEFAULT_GRADE_THRESHOLDS
    assert parse_grade_thresholds("  ") == DEFAULT_GRADE_THRESHOLDS
