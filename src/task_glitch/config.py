# src/task_glitch/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a sane local default; nothing is required.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.metrics import DEFAULT_GRADE_THRESHOLDS
from .tasks.task_store import DEFAULT_SLOT

ENV_PREFIX = "TASKGLITCH"

logger = logging.getLogger(__name__)

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def parse_grade_thresholds(
    raw: str | None,
    default: tuple[tuple[str, float], ...] = DEFAULT_GRADE_THRESHOLDS,
) -> tuple[tuple[str, float], ...]:
    """
    Parse "A:500,B:200,C:100,D:50" into ((grade, floor), ...).

    Any malformed entry discards the whole value and returns `default`.
    """
    if raw is None or raw.strip() == "":
        return default
    out: list[tuple[str, float]] = []
    for part in raw.replace(";", ",").split(","):
        part = part.strip()
        if not part:
            continue
        grade, sep, floor = part.partition(":")
        grade = grade.strip()
        if not sep or not grade:
            logger.warning("Invalid grade threshold %r; using defaults", part)
            return default
        try:
            out.append((grade, float(floor)))
        except ValueError:
            logger.warning("Invalid grade threshold %r; using defaults", part)
            return default
    return tuple(out) if out else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    data_dir: Path
    storage_slot: str
    seed_when_empty: bool

    # ---- Behaviour ----
    undo_timeout_seconds: float
    grade_thresholds: tuple[tuple[str, float], ...]

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "TaskGlitch").strip() or "TaskGlitch"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskglitch"))
        storage_slot = _env(_k("STORAGE_SLOT"), DEFAULT_SLOT).strip() or DEFAULT_SLOT
        seed_when_empty = _env_bool(_k("SEED_WHEN_EMPTY"), True)

        undo_timeout_seconds = max(0.0, _env_float(_k("UNDO_TIMEOUT_SECONDS"), 5.0))
        grade_thresholds = parse_grade_thresholds(os.getenv(_k("GRADE_THRESHOLDS")))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_slot=storage_slot,
            seed_when_empty=seed_when_empty,
            undo_timeout_seconds=undo_timeout_seconds,
            grade_thresholds=grade_thresholds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
