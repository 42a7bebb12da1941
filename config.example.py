# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKGLITCH_APP_NAME": "App display name (default: TaskGlitch).",
    "TASKGLITCH_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage (gitignored)
    "TASKGLITCH_DATA_DIR": "Local data directory for the task slot and log file (default: .local/taskglitch).",
    "TASKGLITCH_STORAGE_SLOT": "Name of the storage slot; tasks live in <data_dir>/<slot>.json (default: taskglitch_tasks).",
    "TASKGLITCH_SEED_WHEN_EMPTY": "Start from the seed list when nothing is saved yet (true/false, default: true).",
    # Behaviour
    "TASKGLITCH_UNDO_TIMEOUT_SECONDS": "How long /undo stays available after a delete (default: 5).",
    "TASKGLITCH_GRADE_THRESHOLDS": "Grade floors on average ROI, e.g. A:500,B:200,C:100,D:50 (below => F).",
}
