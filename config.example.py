# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file lists every variable the tracker reads so the repo documents itself.
"""

ENV_VARS = {
    # App / logging
    "TASKS_APP_NAME": "App display name used in logs (default: task-tracker).",
    "TASKS_LOG_LEVEL": "Console logging level (default: WARNING, keeps the menu clean).",
    "TASKS_LOG_TO_FILE": "Also write DEBUG logs to <data_dir>/tasks.log (true/false, default: false).",
    # Paths (gitignored)
    "TASKS_DATA_DIR": "Local data directory for the log file (default: .local/tasks).",
}
