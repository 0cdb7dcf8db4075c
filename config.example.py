# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "SAGE_APP_NAME": "App display name (default: sage).",
    "SAGE_LOG_LEVEL": "Logging level for the log file and console (default: INFO).",
    # Paths
    "SAGE_DATA_DIR": "Local data directory, also holds sage.log (default: .local/sage).",
    "SAGE_STORE_PATH": "SQLite key-value store (default: <data_dir>/store.sqlite3).",
    # Storage keys
    "SAGE_TASKS_KEY": "Key holding the JSON task list (default: taskManagerTasks).",
    "SAGE_THEME_KEY": "Key holding the theme preference (default: sageTheme).",
    # Behaviour
    "SAGE_DEFAULT_THEME": "Theme used when none is stored: light or dark (default: light).",
    "SAGE_MAX_TASK_LENGTH": "Maximum task text length after trimming (default: 200).",
    "SAGE_CONFIRM_CLEAR": "Ask before clearing completed tasks (true/false, default: true).",
}
