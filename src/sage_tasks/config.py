# src/sage_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Everything has a default; no variable is required.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "SAGE"

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


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    store_path: Path

    # ---- Storage keys ----
    tasks_key: str
    theme_key: str

    # ---- Behaviour ----
    default_theme: str
    max_task_length: int
    confirm_clear: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "sage").strip() or "sage"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/sage"))
        store_path = _env_path(_k("STORE_PATH"), data_dir / "store.sqlite3")

        tasks_key = _env(_k("TASKS_KEY"), "taskManagerTasks").strip() or "taskManagerTasks"
        theme_key = _env(_k("THEME_KEY"), "sageTheme").strip() or "sageTheme"

        default_theme = _env(_k("DEFAULT_THEME"), "light").strip().lower()
        if default_theme not in ("light", "dark"):
            default_theme = "light"

        # Never allow a limit that rejects every task.
        max_task_length = max(1, _env_int(_k("MAX_TASK_LENGTH"), 200))
        confirm_clear = _env_bool(_k("CONFIRM_CLEAR"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            store_path=store_path,
            tasks_key=tasks_key,
            theme_key=theme_key,
            default_theme=default_theme,
            max_task_length=max_task_length,
            confirm_clear=confirm_clear,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
