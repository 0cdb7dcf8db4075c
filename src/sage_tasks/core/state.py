# src/sage_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_manager import TaskManager
from .ports import PersistenceStore
from .theme import ThemePreference


@dataclass
class AppState:
    # Settings object (config.Settings or a SimpleNamespace in tests).
    settings: Any

    kv: PersistenceStore
    manager: TaskManager
    theme: ThemePreference
