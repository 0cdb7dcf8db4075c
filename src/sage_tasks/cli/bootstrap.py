# src/sage_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations (SQLite store, console renderer/prompt)
  into the task manager and AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_renderer import AutoConfirmPrompt, ConsolePrompt, ConsoleRenderer
from ..core.ports import ConfirmPrompt, PersistenceStore, Renderer
from ..core.state import AppState
from ..core.theme import ThemePreference
from ..storage.kv_store import SQLiteKVStore
from ..tasks.filter_controller import FilterController
from ..tasks.task_manager import TaskManager
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    kv: PersistenceStore | None = None,
    renderer: Renderer | None = None,
    prompt: ConfirmPrompt | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Collaborators are injectable for tests; by default the app uses the
    SQLite store and the console adapters. Nothing is loaded yet: call
    state.manager.start() to rehydrate and render.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if kv is None:
        kv = SQLiteKVStore(settings.store_path)
    if renderer is None:
        renderer = ConsoleRenderer()
    if prompt is None:
        prompt = ConsolePrompt() if settings.confirm_clear else AutoConfirmPrompt()

    store = TaskStore(
        kv,
        prompt=prompt,
        key=settings.tasks_key,
        max_length=settings.max_task_length,
    )
    manager = TaskManager(store, FilterController(), renderer)
    theme = ThemePreference(kv, key=settings.theme_key, default=settings.default_theme)

    return AppState(settings=settings, kv=kv, manager=manager, theme=theme)
