# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from sage_tasks.cli.bootstrap import create_initial_state
from sage_tasks.core.state import AppState
from sage_tasks.tasks.filter_controller import FilterController
from sage_tasks.tasks.task_manager import TaskManager
from sage_tasks.tasks.task_store import TaskStore

from .fakes import FakeClock, FakeKVStore, FakePrompt, FakeRenderer


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and core modules.

    A SimpleNamespace rather than the real config keeps tests independent of
    the environment and any local .env file.
    """
    return SimpleNamespace(
        app_name="sage-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        store_path=tmp_path / "data" / "store.sqlite3",
        tasks_key="taskManagerTasks",
        theme_key="sageTheme",
        default_theme="light",
        max_task_length=200,
        confirm_clear=True,
    )


@pytest.fixture()
def kv() -> FakeKVStore:
    return FakeKVStore()


@pytest.fixture()
def prompt() -> FakePrompt:
    return FakePrompt(answer=True)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(kv: FakeKVStore, prompt: FakePrompt, clock: FakeClock) -> TaskStore:
    return TaskStore(kv, prompt=prompt, clock=clock)


@pytest.fixture()
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture()
def manager(store: TaskStore, renderer: FakeRenderer) -> TaskManager:
    return TaskManager(store, FilterController(), renderer)


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    kv: FakeKVStore,
    renderer: FakeRenderer,
    prompt: FakePrompt,
) -> AppState:
    """AppState wired through the real composition root with fakes injected."""
    app = create_initial_state(settings=settings, kv=kv, renderer=renderer, prompt=prompt)
    app.manager.start()
    return app
