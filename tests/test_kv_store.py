# tests/test_kv_store.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from sage_tasks.core.errors import PersistenceError
from sage_tasks.storage.kv_store import SQLiteKVStore
from sage_tasks.tasks.task_store import TaskStore


def test_get_set_overwrite(tmp_path: Path) -> None:
    store = SQLiteKVStore(tmp_path / "nested" / "store.sqlite3")

    assert store.get("missing") is None
    store.set("k", "v1")
    store.set("k", "v2")
    assert store.get("k") == "v2"
    assert store.count_keys() == 1


def test_values_survive_reopen(tmp_path: Path) -> None:
    db = tmp_path / "store.sqlite3"
    SQLiteKVStore(db).set("taskManagerTasks", '[{"id": 1}]')

    assert SQLiteKVStore(db).get("taskManagerTasks") == '[{"id": 1}]'


def test_migrates_table_without_updated_at(tmp_path: Path) -> None:
    db = tmp_path / "old.sqlite3"
    conn = sqlite3.connect(db)
    conn.execute("CREATE TABLE kv (key TEXT PRIMARY KEY, value TEXT NOT NULL)")
    conn.execute("INSERT INTO kv(key, value) VALUES ('sageTheme', 'dark')")
    conn.commit()
    conn.close()

    store = SQLiteKVStore(db)
    assert store.get("sageTheme") == "dark"
    store.set("sageTheme", "light")
    assert store.get("sageTheme") == "light"


def test_sqlite_errors_become_persistence_errors(tmp_path: Path) -> None:
    db = tmp_path / "store.sqlite3"
    store = SQLiteKVStore(db)

    conn = sqlite3.connect(db)
    conn.execute("DROP TABLE kv")
    conn.commit()
    conn.close()

    with pytest.raises(PersistenceError):
        store.get("k")
    with pytest.raises(PersistenceError):
        store.set("k", "v")


def test_task_store_round_trip_through_sqlite(tmp_path: Path) -> None:
    db = tmp_path / "store.sqlite3"
    tasks = TaskStore(SQLiteKVStore(db))
    a = tasks.add("Buy milk")
    tasks.add("Write report")
    tasks.toggle(a.id)

    reloaded = TaskStore(SQLiteKVStore(db))
    reloaded.load()
    assert reloaded.tasks == tasks.tasks
