# src/sage_tasks/storage/kv_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from ..core.errors import PersistenceError

logger = logging.getLogger(__name__)


class SQLiteKVStore:
    """
    SQLite-backed string key-value store (PersistenceStore port).

    One table, created if missing; older databases without `updated_at`
    get the column added on startup.

    Each method opens its own short-lived connection. sqlite3 errors are
    re-raised as PersistenceError.
    """

    def __init__(self, db_path: str | Path = "store.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self.count_keys()
        except PersistenceError:
            total = -1
        logger.info("KV store ready db=%s keys=%s", self._db_path, total)

    def close(self) -> None:
        """Shutdown hook (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL DEFAULT 0
                )
                """
            )

            cur.execute("PRAGMA table_info(kv)")
            cols = {row[1] for row in cur.fetchall()}
            if "updated_at" not in cols:
                cur.execute("ALTER TABLE kv ADD COLUMN updated_at REAL NOT NULL DEFAULT 0")
                logger.info("KV store migration: added column updated_at")

            conn.commit()
        finally:
            conn.close()

    # ---- public API ----

    def get(self, key: str) -> str | None:
        try:
            conn = self._get_conn()
            try:
                row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"read failed for key={key!r}: {e}") from e
        return None if row is None else str(row[0])

    def set(self, key: str, value: str) -> None:
        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    INSERT INTO kv(key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value, time.time()),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"write failed for key={key!r}: {e}") from e
        logger.debug("KV set key=%s bytes=%s", key, len(value))

    def count_keys(self) -> int:
        try:
            conn = self._get_conn()
            try:
                (n,) = conn.execute("SELECT COUNT(*) FROM kv").fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"count failed: {e}") from e
        return int(n)
