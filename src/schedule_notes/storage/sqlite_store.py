# storage/sqlite_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from ..errors import StorageError

logger = logging.getLogger(__name__)


class SqliteKeyValueStore:
    """
    SQLite-backed durable key-value store.

    One table (key TEXT PRIMARY KEY, value TEXT, updated_at REAL).

    Thread-safety:
    - each method opens its own SQLite connection
    - sqlite3.Error is re-raised as StorageError
    """

    def __init__(self, db_path: str | Path = "schedule_notes.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = len(self.keys())
        except StorageError:
            total = -1
        logger.info("SqliteKeyValueStore ready db=%s keys=%s", self._db_path, total)

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at REAL NOT NULL
                    )
                    """
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"cannot initialise {self._db_path}: {e}") from e

    # ---- public API ----

    def get(self, key: str) -> str | None:
        try:
            conn = self._get_conn()
            try:
                row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
                return None if row is None else str(row[0])
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("kv get failed key=%s: %s", key, e)
            raise StorageError(f"read failed for key {key!r}") from e

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
                    (key, str(value), time.time()),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("kv set failed key=%s: %s", key, e)
            raise StorageError(f"write failed for key {key!r}") from e

    def remove(self, key: str) -> None:
        try:
            conn = self._get_conn()
            try:
                conn.execute("DELETE FROM kv WHERE key = ?", (key,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("kv remove failed key=%s: %s", key, e)
            raise StorageError(f"remove failed for key {key!r}") from e

    def keys(self) -> list[str]:
        try:
            conn = self._get_conn()
            try:
                rows = conn.execute("SELECT key FROM kv ORDER BY key").fetchall()
                return [str(r[0]) for r in rows]
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError("listing keys failed") from e
