# src/quest_checklist/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import sqlite3
import time
from collections.abc import Iterable
from pathlib import Path

from ..core.ports import KeyValueStore
from .task_models import DEFAULT_CATEGORY, TITLE_MAX_LENGTH, Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "game-progress-tracker-tasks"


class SqliteKeyValueStore:
    """
    Local key-value store backed by a single SQLite table.

    Values are opaque strings; the task collection is stored as one JSON
    document under one key.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "checklist.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SqliteKeyValueStore ready db=%s", self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL DEFAULT 0
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            return None if row is None else str(row[0])
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value, time.time()),
            )
            conn.commit()
        finally:
            conn.close()


class TaskStore:
    """
    Load/save the task collection through a KeyValueStore.

    Storage faults never reach the caller:
    - load() falls back to an empty list
    - save() logs and returns False
    """

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        default_category: str = DEFAULT_CATEGORY,
        title_max_length: int = TITLE_MAX_LENGTH,
    ) -> None:
        self._kv = kv
        self._key = storage_key
        self._default_category = default_category
        self._title_max_length = title_max_length

    def load(self) -> list[Task]:
        try:
            raw = self._kv.get(self._key)
        except Exception:
            logger.exception("Failed to read tasks key=%s", self._key)
            return []

        if not raw:
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                logger.warning(
                    "Stored tasks payload is %s, not a list; starting empty.", type(data).__name__
                )
                return []
            tasks = self._migrate(data)
        except Exception:
            # Covers RecursionError from deeply nested payloads too.
            logger.exception("Failed to parse stored tasks key=%s", self._key)
            return []

        logger.info("Loaded %d tasks (%d records) key=%s", len(tasks), len(data), self._key)
        return tasks

    def _migrate(self, records: Iterable[object]) -> list[Task]:
        """Repair each record; keep ids unique (duplicates/non-int ids get fresh ones)."""
        staged: list[tuple[object, int | None]] = []
        seen: set[int] = set()
        for rec in records:
            rid = rec.get("id") if isinstance(rec, dict) else None
            if isinstance(rid, int) and not isinstance(rid, bool) and rid not in seen:
                seen.add(rid)
                staged.append((rec, rid))
            else:
                staged.append((rec, None))

        next_id = max(seen, default=0) + 1
        out: list[Task] = []
        for rec, rid in staged:
            if rid is None:
                rid = next_id
                next_id += 1
            task = Task.from_record(
                rec,
                task_id=rid,
                default_category=self._default_category,
                title_max_length=self._title_max_length,
            )
            if task is None:
                logger.warning("Skipping unusable task record: %r", rec)
                continue
            out.append(task)
        return out

    def save(self, tasks: Iterable[Task]) -> bool:
        try:
            payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False)
            self._kv.set(self._key, payload)
        except Exception:
            logger.exception("Failed to save tasks key=%s", self._key)
            return False
        logger.debug("Saved tasks key=%s bytes=%d", self._key, len(payload))
        return True
