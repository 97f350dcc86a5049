# src/quest_checklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the SQLite store and the task manager into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.manager import TaskCollectionManager
from ..tasks.task_store import SqliteKeyValueStore, TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(
        SqliteKeyValueStore(settings.store_path),
        storage_key=settings.storage_key,
        default_category=settings.default_category,
        title_max_length=settings.title_max_length,
    )
    manager = TaskCollectionManager(
        store,
        default_category=settings.default_category,
        all_category=settings.all_category,
        title_max_length=settings.title_max_length,
    )
    logger.info("Checklist ready: %d tasks from %s", len(manager.tasks), settings.store_path)
    return AppState(settings=settings, manager=manager)
