# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from quest_checklist.cli.bootstrap import create_initial_state
from quest_checklist.config import DEFAULT_CATEGORIES
from quest_checklist.core.state import AppState
from quest_checklist.tasks.manager import TaskCollectionManager

from .fakes import CountingClock, FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    return SimpleNamespace(
        app_name="quest-checklist-test",
        log_level="DEBUG",
        console_enabled=False,
        data_dir=tmp_path,
        store_path=tmp_path / "checklist.sqlite3",
        storage_key="game-progress-tracker-tasks",
        categories=list(DEFAULT_CATEGORIES),
        all_category="ALL",
        default_category="その他",
        title_max_length=100,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired exactly as the CLI does it.

    NOTE: the SQLite store is real here; its round-trip is part of what we test.
    """
    return create_initial_state(settings=settings)


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def manager(repo: FakeTaskRepo) -> TaskCollectionManager:
    return TaskCollectionManager(repo, clock_ms=CountingClock())
