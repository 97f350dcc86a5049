# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from quest_checklist.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_noise_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("quest_checklist.tasks.manager", logging.DEBUG))
    assert not f.filter(_record("quest_checklist.tasks.task_store", logging.INFO))
    assert f.filter(_record("quest_checklist.tasks.task_store", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_noise_filter_custom_thresholds_and_prefix_boundaries() -> None:
    f = _ConsoleNoiseFilter({"quest_checklist.cli": logging.WARNING, "sqlite3": logging.INFO})

    assert not f.filter(_record("quest_checklist.cli.commands", logging.INFO))
    assert f.filter(_record("quest_checklist.connectors.console_connector", logging.DEBUG))
    assert f.filter(_record("sqlite3", logging.INFO))
    # a lookalike name is not part of the app package
    assert not f.filter(_record("quest_checklist_extras", logging.WARNING))
    # defaults are replaced, not merged
    assert f.filter(_record("quest_checklist.tasks.task_store", logging.DEBUG))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")
    logging.getLogger("quest_checklist.test").debug("hello file")

    for h in logging.getLogger().handlers:
        h.flush()
    assert log_file == tmp_path / "logs" / "checklist.log"
    assert "hello file" in log_file.read_text("utf-8")
    assert len(logging.getLogger().handlers) == 2
