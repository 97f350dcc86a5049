# src/quest_checklist/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path

APP_LOGGER = __name__.split(".")[0]
LOG_FILE_NAME = "checklist.log"

# Console thresholds per logger prefix; the longest matching prefix wins.
CONSOLE_THRESHOLDS: dict[str, int] = {
    # Every command saves; the console only needs to hear about failures.
    f"{APP_LOGGER}.tasks.task_store": logging.WARNING,
    "py.warnings": logging.ERROR,
}


class _ConsoleNoiseFilter(logging.Filter):
    """
    Per-prefix console thresholds.

    Loggers under the app package pass at any level unless a threshold says
    otherwise; everything else needs `default_level`.
    """

    def __init__(
        self,
        thresholds: Mapping[str, int] | None = None,
        *,
        app_logger: str = APP_LOGGER,
        default_level: int = logging.ERROR,
    ) -> None:
        super().__init__()
        self._app_logger = app_logger
        self._default_level = default_level
        # longest prefix first so specific entries beat broad ones
        self._thresholds = sorted(
            (thresholds if thresholds is not None else CONSOLE_THRESHOLDS).items(),
            key=lambda kv: len(kv[0]),
            reverse=True,
        )

    def _matches(self, name: str, prefix: str) -> bool:
        return name == prefix or name.startswith(prefix + ".")

    def filter(self, record: logging.LogRecord) -> bool:
        for prefix, level in self._thresholds:
            if self._matches(record.name, prefix):
                return record.levelno >= level
        if self._matches(record.name, self._app_logger):
            return True
        return record.levelno >= self._default_level


def setup_logging(
    *,
    log_dir: str | Path = ".local/quest",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    thresholds: Mapping[str, int] | None = None,
) -> Path:
    """
    Console on stderr (filtered), full log in <log_dir>/checklist.log.

    Call once, before the first log line. Returns the log file path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[tuple[logging.Handler, int]] = [
        (logging.StreamHandler(sys.stderr), console_level),
        (logging.FileHandler(str(log_file), encoding="utf-8"), file_level),
    ]
    for handler, level in handlers:
        handler.setLevel(level)
        handler.setFormatter(fmt)
        root.addHandler(handler)
    handlers[0][0].addFilter(_ConsoleNoiseFilter(thresholds))

    logging.captureWarnings(True)
    return log_file
