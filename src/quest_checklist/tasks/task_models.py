# src/quest_checklist/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

TITLE_MAX_LENGTH = 100
DEFAULT_CATEGORY = "その他"


class TaskStatus(StrEnum):
    """
    Task progress status.

    Declaration order is the progress order used by rotation and sorting:
    not-started < in-progress < completed < on-hold.
    """

    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"

    @classmethod
    def from_db(cls, raw: Any) -> TaskStatus:
        if not raw:
            return cls.NOT_STARTED
        try:
            return cls(raw)
        except ValueError:
            return cls.NOT_STARTED

    @property
    def rank(self) -> int:
        return _STATUS_ORDER.index(self)

    def next(self) -> TaskStatus:
        return _STATUS_ORDER[(self.rank + 1) % len(_STATUS_ORDER)]

    @property
    def label(self) -> str:
        return _STATUS_DISPLAY[self][0]

    @property
    def icon(self) -> str:
        return _STATUS_DISPLAY[self][1]

    @property
    def progress(self) -> int:
        return _STATUS_DISPLAY[self][2]


_STATUS_ORDER: tuple[TaskStatus, ...] = tuple(TaskStatus)

# label, icon, progress percent
_STATUS_DISPLAY: dict[TaskStatus, tuple[str, str, int]] = {
    TaskStatus.NOT_STARTED: ("未着手", "⏳", 0),
    TaskStatus.IN_PROGRESS: ("進行中", "⚡", 50),
    TaskStatus.COMPLETED: ("完了", "✅", 100),
    TaskStatus.ON_HOLD: ("保留", "⏸️", 0),
}


def clip_title(raw: str | None, max_length: int = TITLE_MAX_LENGTH) -> str:
    """Strip surrounding whitespace and truncate to max_length characters."""
    return (raw or "").strip()[: max(0, int(max_length))]


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    status: TaskStatus = TaskStatus.NOT_STARTED
    category: str = DEFAULT_CATEGORY
    memo: str = ""
    # UI-only flag; persisted as-is but always reset on load.
    editing: bool = False

    @classmethod
    def from_record(
        cls,
        raw: Any,
        *,
        task_id: int,
        default_category: str = DEFAULT_CATEGORY,
        title_max_length: int = TITLE_MAX_LENGTH,
    ) -> Task | None:
        """
        Build a Task from a persisted record, repairing legacy shapes.

        - "text" is accepted as the title key (older saves)
        - missing status / category / memo get their defaults
        - editing is always False

        Returns None when the record is not a mapping or has no usable title.
        The caller decides the id (records may carry none or a duplicate).
        """
        if not isinstance(raw, Mapping):
            return None

        title_raw = raw.get("title")
        if title_raw is None:
            title_raw = raw.get("text")
        title = clip_title(str(title_raw) if title_raw is not None else "", title_max_length)
        if not title:
            return None

        category = raw.get("category")
        memo = raw.get("memo")

        return cls(
            id=int(task_id),
            title=title,
            status=TaskStatus.from_db(raw.get("status")),
            category=str(category) if category else default_category,
            memo="" if memo is None else str(memo),
            editing=False,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "status": self.status.value,
            "category": self.category,
            "memo": self.memo,
            "editing": self.editing,
        }
