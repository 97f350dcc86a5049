# src/quest_checklist/tasks/manager.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable

from ..core.ports import TaskRepo
from . import mutations
from .filtering import ALL_CATEGORIES, apply_filter
from .mutations import Tasks, UndoSlot
from .sorting import UNSORTED, SortDirection, Sorted, SortState, apply_sort, materialize
from .task_models import DEFAULT_CATEGORY, TITLE_MAX_LENGTH, Task

logger = logging.getLogger(__name__)


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class TaskCollectionManager:
    """
    Owns the canonical task tuple, the frozen sort, the undo slot and the
    category filter. All changes go through the methods below.

    Every method that can change the canonical collection returns True when it
    did, and saves through the repo. A failed save is logged by the repo and
    does not roll anything back.
    """

    def __init__(
        self,
        repo: TaskRepo,
        *,
        default_category: str = DEFAULT_CATEGORY,
        all_category: str = ALL_CATEGORIES,
        title_max_length: int = TITLE_MAX_LENGTH,
        clock_ms: Callable[[], int] = _epoch_millis,
        tasks: Iterable[Task] | None = None,
    ) -> None:
        self._repo = repo
        self._default_category = default_category
        self._all_category = all_category
        self._title_max_length = title_max_length
        self._clock_ms = clock_ms

        self._tasks: Tasks = tuple(repo.load() if tasks is None else tasks)
        self._sort: SortState = UNSORTED
        self._undo: UndoSlot | None = None
        self._category_filter: str = all_category
        self._last_id = max((t.id for t in self._tasks), default=0)

        logger.debug("TaskCollectionManager ready tasks=%d", len(self._tasks))

    # ---- read side ----

    @property
    def tasks(self) -> Tasks:
        return self._tasks

    @property
    def sort_direction(self) -> SortDirection | None:
        return self._sort.direction if isinstance(self._sort, Sorted) else None

    @property
    def category_filter(self) -> str:
        return self._category_filter

    @property
    def can_undo(self) -> bool:
        return self._undo is not None

    def get(self, task_id: int) -> Task | None:
        idx = mutations.find_index(self._tasks, task_id)
        return None if idx < 0 else self._tasks[idx]

    def visible_tasks(self) -> list[Task]:
        return apply_filter(
            materialize(self._sort, self._tasks),
            self._category_filter,
            all_sentinel=self._all_category,
            default_category=self._default_category,
        )

    # ---- helpers ----

    def _next_id(self) -> int:
        # Wall-clock millis, bumped when two adds land in the same millisecond.
        nid = max(int(self._clock_ms()), self._last_id + 1)
        self._last_id = nid
        return nid

    def _commit(self, new_tasks: Tasks, action: str) -> bool:
        if new_tasks is self._tasks:
            return False
        self._tasks = new_tasks
        if not self._repo.save(self._tasks):
            logger.warning("Save failed after %s; keeping in-memory state.", action)
        return True

    # ---- commands ----

    def add_task(self, title: str | None, category: str | None = None, memo: str | None = None) -> bool:
        if not (title or "").strip():
            logger.debug("add_task ignored: blank title")
            return False
        new_tasks = mutations.add_task(
            self._tasks,
            title,
            category,
            memo,
            task_id=self._next_id(),
            default_category=self._default_category,
            title_max_length=self._title_max_length,
        )
        return self._commit(new_tasks, "add")

    def rotate_status(self, task_id: int) -> bool:
        return self._commit(mutations.rotate_status(self._tasks, task_id), "rotate")

    def begin_edit(self, task_id: int) -> bool:
        return self._commit(mutations.begin_edit(self._tasks, task_id), "begin_edit")

    def cancel_edit(self, task_id: int) -> bool:
        return self._commit(mutations.cancel_edit(self._tasks, task_id), "cancel_edit")

    def save_edit(self, task_id: int, title: str | None, memo: str | None = None) -> bool:
        new_tasks = mutations.save_edit(
            self._tasks, task_id, title, memo, title_max_length=self._title_max_length
        )
        return self._commit(new_tasks, "save_edit")

    def delete_task(self, task_id: int) -> bool:
        new_tasks, slot = mutations.delete_task(self._tasks, task_id)
        if slot is None:
            return False
        self._undo = slot
        logger.debug("Deleted task id=%s index=%s", task_id, slot.index)
        return self._commit(new_tasks, "delete")

    def undo_delete(self) -> bool:
        if self._undo is None:
            return False
        slot, self._undo = self._undo, None
        logger.debug("Restoring task id=%s index=%s", slot.task.id, slot.index)
        return self._commit(mutations.restore_deleted(self._tasks, slot), "undo")

    def apply_sort(self, direction: SortDirection | None) -> None:
        self._sort = apply_sort(self._sort, self._tasks, direction)

    def set_category_filter(self, value: str | None) -> None:
        self._category_filter = value or self._all_category
