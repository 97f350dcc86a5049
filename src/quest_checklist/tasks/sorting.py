# src/quest_checklist/tasks/sorting.py

"""
Order-freezing sort by status.

The sort compares statuses once, when it is applied, and stores the result as
a tuple of ids. Rendering maps those ids back to the current task values, so a
later status change does not move a task until the sort is applied again.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from .task_models import Task

_OFF_WORDS = {"off", "none", "clear", "reset"}


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | None) -> SortDirection | None:
        """
        Parse user input. Returns None for "clear the sort" words.
        Raises ValueError on anything else.
        """
        s = (raw or "").strip().lower()
        if not s or s in _OFF_WORDS:
            return None
        if s in ("asc", "ascending", "up"):
            return cls.ASC
        if s in ("desc", "descending", "down"):
            return cls.DESC
        raise ValueError(f"unknown sort direction: {raw!r}")


@dataclass(frozen=True, slots=True)
class Unsorted:
    pass


@dataclass(frozen=True, slots=True)
class Sorted:
    direction: SortDirection
    order: tuple[int, ...]


SortState = Unsorted | Sorted

UNSORTED = Unsorted()


def _resolve(order: Sequence[int], tasks: Sequence[Task]) -> list[Task]:
    """Frozen ids -> current tasks (missing ids dropped), then tasks not in the order."""
    by_id = {t.id: t for t in tasks}
    ordered = [by_id[i] for i in order if i in by_id]
    known = set(order)
    remaining = [t for t in tasks if t.id not in known]
    return ordered + remaining


def apply_sort(
    state: SortState,
    tasks: Sequence[Task],
    direction: SortDirection | None,
) -> SortState:
    if direction is None:
        return UNSORTED

    if isinstance(state, Sorted) and state.order:
        base = _resolve(state.order, tasks)
    else:
        base = list(tasks)

    direction = SortDirection(direction)
    if direction is SortDirection.ASC:
        ranked = sorted(base, key=lambda t: t.status.rank)
    else:
        ranked = sorted(base, key=lambda t: -t.status.rank)

    return Sorted(direction=direction, order=tuple(t.id for t in ranked))


def materialize(state: SortState, tasks: Sequence[Task]) -> list[Task]:
    if not isinstance(state, Sorted):
        return list(tasks)
    return _resolve(state.order, tasks)
