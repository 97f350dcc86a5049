# tests/test_sorting.py

from __future__ import annotations

from dataclasses import replace

import pytest

from quest_checklist.tasks.sorting import (
    UNSORTED,
    SortDirection,
    Sorted,
    apply_sort,
    materialize,
)
from quest_checklist.tasks.task_models import Task, TaskStatus


@pytest.fixture()
def abcd() -> list[Task]:
    return [
        Task(id=1, title="A", status=TaskStatus.COMPLETED),
        Task(id=2, title="B", status=TaskStatus.NOT_STARTED),
        Task(id=3, title="C", status=TaskStatus.ON_HOLD),
        Task(id=4, title="D", status=TaskStatus.IN_PROGRESS),
    ]


def _titles(tasks: list[Task]) -> list[str]:
    return [t.title for t in tasks]


def test_unsorted_materializes_canonical_order(abcd: list[Task]) -> None:
    assert materialize(UNSORTED, abcd) == abcd


def test_ascending_and_descending(abcd: list[Task]) -> None:
    asc = apply_sort(UNSORTED, abcd, SortDirection.ASC)
    assert isinstance(asc, Sorted)
    assert _titles(materialize(asc, abcd)) == ["B", "D", "A", "C"]

    desc = apply_sort(asc, abcd, SortDirection.DESC)
    assert _titles(materialize(desc, abcd)) == ["C", "A", "D", "B"]


def test_plain_strings_are_accepted_as_direction(abcd: list[Task]) -> None:
    asc = apply_sort(UNSORTED, abcd, "asc")  # type: ignore[arg-type]
    assert asc == Sorted(direction=SortDirection.ASC, order=(2, 4, 1, 3))


def test_order_is_frozen_after_status_change(abcd: list[Task]) -> None:
    asc = apply_sort(UNSORTED, abcd, SortDirection.ASC)

    changed = [replace(t, status=TaskStatus.ON_HOLD) if t.title == "D" else t for t in abcd]
    view = materialize(asc, changed)

    assert _titles(view) == ["B", "D", "A", "C"]
    # values are current even though the position is frozen
    assert view[1].status is TaskStatus.ON_HOLD


def test_clear_returns_to_unsorted(abcd: list[Task]) -> None:
    asc = apply_sort(UNSORTED, abcd, SortDirection.ASC)
    assert apply_sort(asc, abcd, None) is UNSORTED


def test_new_and_removed_tasks_after_sort(abcd: list[Task]) -> None:
    asc = apply_sort(UNSORTED, abcd, SortDirection.ASC)

    e = Task(id=5, title="E", status=TaskStatus.NOT_STARTED)
    current = [t for t in abcd if t.title != "A"] + [e]

    # E is appended at the end, A is dropped
    assert _titles(materialize(asc, current)) == ["B", "D", "C", "E"]

    # re-applying slots E into the ranking
    again = apply_sort(asc, current, SortDirection.ASC)
    assert _titles(materialize(again, current)) == ["B", "E", "D", "C"]


def test_ties_keep_previous_frozen_order() -> None:
    p = Task(id=1, title="P")
    q = Task(id=2, title="Q", status=TaskStatus.IN_PROGRESS)

    desc = apply_sort(UNSORTED, [p, q], SortDirection.DESC)
    assert desc.order == (2, 1)

    # Q back to not-started: now a tie; carried-over order wins over canonical order
    q_again = replace(q, status=TaskStatus.NOT_STARTED)
    asc = apply_sort(desc, [p, q_again], SortDirection.ASC)
    assert asc.order == (2, 1)

    # from unsorted the tie falls back to canonical order
    assert apply_sort(UNSORTED, [p, q_again], SortDirection.ASC).order == (1, 2)


def test_descending_is_stable_for_equal_statuses() -> None:
    tasks = [Task(id=i, title=str(i), status=TaskStatus.COMPLETED) for i in range(1, 5)]
    desc = apply_sort(UNSORTED, tasks, SortDirection.DESC)
    assert desc.order == (1, 2, 3, 4)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("asc", SortDirection.ASC),
        ("ASCENDING", SortDirection.ASC),
        ("desc", SortDirection.DESC),
        ("off", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_direction(raw, expected) -> None:
    assert SortDirection.parse(raw) is expected


def test_parse_direction_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        SortDirection.parse("sideways")
