# src/quest_checklist/tasks/mutations.py

"""
Pure task-collection commands.

Each function takes the canonical tuple and returns a new tuple.
When nothing changes the input tuple itself is returned, so callers can use
an identity check to decide whether a save is needed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .task_models import DEFAULT_CATEGORY, TITLE_MAX_LENGTH, Task, TaskStatus, clip_title

Tasks = tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class UndoSlot:
    """The last deleted task and the index it occupied."""

    task: Task
    index: int


def find_index(tasks: Tasks, task_id: int) -> int:
    for i, task in enumerate(tasks):
        if task.id == task_id:
            return i
    return -1


def _replace_at(tasks: Tasks, index: int, task: Task) -> Tasks:
    return tasks[:index] + (task,) + tasks[index + 1 :]


def add_task(
    tasks: Tasks,
    title: str | None,
    category: str | None = None,
    memo: str | None = None,
    *,
    task_id: int,
    default_category: str = DEFAULT_CATEGORY,
    title_max_length: int = TITLE_MAX_LENGTH,
) -> Tasks:
    clipped = clip_title(title, title_max_length)
    if not clipped:
        return tasks

    task = Task(
        id=int(task_id),
        title=clipped,
        status=TaskStatus.NOT_STARTED,
        category=category or default_category,
        memo=(memo or "").strip(),
        editing=False,
    )
    return tasks + (task,)


def rotate_status(tasks: Tasks, task_id: int) -> Tasks:
    idx = find_index(tasks, task_id)
    if idx < 0:
        return tasks
    task = tasks[idx]
    return _replace_at(tasks, idx, replace(task, status=task.status.next()))


def _set_editing(tasks: Tasks, task_id: int, editing: bool) -> Tasks:
    idx = find_index(tasks, task_id)
    if idx < 0 or tasks[idx].editing is editing:
        return tasks
    return _replace_at(tasks, idx, replace(tasks[idx], editing=editing))


def begin_edit(tasks: Tasks, task_id: int) -> Tasks:
    return _set_editing(tasks, task_id, True)


def cancel_edit(tasks: Tasks, task_id: int) -> Tasks:
    return _set_editing(tasks, task_id, False)


def save_edit(
    tasks: Tasks,
    task_id: int,
    new_title: str | None,
    new_memo: str | None = None,
    *,
    title_max_length: int = TITLE_MAX_LENGTH,
) -> Tasks:
    """
    Apply an edit form.

    A blank title keeps the old title but the memo is still applied.
    new_memo=None keeps the existing memo. editing always ends up False.
    """
    idx = find_index(tasks, task_id)
    if idx < 0:
        return tasks

    task = tasks[idx]
    memo = task.memo if new_memo is None else new_memo
    title = clip_title(new_title, title_max_length) or task.title

    updated = replace(task, title=title, memo=memo, editing=False)
    if updated == task:
        return tasks
    return _replace_at(tasks, idx, updated)


def delete_task(tasks: Tasks, task_id: int) -> tuple[Tasks, UndoSlot | None]:
    idx = find_index(tasks, task_id)
    if idx < 0:
        return tasks, None
    return tasks[:idx] + tasks[idx + 1 :], UndoSlot(task=tasks[idx], index=idx)


def restore_deleted(tasks: Tasks, slot: UndoSlot | None) -> Tasks:
    """Reinsert the deleted task at its old index, or at the end if the list got shorter."""
    if slot is None:
        return tasks
    at = min(slot.index, len(tasks))
    return tasks[:at] + (slot.task,) + tasks[at:]
