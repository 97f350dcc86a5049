# src/quest_checklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.sorting import SortDirection
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

FIELD_SEP = "|"


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_task(task: Task) -> str:
    st = task.status
    line = f"#{task.id} {st.icon} [{st.label} {st.progress:>3}%] {task.title} ({task.category})"
    if task.editing:
        line += " [editing]"
    if task.memo:
        line += f"\n      memo: {task.memo}"
    return line


def render_tasks(state: AppState) -> str:
    mgr = state.manager
    visible = mgr.visible_tasks()
    sort = mgr.sort_direction.value if mgr.sort_direction else "off"
    header = (
        f"Tasks: {len(visible)} shown / {len(mgr.tasks)} total "
        f"(filter={mgr.category_filter}, sort={sort}, undo={'yes' if mgr.can_undo else 'no'})"
    )
    if not visible:
        return header + "\n  (empty)"
    return "\n".join([header] + [f"  {format_task(t)}" for t in visible])


# ---- argument helpers ----


def _split_fields(args: list[str]) -> list[str]:
    return [p.strip() for p in " ".join(args).split(FIELD_SEP)]


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def _changed(changed: bool, ok: str, state: AppState) -> str:
    if not changed:
        return "Nothing changed."
    return f"{ok}\n{render_tasks(state)}"


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_tasks(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add title
    /add title | category
    /add title | category | memo
    """
    fields = _split_fields(args)
    title = fields[0] if fields else ""
    category = fields[1] if len(fields) > 1 and fields[1] else None
    memo = FIELD_SEP.join(fields[2:]) if len(fields) > 2 else ""

    categories = list(getattr(state.settings, "categories", []) or [])
    if category and categories and category not in categories:
        return f"Unknown category: {category}. Use /cats to list categories."

    if not state.manager.add_task(title, category, memo):
        return "Title is empty; nothing added."
    return _changed(True, "Task added.", state)


def cmd_next(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /next <id>"
    return _changed(state.manager.rotate_status(task_id), "Status advanced.", state)


def cmd_edit(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id>"
    task = state.manager.get(task_id)
    if task is None:
        return f"No task #{task_id}."
    state.manager.begin_edit(task_id)
    return (
        f"Editing #{task_id}: {task.title}\n"
        f"  memo: {task.memo or '(none)'}\n"
        f"Use /save {task_id} <title> | <memo> or /cancel {task_id}."
    )


def cmd_cancel(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /cancel <id>"
    return _changed(state.manager.cancel_edit(task_id), "Edit cancelled.", state)


def cmd_save(state: AppState, args: list[str]) -> str:
    """
    /save id title            -> title only, memo kept
    /save id title | memo     -> title and memo
    /save id | memo           -> memo only (blank title keeps the old one)
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /save <id> <title> [| memo]"
    fields = _split_fields(args[1:])
    title = fields[0] if fields else ""
    memo = FIELD_SEP.join(fields[1:]) if len(fields) > 1 else None
    return _changed(state.manager.save_edit(task_id, title, memo), "Task saved.", state)


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    return _changed(state.manager.delete_task(task_id), "Task deleted. Use /undo to restore.", state)


def cmd_undo(state: AppState, args: list[str]) -> str:
    if not state.manager.can_undo:
        return "Nothing to undo."
    return _changed(state.manager.undo_delete(), "Deletion undone.", state)


def cmd_sort(state: AppState, args: list[str]) -> str:
    """
    /sort asc   -> not-started first
    /sort desc  -> on-hold first
    /sort off   -> insertion order
    """
    try:
        direction = SortDirection.parse(args[0] if args else None)
    except ValueError:
        return "Usage: /sort asc | desc | off"
    state.manager.apply_sort(direction)
    return render_tasks(state)


def cmd_filter(state: AppState, args: list[str]) -> str:
    value = " ".join(args).strip()
    all_category = getattr(state.settings, "all_category", "ALL")
    if not value:
        return f"Current filter: {state.manager.category_filter}. Usage: /filter <category|{all_category}>"

    categories = list(getattr(state.settings, "categories", []) or [])
    if value != all_category and categories and value not in categories:
        return f"Unknown category: {value}. Use /cats to list categories."

    state.manager.set_category_filter(value)
    return render_tasks(state)


def cmd_cats(state: AppState, args: list[str]) -> str:
    categories = list(getattr(state.settings, "categories", []) or [])
    all_category = getattr(state.settings, "all_category", "ALL")
    lines = ["Categories:"] + [f"  {c}" for c in categories] + [f"  {all_category} (filter only)"]
    return "\n".join(lines)


def cmd_status(state: AppState, args: list[str]) -> str:
    mgr = state.manager
    counts = {}
    for t in mgr.tasks:
        counts[t.status] = counts.get(t.status, 0) + 1
    parts = [f"{s.label}: {n}" for s, n in counts.items()]
    store_path = getattr(state.settings, "store_path", None)
    return (
        "Status:\n"
        f"  Tasks: {len(mgr.tasks)} ({', '.join(parts) or 'none'})\n"
        f"  Filter: {mgr.category_filter}\n"
        f"  Sort: {mgr.sort_direction.value if mgr.sort_direction else 'off'}\n"
        f"  Undo available: {'yes' if mgr.can_undo else 'no'}\n"
        f"  Store: {store_path}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the current task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add title [| category [| memo]].")
registry.register("next", cmd_next, help_text="Advance a task's status: /next <id>.", aliases=["n"])
registry.register("edit", cmd_edit, help_text="Start editing a task: /edit <id>.")
registry.register("cancel", cmd_cancel, help_text="Cancel editing: /cancel <id>.")
registry.register("save", cmd_save, help_text="Save an edit: /save <id> title [| memo].")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del", "delete"])
registry.register("undo", cmd_undo, help_text="Restore the last deleted task.")
registry.register("sort", cmd_sort, help_text="Sort by status: /sort asc | desc | off.")
registry.register("filter", cmd_filter, help_text="Filter by category: /filter <category|ALL>.")
registry.register("cats", cmd_cats, help_text="List categories.")
registry.register("status", cmd_status, help_text="Show counts, filter, sort and store path.")
