# src/quest_checklist/tasks/filtering.py

from __future__ import annotations

from collections.abc import Sequence

from .task_models import DEFAULT_CATEGORY, Task

ALL_CATEGORIES = "ALL"


def apply_filter(
    tasks: Sequence[Task],
    category_filter: str | None,
    *,
    all_sentinel: str = ALL_CATEGORIES,
    default_category: str = DEFAULT_CATEGORY,
) -> list[Task]:
    """Keep tasks of one category; the all sentinel (or an empty filter) keeps everything."""
    if not category_filter or category_filter == all_sentinel:
        return list(tasks)
    return [t for t in tasks if (t.category or default_category) == category_filter]
