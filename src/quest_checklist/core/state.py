# src/quest_checklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.manager import TaskCollectionManager


@dataclass
class AppState:
    # Settings live on the state so commands and connectors can read them.
    settings: object
    manager: TaskCollectionManager
