# src/quest_checklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The manager depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Persistent local key-value store holding opaque string values."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class TaskRepo(Protocol):
    """
    Persistence boundary for the task collection.

    Implementations absorb storage faults: load() returns [] on any failure,
    save() returns False instead of raising.
    """

    def load(self) -> list[Any]: ...
    def save(self, tasks: Iterable[Any]) -> bool: ...
