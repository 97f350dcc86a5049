# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from quest_checklist.tasks.task_models import Task


@dataclass(slots=True)
class MemoryKeyValueStore:
    """In-memory KeyValueStore; counts writes for assertions."""

    data: dict[str, str] = field(default_factory=dict)
    writes: int = 0

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        self.data[key] = value


class FailingKeyValueStore:
    """KeyValueStore whose reads and/or writes blow up like a broken disk."""

    def __init__(self, *, fail_get: bool = True, fail_set: bool = True) -> None:
        self.fail_get = fail_get
        self.fail_set = fail_set

    def get(self, key: str) -> str | None:
        if self.fail_get:
            raise OSError("disk unreadable")
        return None

    def set(self, key: str, value: str) -> None:
        if self.fail_set:
            raise OSError("disk full")


class FakeTaskRepo:
    """
    TaskRepo that keeps snapshots in memory.

    Lets manager tests assert on what would have been persisted without JSON.
    """

    def __init__(self, tasks: Iterable[Task] = (), *, save_ok: bool = True) -> None:
        self.loaded = list(tasks)
        self.saved: list[list[Task]] = []
        self.save_ok = save_ok

    def load(self) -> list[Task]:
        return list(self.loaded)

    def save(self, tasks: Iterable[Task]) -> bool:
        self.saved.append(list(tasks))
        return self.save_ok


class CountingClock:
    """Deterministic millisecond clock for id generation."""

    def __init__(self, start: int = 1000) -> None:
        self.now = start

    def __call__(self) -> int:
        self.now += 1
        return self.now
