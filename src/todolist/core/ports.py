# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The engine depends on a Protocol instead of the concrete JSON repository.
This keeps storage swappable and makes testing easier.
"""

from dataclasses import dataclass
from typing import Protocol

from ..tasks.history import HistoryManager
from ..tasks.task_store import TaskStore


@dataclass(slots=True)
class LoadedState:
    store: TaskStore
    history: HistoryManager


class TaskRepository(Protocol):
    """Persistence of the live store plus its undo history."""

    def load(self, *, history_limit: int) -> LoadedState: ...

    def save(self, store: TaskStore, history: HistoryManager) -> None: ...
