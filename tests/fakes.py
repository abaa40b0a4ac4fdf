# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from todolist.core.errors import PersistenceFailure
from todolist.core.ports import LoadedState
from todolist.tasks.history import HistoryManager
from todolist.tasks.task_store import StoreSnapshot, TaskStore


@dataclass(slots=True)
class SavedState:
    tasks: StoreSnapshot
    history: tuple[StoreSnapshot, ...]


@dataclass(slots=True)
class FakeRepository:
    """
    In-memory TaskRepository for engine tests.

    - Captures every save for assertions
    - load() rebuilds store/history from the last save (or empty)
    """

    saves: list[SavedState] = field(default_factory=list)

    def load(self, *, history_limit: int) -> LoadedState:
        if not self.saves:
            return LoadedState(store=TaskStore(), history=HistoryManager(history_limit))
        last = self.saves[-1]
        return LoadedState(
            store=TaskStore.from_snapshot(last.tasks),
            history=HistoryManager(history_limit, last.history),
        )

    def save(self, store: TaskStore, history: HistoryManager) -> None:
        self.saves.append(SavedState(tasks=store.snapshot(), history=history.entries()))


@dataclass(slots=True)
class FailingRepository(FakeRepository):
    """Repository whose save() fails once `fail` is switched on."""

    fail: bool = False

    def save(self, store: TaskStore, history: HistoryManager) -> None:
        if self.fail:
            raise PersistenceFailure("disk full")
        FakeRepository.save(self, store, history)
