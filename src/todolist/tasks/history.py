# src/todolist/tasks/history.py

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from ..core.errors import NoHistory
from .task_store import StoreSnapshot

logger = logging.getLogger(__name__)

DEFAULT_UNDO_LIMIT = 10


class HistoryManager:
    """
    Bounded undo stack of store snapshots.

    - record() pushes the state captured *before* a mutation
    - once full, the oldest snapshot is evicted
    - undo() pops the most recent snapshot; undo itself is never recorded
    """

    def __init__(
        self,
        capacity: int = DEFAULT_UNDO_LIMIT,
        entries: Iterable[StoreSnapshot] = (),
    ) -> None:
        if capacity < 0:
            raise ValueError("history capacity must be >= 0")
        self._capacity = capacity
        self._stack: deque[StoreSnapshot] = deque(maxlen=capacity)
        for snap in entries:
            self.record(snap)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._stack)

    def record(self, snapshot: StoreSnapshot) -> None:
        if self._capacity == 0:
            return
        if len(self._stack) == self._capacity:
            logger.debug("History full (capacity=%s); evicting oldest snapshot", self._capacity)
        self._stack.append(snapshot)

    def undo(self) -> StoreSnapshot:
        if not self._stack:
            raise NoHistory()
        return self._stack.pop()

    def entries(self) -> tuple[StoreSnapshot, ...]:
        """Oldest first."""
        return tuple(self._stack)

    def reset(self, entries: Iterable[StoreSnapshot]) -> None:
        """Replace the whole stack (oldest first), e.g. to roll back a failed save."""
        self._stack.clear()
        for snap in entries:
            self.record(snap)
