# src/todolist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from datetime import date

from ..core.errors import InvalidInput, NotFound
from .task_models import ClearField, Color, Task, parse_color, parse_due

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StoreSnapshot:
    """Point-in-time copy of a store. Tasks are frozen, so sharing them is safe."""

    tasks: tuple[Task, ...] = ()

    def __len__(self) -> int:
        return len(self.tasks)


def _sort_key(task: Task) -> tuple[bool, int, bool, date]:
    # Colorless after colored, undated after dated within a color group.
    return (
        task.color is None,
        task.color.rank if task.color is not None else 0,
        task.due_date is None,
        task.due_date or date.min,
    )


class TaskStore:
    """
    In-memory ordered task collection with dense ids.

    Invariants after every public call:
    - ids are exactly 1..len(store), in list order
    - a failed call leaves the store unchanged (validate first, then mutate)
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._today = today
        self._tasks: list[Task] = []
        self._replace_all(tasks)

    @classmethod
    def from_snapshot(
        cls, snapshot: StoreSnapshot, *, today: Callable[[], date] = date.today
    ) -> TaskStore:
        return cls(snapshot.tasks, today=today)

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _replace_all(self, tasks: Iterable[Task]) -> None:
        self._tasks = [replace(t, id=i) for i, t in enumerate(tasks, start=1)]

    def _index(self, task_id: int) -> int:
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise InvalidInput(f"Invalid task id provided: {task_id}")
        if task_id < 1 or task_id > len(self._tasks):
            raise NotFound(task_id, len(self._tasks))
        return task_id - 1

    @staticmethod
    def _clean_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            raise InvalidInput("Expected additional argument specifying the task name")
        return cleaned

    # ---- snapshots ----

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(tuple(self._tasks))

    def restore(self, snapshot: StoreSnapshot) -> None:
        self._replace_all(snapshot.tasks)
        logger.debug("Store restored from snapshot count=%s", len(self._tasks))

    # ---- queries ----

    def get(self, task_id: int) -> Task:
        return self._tasks[self._index(task_id)]

    def list(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    # ---- mutations ----

    def add(self, name: str) -> int:
        cleaned = self._clean_name(name)
        task_id = len(self._tasks) + 1
        self._tasks.append(Task(id=task_id, name=cleaned, created_on=self._today()))
        logger.debug("Task added id=%s", task_id)
        return task_id

    def set_due(self, task_id: int, value: date | ClearField | str) -> Task:
        idx = self._index(task_id)
        if isinstance(value, str):
            value = parse_due(value)
        due = None if isinstance(value, ClearField) else value
        self._tasks[idx] = replace(self._tasks[idx], due_date=due)
        return self._tasks[idx]

    def set_note(self, task_id: int, value: str | ClearField) -> Task:
        """Clear the note, or append a line to it (set it if absent)."""
        idx = self._index(task_id)
        task = self._tasks[idx]
        if isinstance(value, ClearField):
            note = None
        else:
            if not (value or "").strip():
                raise InvalidInput("Expected additional argument specifying the note text")
            note = value if not task.note else f"{task.note}\n{value}"
        self._tasks[idx] = replace(task, note=note)
        return self._tasks[idx]

    def set_color(self, task_id: int, value: Color | ClearField | str) -> Task:
        idx = self._index(task_id)
        if isinstance(value, str) and not isinstance(value, Color):
            value = parse_color(value)
        color = None if isinstance(value, ClearField) else value
        self._tasks[idx] = replace(self._tasks[idx], color=color)
        return self._tasks[idx]

    def rename(self, task_id: int, new_name: str) -> Task:
        idx = self._index(task_id)
        cleaned = self._clean_name(new_name)
        self._tasks[idx] = replace(self._tasks[idx], name=cleaned)
        return self._tasks[idx]

    def remove(self, task_id: int) -> Task:
        """Delete a task; every later task moves down by one id."""
        idx = self._index(task_id)
        removed = self._tasks[idx]
        survivors = self._tasks[:idx] + self._tasks[idx + 1 :]
        self._replace_all(survivors)
        logger.debug("Task removed id=%s remaining=%s", task_id, len(self._tasks))
        return removed

    def sort(self) -> None:
        """
        Stable sort by color (rainbow order, colorless last), then due date
        (undated last). Ids are reassigned 1..count in the new order.
        """
        self._replace_all(sorted(self._tasks, key=_sort_key))
