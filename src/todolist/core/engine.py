# src/todolist/core/engine.py

"""
Command engine.

The only component that touches the store, the undo history and persistence
together. Each mutating command is all-or-nothing:

    snapshot -> mutate store (validates first) -> record snapshot -> save

A validation error leaves store and history untouched. A save error rolls
both back before re-raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import TypeVar

from .. import __license__, __version__
from ..tasks.history import HistoryManager
from ..tasks.task_models import ClearField, Color, Task
from ..tasks.task_store import StoreSnapshot, TaskStore
from .errors import PersistenceFailure
from .ports import TaskRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

HELP_TEXT = """\
Usage: todo <command> [arguments]

Commands:
  add <name...>                 Create a task
  due <id> <YYYY-MM-DD|clear>   Set or clear the due date
  note <id> <text...|clear>     Append a line to the note, or clear it
  color <id> <color|clear>      Set or clear the color
                                (red, yellow, green, blue, purple)
  rename <id> <name...>         Rename a task
  remove <id>                   Delete a task (later ids shift down by one)
  list                          List all tasks
  show <id>                     Show all details of a task
  sort                          Sort by color, then due date (ids are reassigned)
  undo                          Undo the last change
  info                          Show version information
  help                          Show this help"""


@dataclass(frozen=True, slots=True)
class CommandResult:
    message: str = ""
    tasks: tuple[Task, ...] = ()


class CommandEngine:
    def __init__(
        self,
        store: TaskStore,
        history: HistoryManager,
        repository: TaskRepository,
        *,
        app_name: str = "todo",
    ) -> None:
        self.store = store
        self.history = history
        self.repository = repository
        self.app_name = app_name

    # ---- transaction helpers ----

    def _persist(self) -> None:
        self.repository.save(self.store, self.history)

    def _mutate(self, command: str, action: Callable[[TaskStore], T]) -> T:
        before = self.store.snapshot()
        past = self.history.entries()
        result = action(self.store)
        self.history.record(before)
        try:
            self._persist()
        except PersistenceFailure:
            logger.error("Save failed after %s; rolling back", command)
            self.history.reset(past)
            self.store.restore(before)
            raise
        logger.info("Command %s applied (tasks=%s, undo=%s)", command, len(self.store), len(self.history))
        return result

    # ---- mutating commands ----

    def add(self, name: str) -> CommandResult:
        task_id = self._mutate("add", lambda s: s.add(name))
        task = self.store.get(task_id)
        return CommandResult(f"Task created with ID {task_id}", (task,))

    def due(self, task_id: int, value: date | ClearField | str) -> CommandResult:
        task = self._mutate("due", lambda s: s.set_due(task_id, value))
        if task.due_date is None:
            return CommandResult(f"Due date removed for task '{task.name}'", (task,))
        return CommandResult(
            f"Due date for task '{task.name}' set to {task.due_date.isoformat()}", (task,)
        )

    def note(self, task_id: int, value: str | ClearField) -> CommandResult:
        task = self._mutate("note", lambda s: s.set_note(task_id, value))
        if task.note is None:
            return CommandResult(f"Note cleared for task '{task.name}'", (task,))
        return CommandResult(f"Note added to task '{task.name}'", (task,))

    def color(self, task_id: int, value: Color | ClearField | str) -> CommandResult:
        task = self._mutate("color", lambda s: s.set_color(task_id, value))
        if task.color is None:
            return CommandResult(f"Color removed for task '{task.name}'", (task,))
        return CommandResult(f"Color for task '{task.name}' was set to {task.color}", (task,))

    def rename(self, task_id: int, new_name: str) -> CommandResult:
        old_name = self.store.get(task_id).name
        task = self._mutate("rename", lambda s: s.rename(task_id, new_name))
        return CommandResult(f"Renamed task '{old_name}' to '{task.name}'", (task,))

    def remove(self, task_id: int) -> CommandResult:
        removed = self._mutate("remove", lambda s: s.remove(task_id))
        return CommandResult(f"Removed task '{removed.name}'", (removed,))

    def sort(self) -> CommandResult:
        self._mutate("sort", lambda s: s.sort())
        return CommandResult(
            f"Sorted {len(self.store)} tasks. Task ids have been reassigned; "
            "use 'list' to see the new ids.",
            self.store.list(),
        )

    # ---- undo ----

    def undo(self) -> CommandResult:
        current = self.store.snapshot()
        past = self.history.entries()
        snapshot: StoreSnapshot = self.history.undo()
        self.store.restore(snapshot)
        try:
            self._persist()
        except PersistenceFailure:
            logger.error("Save failed during undo; rolling back")
            self.history.reset(past)
            self.store.restore(current)
            raise
        logger.info("Undo applied (tasks=%s, undo left=%s)", len(self.store), len(self.history))
        return CommandResult(
            f"Undid last change ({len(self.history)} more undo(s) available)",
            self.store.list(),
        )

    # ---- read-only commands ----

    def list(self) -> CommandResult:
        return CommandResult("", self.store.list())

    def show(self, task_id: int) -> CommandResult:
        return CommandResult("", (self.store.get(task_id),))

    def info(self) -> CommandResult:
        return CommandResult(
            f"{self.app_name} version {__version__}, released under the {__license__} license"
        )

    def help(self) -> CommandResult:
        return CommandResult(HELP_TEXT)
