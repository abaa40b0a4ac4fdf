# src/todolist/storage/json_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any

from ..core.errors import PersistenceFailure
from ..core.ports import LoadedState
from ..tasks.history import HistoryManager
from ..tasks.task_models import Color, Task
from ..tasks.task_store import StoreSnapshot, TaskStore

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class JsonTaskRepository:
    """
    JSON file repository for the live task list and its undo history.

    Layout (one document):
        {"version": 1, "tasks": [...], "history": [[...], ...]}

    History is stored oldest first so undo survives process restarts.
    Saves are atomic: write a sibling temp file, then os.replace() it over
    the data file. No file locking: one process at a time.
    """

    def __init__(
        self,
        path: str | Path = "tasks.json",
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._path = Path(path)
        self._today = today

    @property
    def path(self) -> Path:
        return self._path

    # ---- encoding helpers ----

    @staticmethod
    def _task_to_dict(task: Task) -> dict[str, Any]:
        return {
            "id": task.id,
            "name": task.name,
            "created_on": task.created_on.isoformat(),
            "due_date": task.due_date.isoformat() if task.due_date is not None else None,
            "note": task.note,
            "color": task.color.value if task.color is not None else None,
        }

    @staticmethod
    def _dict_to_task(raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")
        name = raw.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError("task entry without a name")
        due_raw = raw.get("due_date")
        note = raw.get("note")
        if note is not None and not isinstance(note, str):
            raise ValueError("task note must be a string or null")
        return Task(
            id=int(raw.get("id") or 0),
            name=name,
            created_on=date.fromisoformat(str(raw["created_on"])),
            due_date=date.fromisoformat(str(due_raw)) if due_raw is not None else None,
            note=note,
            color=Color.from_db(raw.get("color")),
        )

    def _decode_tasks(self, raw: Any) -> list[Task]:
        if not isinstance(raw, list):
            raise ValueError("task list must be an array")
        return [self._dict_to_task(item) for item in raw]

    # ---- public API ----

    def load(self, *, history_limit: int) -> LoadedState:
        """
        Missing file -> empty store and history.
        Unreadable or malformed file -> PersistenceFailure (the file is left as is).
        """
        if not self._path.exists():
            logger.info("No tasks file at %s; starting with an empty list", self._path)
            return LoadedState(
                store=TaskStore(today=self._today),
                history=HistoryManager(history_limit),
            )

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except OSError as e:
            raise PersistenceFailure(f"Unable to read tasks file {self._path}: {e}") from e
        except ValueError as e:
            raise PersistenceFailure(
                f"Unable to deserialize tasks file {self._path}: {e}"
            ) from e

        try:
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
            version = data.get("version", FORMAT_VERSION)
            if version != FORMAT_VERSION:
                raise ValueError(f"unsupported format version {version!r}")
            tasks = self._decode_tasks(data.get("tasks", []))
            raw_history = data.get("history", [])
            if not isinstance(raw_history, list):
                raise ValueError("history must be an array")
            snapshots = [StoreSnapshot(tuple(self._decode_tasks(s))) for s in raw_history]
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceFailure(f"Malformed tasks file {self._path}: {e}") from e

        store = TaskStore(tasks, today=self._today)
        history = HistoryManager(history_limit, snapshots)
        logger.debug(
            "Loaded tasks=%s undo=%s from %s", len(store), len(history), self._path
        )
        return LoadedState(store=store, history=history)

    def save(self, store: TaskStore, history: HistoryManager) -> None:
        payload = {
            "version": FORMAT_VERSION,
            "tasks": [self._task_to_dict(t) for t in store.list()],
            "history": [
                [self._task_to_dict(t) for t in snap.tasks] for snap in history.entries()
            ],
        }
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise PersistenceFailure(f"Unable to save tasks to {self._path}: {e}") from e
        logger.debug("Saved tasks=%s undo=%s to %s", len(store), len(history), self._path)
