# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from todolist.core.engine import CommandEngine
from todolist.tasks.history import HistoryManager
from todolist.tasks.task_store import TaskStore

from .fakes import FakeRepository

TODAY = date(2025, 2, 1)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap/main.

    We intentionally use a SimpleNamespace rather than importing real config,
    so tests never read the environment or the real data dir.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        undo_limit=10,
        color_mode="never",
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore(today=lambda: TODAY)


@pytest.fixture()
def repo() -> FakeRepository:
    return FakeRepository()


@pytest.fixture()
def engine(store: TaskStore, repo: FakeRepository) -> CommandEngine:
    return CommandEngine(store, HistoryManager(10), repo)
