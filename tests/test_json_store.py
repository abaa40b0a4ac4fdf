# tests/test_json_store.py

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from todolist.core.errors import PersistenceFailure
from todolist.storage.json_store import JsonTaskRepository
from todolist.tasks.history import HistoryManager
from todolist.tasks.task_models import Color
from todolist.tasks.task_store import TaskStore


def _populated() -> tuple[TaskStore, HistoryManager]:
    store = TaskStore(today=lambda: date(2024, 12, 24))
    history = HistoryManager(10)
    history.record(store.snapshot())
    store.add("Buy milk")
    history.record(store.snapshot())
    store.add("Pay rent")
    store.set_due(1, "2025-03-01")
    store.set_note(1, "two litres")
    store.set_note(1, "oat")
    store.set_color(2, Color.RED)
    return store, history


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    repo = JsonTaskRepository(tmp_path / "nested" / "tasks.json")
    loaded = repo.load(history_limit=10)
    assert len(loaded.store) == 0
    assert len(loaded.history) == 0
    assert loaded.history.capacity == 10


def test_round_trip_keeps_every_field_and_history(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasks.json"
    repo = JsonTaskRepository(path)
    store, history = _populated()

    repo.save(store, history)
    loaded = repo.load(history_limit=10)

    assert loaded.store.list() == store.list()
    assert loaded.history.entries() == history.entries()
    absent = loaded.store.get(2)
    assert absent.due_date is None
    assert absent.note is None


def test_saved_document_layout(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    store, history = _populated()
    JsonTaskRepository(path).save(store, history)

    data = json.loads(path.read_text("utf-8"))
    assert data["version"] == 1
    assert data["tasks"][0] == {
        "id": 1,
        "name": "Buy milk",
        "created_on": "2024-12-24",
        "due_date": "2025-03-01",
        "note": "two litres\noat",
        "color": None,
    }
    assert data["tasks"][1]["color"] == "red"
    assert [len(h) for h in data["history"]] == [0, 1]
    assert not (tmp_path / "tasks.json.tmp").exists()


def test_load_trims_history_to_limit(tmp_path: Path) -> None:
    repo = JsonTaskRepository(tmp_path / "tasks.json")
    store, history = _populated()
    repo.save(store, history)

    loaded = repo.load(history_limit=1)

    assert len(loaded.history) == 1
    assert len(loaded.history.entries()[0]) == 1


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '{"version": 99, "tasks": []}',
        '{"version": 1, "tasks": [{"id": 1}]}',
        '{"version": 1, "tasks": [{"name": "a", "created_on": "yesterday"}]}',
        '{"version": 1, "tasks": [{"name": "a", "created_on": "2024-01-01", "color": "orange"}]}',
        '{"version": 1, "tasks": [], "history": {}}',
    ],
)
def test_corrupt_file_fails_closed(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(content, "utf-8")

    with pytest.raises(PersistenceFailure):
        JsonTaskRepository(path).load(history_limit=10)

    assert path.read_text("utf-8") == content


def test_save_failure_keeps_previous_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    repo = JsonTaskRepository(path)
    store, history = _populated()
    repo.save(store, history)
    original = path.read_text("utf-8")

    # A directory where the temp file should go makes the write fail.
    (tmp_path / "tasks.json.tmp").mkdir()
    store.add("never saved")
    with pytest.raises(PersistenceFailure):
        repo.save(store, history)

    assert path.read_text("utf-8") == original
