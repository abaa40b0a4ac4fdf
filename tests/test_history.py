# tests/test_history.py

from __future__ import annotations

import pytest

from todolist.core.errors import NoHistory
from todolist.tasks.history import HistoryManager
from todolist.tasks.task_store import StoreSnapshot, TaskStore


def _snap(*names: str) -> StoreSnapshot:
    store = TaskStore()
    for n in names:
        store.add(n)
    return store.snapshot()


def test_undo_pops_most_recent_first() -> None:
    history = HistoryManager(3)
    history.record(_snap("a"))
    history.record(_snap("a", "b"))

    assert len(history.undo()) == 2
    assert len(history.undo()) == 1
    with pytest.raises(NoHistory):
        history.undo()


def test_capacity_evicts_oldest() -> None:
    history = HistoryManager(2)
    history.record(_snap("one"))
    history.record(_snap("one", "two"))
    history.record(_snap("one", "two", "three"))

    assert len(history) == 2
    assert [len(s) for s in history.entries()] == [2, 3]


def test_zero_capacity_disables_undo() -> None:
    history = HistoryManager(0)
    history.record(_snap("a"))
    assert len(history) == 0
    with pytest.raises(NoHistory):
        history.undo()


def test_negative_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        HistoryManager(-1)


def test_initial_entries_are_trimmed_to_capacity() -> None:
    entries = [_snap(*["t"] * n) for n in range(1, 6)]
    history = HistoryManager(3, entries)
    assert [len(s) for s in history.entries()] == [3, 4, 5]


def test_reset_replaces_stack() -> None:
    history = HistoryManager(5)
    history.record(_snap("a"))
    saved = history.entries()
    history.record(_snap("a", "b"))

    history.reset(saved)

    assert history.entries() == saved
