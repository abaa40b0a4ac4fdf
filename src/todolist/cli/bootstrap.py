# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injectable, falls back to get_settings()),
- builds the JSON repository,
- loads store + undo history and wires them into a CommandEngine.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.engine import CommandEngine
from ..core.ports import TaskRepository
from ..storage.json_store import JsonTaskRepository

logger = logging.getLogger(__name__)


def create_repository(settings: Settings) -> TaskRepository:
    return JsonTaskRepository(settings.tasks_path)


def create_engine(
    *,
    settings: Settings | None = None,
    repository: TaskRepository | None = None,
) -> CommandEngine:
    """
    Load persisted state and return a ready engine.

    Raises PersistenceFailure when the data file exists but cannot be read:
    we never continue with an assumed-empty list on top of existing data.
    """
    if settings is None:
        settings = get_settings()
    if repository is None:
        repository = create_repository(settings)

    loaded = repository.load(history_limit=settings.undo_limit)
    logger.debug(
        "Engine ready tasks=%s undo=%s/%s",
        len(loaded.store),
        len(loaded.history),
        loaded.history.capacity,
    )
    return CommandEngine(
        loaded.store,
        loaded.history,
        repository,
        app_name=settings.app_name,
    )
