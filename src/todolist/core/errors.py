# src/todolist/core/errors.py

"""
Error hierarchy shared by the store, the engine and the CLI.

Every error carries the process exit code the CLI should use:
- 1: user error (bad id, bad date, bad color, nothing to undo)
- 2: persistence / internal failure
"""

from __future__ import annotations

EXIT_OK = 0
EXIT_USER_ERROR = 1
EXIT_INTERNAL_ERROR = 2


class TodoError(Exception):
    """Base exception for todolist domain errors."""

    exit_code: int = EXIT_INTERNAL_ERROR


class InvalidInput(TodoError):
    """Malformed argument: empty name, bad date/color, wrong argument count."""

    exit_code = EXIT_USER_ERROR


class NotFound(TodoError):
    """Task id outside the current 1..count range."""

    exit_code = EXIT_USER_ERROR

    def __init__(self, task_id: int, count: int) -> None:
        self.task_id = task_id
        self.count = count
        if count == 0:
            msg = f"Task {task_id} not found (the task list is empty)"
        else:
            msg = f"Task {task_id} not found (valid ids are 1..{count})"
        super().__init__(msg)


class NoHistory(TodoError):
    """Undo requested with an empty history."""

    exit_code = EXIT_USER_ERROR

    def __init__(self, message: str = "Unable to undo. No undos are available") -> None:
        super().__init__(message)


class PersistenceFailure(TodoError):
    """Load/save of the data file failed."""

    exit_code = EXIT_INTERNAL_ERROR
