# tests/test_main.py

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from todolist.cli.main import main
from todolist.core.errors import EXIT_INTERNAL_ERROR, EXIT_OK, EXIT_USER_ERROR


@pytest.fixture(autouse=True)
def _isolate_cli(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    root = logging.getLogger()
    saved = list(root.handlers)
    yield
    # main() installs its own handlers; drop them so later tests are unaffected.
    for h in list(root.handlers):
        if h not in saved:
            root.removeHandler(h)
            h.close()
    for h in saved:
        if h not in root.handlers:
            root.addHandler(h)


def test_commands_persist_between_invocations(settings: SimpleNamespace, capsys) -> None:
    assert main(["add", "Buy", "milk"], settings=settings) == EXIT_OK
    assert main(["add", "Pay", "rent"], settings=settings) == EXIT_OK
    assert main(["due", "1", "2025-03-01"], settings=settings) == EXIT_OK
    assert main(["remove", "1"], settings=settings) == EXIT_OK
    capsys.readouterr()

    assert main(["list"], settings=settings) == EXIT_OK
    out = capsys.readouterr().out
    assert "Pay rent" in out
    assert "Buy milk" not in out

    assert main(["undo"], settings=settings) == EXIT_OK
    assert main(["show", "1"], settings=settings) == EXIT_OK
    out = capsys.readouterr().out
    assert "Buy milk" in out
    assert "2025-03-01" in out
    assert settings.tasks_path.exists()


def test_user_errors_exit_with_one(settings: SimpleNamespace, capsys) -> None:
    assert main([], settings=settings) == EXIT_USER_ERROR
    assert main(["frobnicate"], settings=settings) == EXIT_USER_ERROR
    assert main(["show", "1"], settings=settings) == EXIT_USER_ERROR
    assert main(["undo"], settings=settings) == EXIT_USER_ERROR
    err = capsys.readouterr().err
    assert "Error:" in err
    assert "No undos are available" in err
    assert not settings.tasks_path.exists()


def test_corrupt_data_file_exits_with_two_and_is_kept(settings: SimpleNamespace, capsys) -> None:
    settings.tasks_path.write_text("{broken", "utf-8")

    assert main(["add", "a"], settings=settings) == EXIT_INTERNAL_ERROR

    assert settings.tasks_path.read_text("utf-8") == "{broken"
    assert "Unable to deserialize" in capsys.readouterr().err


def test_log_file_written_when_enabled(settings: SimpleNamespace) -> None:
    settings.log_to_file = True
    assert main(["add", "a"], settings=settings) == EXIT_OK
    assert (settings.data_dir / "todo.log").exists()
