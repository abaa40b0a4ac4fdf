# src/todolist/cli/render.py

"""Text rendering for `list` and `show`."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from ..tasks.task_models import DATE_FORMAT, Task
from .theme import Theme

NAME_WIDTH = 75
LABEL_WIDTH = 15
NOTE_WIDTH = 75


def _truncate(name: str, width: int = NAME_WIDTH) -> str:
    if len(name) >= width:
        return name[: width - 4] + "..."
    return name


def _due_text(task: Task, today: date, theme: Theme) -> str:
    if task.due_date is None:
        return ""
    text = task.due_date.strftime(DATE_FORMAT)
    if task.due_date < today:
        text = theme.overdue(text)
    return text


def _pad(text: str, plain_len: int, width: int) -> str:
    # ANSI codes take no columns; pad by the visible length.
    return text + " " * max(0, width - plain_len)


def _list_header() -> str:
    return " ".join(
        [
            " ",
            f"{'ID':>3} ",
            f"{'Task name':<{NAME_WIDTH}}",
            f"{'Creation date':<14}",
            f"{'Due date':<11}",
            "Note",
        ]
    )


def format_task_list(tasks: Iterable[Task], *, today: date, theme: Theme) -> str:
    lines: list[str] = []
    for task in tasks:
        due_plain = task.due_date.strftime(DATE_FORMAT) if task.due_date else ""
        lines.append(
            " ".join(
                [
                    theme.swatch(task.color),
                    f"{task.id:>3} ",
                    f"{_truncate(task.name):<{NAME_WIDTH}}",
                    f"{task.created_on.strftime(DATE_FORMAT):<14}",
                    _pad(_due_text(task, today, theme), len(due_plain), 11),
                    "✓" if task.note else "",
                ]
            ).rstrip()
        )
    if not lines:
        return "No tasks."
    return "\n".join([_list_header(), *lines])


def wrap_note(note: str, width: int = NOTE_WIDTH) -> list[str]:
    """Word-wrap each note line; existing line breaks are kept."""
    out: list[str] = []
    for raw_line in note.split("\n"):
        current = ""
        for word in raw_line.split(" "):
            if not current:
                current = word
            elif len(current) + len(word) < width:
                current = f"{current} {word}"
            else:
                out.append(current)
                current = word
        out.append(current)
    return out


def format_task_details(task: Task, *, today: date, theme: Theme) -> str:
    def row(label: str, value: str) -> str:
        return f"{label:>{LABEL_WIDTH}} {value}".rstrip()

    color_name = str(task.color).capitalize() if task.color is not None else "None"
    lines = [
        row("ID:", str(task.id)),
        row("Name:", task.name),
        row("Creation date:", task.created_on.strftime(DATE_FORMAT)),
        row("Due date:", _due_text(task, today, theme)),
        row("Color:", theme.fg(color_name, task.color)),
    ]
    label = "Note:"
    for line in wrap_note(task.note or ""):
        lines.append(row(label, line))
        label = ""
    return "\n".join(lines)
