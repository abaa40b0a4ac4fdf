# src/todolist/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum, StrEnum

from ..core.errors import InvalidInput

CLEAR_LITERAL = "clear"
DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ClearField(Enum):
    """Tagged "clear this optional field" value produced at the parsing boundary."""

    CLEAR = CLEAR_LITERAL

    def __repr__(self) -> str:
        return "CLEAR"


CLEAR = ClearField.CLEAR


class Color(StrEnum):
    """
    Task color label.

    Declaration order is the rainbow order used by sort (red first).
    """

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"

    @property
    def rank(self) -> int:
        return _COLOR_RANK[self]

    @classmethod
    def from_db(cls, raw: str | None) -> Color | None:
        if raw is None:
            return None
        try:
            return cls(str(raw).lower())
        except ValueError:
            raise ValueError(f"unknown color {raw!r}") from None


_COLOR_RANK = {c: i for i, c in enumerate(Color)}


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    name: str
    created_on: date

    due_date: date | None = None
    note: str | None = None
    color: Color | None = None


# ---- parsing helpers (CLI text -> typed values) ----


def parse_date(text: str) -> date:
    """Parse a strict YYYY-MM-DD calendar date."""
    raw = (text or "").strip()
    if not _DATE_RE.match(raw):
        raise InvalidInput("Incorrectly formatted date (should be of YYYY-MM-DD format)")
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        raise InvalidInput(f"Not a valid calendar date: {raw}") from None


def parse_due(text: str) -> date | ClearField:
    if text.strip().lower() == CLEAR_LITERAL:
        return CLEAR
    return parse_date(text)


def parse_color(text: str) -> Color | ClearField:
    raw = (text or "").strip().lower()
    if raw == CLEAR_LITERAL:
        return CLEAR
    try:
        return Color(raw)
    except ValueError:
        raise InvalidInput(f"The requested color is not available: {text}") from None


def parse_note(text: str) -> str | ClearField:
    if text.strip().lower() == CLEAR_LITERAL:
        return CLEAR
    return text
