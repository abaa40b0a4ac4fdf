# src/todolist/cli/theme.py

"""ANSI color helpers.

- NO_COLOR disables colors completely.
- FORCE_COLOR=1 enables them even when stdout is not a TTY.
- Otherwise the configured mode decides: always / never / auto (TTY only).
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import TextIO

from ..tasks.task_models import Color

RESET = "\033[0m"

_FG_CODES = {
    Color.RED: "31",
    Color.YELLOW: "33",
    Color.GREEN: "32",
    Color.BLUE: "34",
    Color.PURPLE: "35",
}

_BG_CODES = {
    Color.RED: "41",
    Color.YELLOW: "43",
    Color.GREEN: "42",
    Color.BLUE: "44",
    Color.PURPLE: "45",
}


def colors_enabled(mode: str = "auto", stream: TextIO | None = None) -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}:
        return True
    if mode == "always":
        return True
    if mode == "never":
        return False
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _wrap(code: str, text: str) -> str:
    return f"\033[{code}m{text}{RESET}"


@dataclass(frozen=True, slots=True)
class Theme:
    enabled: bool = False

    def fg(self, text: str, color: Color | None) -> str:
        if not self.enabled or color is None:
            return text
        return _wrap(_FG_CODES[color], text)

    def bg(self, text: str, color: Color | None) -> str:
        if not self.enabled or color is None:
            return text
        return _wrap(_BG_CODES[color], text)

    def overdue(self, text: str) -> str:
        return self.fg(text, Color.RED)

    def swatch(self, color: Color | None) -> str:
        """One-cell color block (a plain space when colors are off or unset)."""
        return self.bg(" ", color)
