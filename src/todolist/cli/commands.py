# src/todolist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from ..core.engine import CommandEngine
from ..core.errors import InvalidInput
from ..tasks.task_models import parse_color, parse_due, parse_note
from .render import format_task_details, format_task_list
from .theme import Theme

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandContext:
    engine: CommandEngine
    theme: Theme = field(default_factory=Theme)
    today: Callable[[], date] = date.today


CommandHandler = Callable[[CommandContext, list[str]], str]


class CommandRegistry:
    """Verb registry used by the CLI entry point (add, list, undo, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, ctx: CommandContext, argv: list[str]) -> str:
        """
        Dispatch ["verb", "arg", ...] to its handler and return the text to print.
        Raises TodoError subclasses for anything the user should see as an error.
        """
        if not argv:
            raise InvalidInput("No command given. Use 'help' to learn how to use this program")

        name = argv[0].lower()
        handler = self._handlers.get(name)
        if handler is None:
            raise InvalidInput(f"Unknown command given: {argv[0]}. Use 'help' to list available commands")

        logger.debug("Dispatching %s args=%s", name, len(argv) - 1)
        return handler(ctx, argv[1:])


registry = CommandRegistry()


# ---- argument helpers ----


def _parse_task_id(args: list[str]) -> int:
    if not args:
        raise InvalidInput("Expected additional argument specifying the task id")
    raw = args[0].strip().rstrip(".")
    try:
        return int(raw)
    except ValueError:
        raise InvalidInput(f"Invalid task id provided: {args[0]}") from None


def _existing_task_id(ctx: CommandContext, args: list[str]) -> int:
    """Parse the id and make sure the task exists before the other arguments are read."""
    task_id = _parse_task_id(args)
    ctx.engine.store.get(task_id)
    return task_id


def _require(args: list[str], index: int, what: str) -> str:
    if len(args) <= index:
        raise InvalidInput(f"Expected additional argument specifying the {what}")
    return args[index]


def _no_more_args(args: list[str], expected: int) -> None:
    if len(args) > expected:
        raise InvalidInput(f"Too many arguments provided: {' '.join(args[expected:])}")


def _join(args: list[str]) -> str:
    return " ".join(args).strip()


def _note_text(args: list[str]) -> str:
    # Kept as typed; only an all-blank note is rejected.
    text = " ".join(args)
    if not text.strip():
        raise InvalidInput("Expected additional argument specifying the note text")
    return text


# ---- handlers ----


def cmd_add(ctx: CommandContext, args: list[str]) -> str:
    return ctx.engine.add(_join(args)).message


def cmd_due(ctx: CommandContext, args: list[str]) -> str:
    task_id = _existing_task_id(ctx, args)
    value = parse_due(_require(args, 1, "date"))
    _no_more_args(args, 2)
    return ctx.engine.due(task_id, value).message


def cmd_note(ctx: CommandContext, args: list[str]) -> str:
    task_id = _existing_task_id(ctx, args)
    return ctx.engine.note(task_id, parse_note(_note_text(args[1:]))).message


def cmd_color(ctx: CommandContext, args: list[str]) -> str:
    task_id = _existing_task_id(ctx, args)
    value = parse_color(_require(args, 1, "color"))
    _no_more_args(args, 2)
    result = ctx.engine.color(task_id, value)
    task = result.tasks[0]
    if task.color is None:
        return result.message
    return f"Color for task '{task.name}' was set to {ctx.theme.fg(str(task.color), task.color)}"


def cmd_rename(ctx: CommandContext, args: list[str]) -> str:
    task_id = _existing_task_id(ctx, args)
    return ctx.engine.rename(task_id, _join(args[1:])).message


def cmd_remove(ctx: CommandContext, args: list[str]) -> str:
    task_id = _existing_task_id(ctx, args)
    _no_more_args(args, 1)
    return ctx.engine.remove(task_id).message


def cmd_list(ctx: CommandContext, args: list[str]) -> str:
    _no_more_args(args, 0)
    result = ctx.engine.list()
    return format_task_list(result.tasks, today=ctx.today(), theme=ctx.theme)


def cmd_show(ctx: CommandContext, args: list[str]) -> str:
    task_id = _existing_task_id(ctx, args)
    _no_more_args(args, 1)
    result = ctx.engine.show(task_id)
    return format_task_details(result.tasks[0], today=ctx.today(), theme=ctx.theme)


def cmd_sort(ctx: CommandContext, args: list[str]) -> str:
    _no_more_args(args, 0)
    return ctx.engine.sort().message


def cmd_undo(ctx: CommandContext, args: list[str]) -> str:
    _no_more_args(args, 0)
    return ctx.engine.undo().message


def cmd_info(ctx: CommandContext, args: list[str]) -> str:
    _no_more_args(args, 0)
    return ctx.engine.info().message


def cmd_help(ctx: CommandContext, args: list[str]) -> str:
    _no_more_args(args, 0)
    return ctx.engine.help().message


registry.register("add", cmd_add)
registry.register("due", cmd_due)
registry.register("note", cmd_note)
registry.register("color", cmd_color, aliases=["colour"])
registry.register("rename", cmd_rename)
registry.register("remove", cmd_remove, aliases=["rm"])
registry.register("list", cmd_list, aliases=["ls"])
registry.register("show", cmd_show)
registry.register("sort", cmd_sort)
registry.register("undo", cmd_undo)
registry.register("info", cmd_info, aliases=["--version"])
registry.register("help", cmd_help, aliases=["-h", "--help"])
