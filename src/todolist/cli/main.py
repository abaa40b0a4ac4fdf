# src/todolist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the engine, runs exactly one command and exits.

Exit codes: 0 success, 1 user error, 2 persistence/internal failure.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_engine
from ..config import Settings, get_settings
from ..core.errors import EXIT_INTERNAL_ERROR, EXIT_OK, TodoError
from ..logging_setup import setup_logging
from .commands import CommandContext, registry
from .theme import Theme, colors_enabled

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(
        log_dir=settings.data_dir if settings.log_to_file else None,
        console_level=console_level,
    )

    try:
        engine = create_engine(settings=settings)
        ctx = CommandContext(
            engine=engine,
            theme=Theme(enabled=colors_enabled(settings.color_mode, sys.stdout)),
        )
        output = registry.handle(ctx, argv)
    except TodoError as e:
        logger.debug("Command failed: %s", e, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except Exception:
        logger.exception("Unexpected failure")
        print("Error: unexpected internal failure (see log for details)", file=sys.stderr)
        return EXIT_INTERNAL_ERROR

    if output:
        print(output)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
