# src/taskshelf/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu for the
task list or the library catalog:

    taskshelf            # asks which app to run
    taskshelf tasks
    taskshelf library
"""

from __future__ import annotations

import asyncio
import logging
import sys

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from . import library_menu, task_menu
from .bootstrap import create_initial_state
from .commands import MenuRegistry
from .prompts import InputCollector

logger = logging.getLogger(__name__)

APPS: dict[str, MenuRegistry] = {
    "1": task_menu.menu,
    "tasks": task_menu.menu,
    "todo": task_menu.menu,
    "2": library_menu.menu,
    "library": library_menu.menu,
}


def _pick_menu(argv: list[str], io: InputCollector) -> MenuRegistry | None:
    if argv:
        return APPS.get(argv[0].strip().lower())
    return APPS.get(io.prompt("Try the application --> (1) Todo App (2) Library App: ").lower())


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    argv = sys.argv[1:] if argv is None else argv

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(
        log_dir=settings.data_dir if settings.log_to_file else None,
        console_level=console_level,
    )

    io = InputCollector()
    try:
        menu = _pick_menu(argv, io)
    except (EOFError, KeyboardInterrupt):
        return 0
    if menu is None:
        io.say("Invalid, exit.")
        return 2

    state = create_initial_state(settings=settings)
    data_file = settings.tasks_path if menu is task_menu.menu else settings.library_path
    logger.info("Starting %s (%s)...", settings.app_name, menu.title)
    io.say(f"Welcome to {menu.title}")
    io.say(f"Data file: {data_file}")

    asyncio.run(run_console_loop(state, menu, io))
    io.say("Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
