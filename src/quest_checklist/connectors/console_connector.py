# src/quest_checklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..cli.commands import render_tasks
from ..core.state import AppState

logger = logging.getLogger(__name__)


def handle_line(state: AppState, line: str) -> str | None:
    """
    Process one console line. Returns the text to print, or None for nothing.

    Lines without a leading slash are added as tasks in the default category.
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(state, line)
        if reply is not None:
            return reply
        if state.manager.add_task(line):
            return f"Task added.\n{render_tasks(state)}"
        return "Title is empty; nothing added."
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."


def run_console_loop(state: AppState, *, read: Callable[[str], str] = input) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.manager.tasks))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "quest-checklist"))

    print(f"[{app_name}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_tasks(state))

    while True:
        try:
            user_input = read("\n>>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
