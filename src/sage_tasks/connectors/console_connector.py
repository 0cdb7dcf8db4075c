# src/sage_tasks/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def handle_line(state: AppState, line: str) -> str | None:
    """
    One REPL step.

    Slash commands go to the registry; any other text is a new task
    (the submit action). Returns the reply to print, if any.
    """
    line = line.strip()
    if not line:
        return None

    reply = command_registry.handle(state, line)
    if reply is not None:
        return reply

    state.manager.add_task(line)
    return None


def run_console_loop(state: AppState, input_fn: Callable[[str], str] = input) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "sage"))
    print(f"[{app_name}] Type a task to add it. Use /help for commands, /exit to quit.")

    while True:
        try:
            user_input = input_fn("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            print(reply)

    logger.info("Console connector finished.")
