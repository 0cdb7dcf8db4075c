# src/sage_tasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads tasks and theme, then runs the
console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape).

    Every mutation is persisted as it happens; nothing is saved here.
    """
    try:
        kv = getattr(state, "kv", None)
        if kv is not None and hasattr(kv, "close"):
            kv.close()
    except Exception:
        logger.debug("KV store close failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    # INFO chatter would interleave with the task list; console starts at WARNING.
    setup_logging(log_dir=settings.data_dir, console_level=max(console_level, logging.WARNING))

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    theme = state.theme.load()
    logger.info("Theme: %s", theme.value)

    state.manager.start()

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
