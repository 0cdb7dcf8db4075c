# src/sage_tasks/connectors/console_renderer.py

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from ..tasks.task_models import Task, TaskStats

logger = logging.getLogger(__name__)


class ConsoleRenderer:
    """
    Renderer port for a terminal.

    Items are numbered by their 1-based position in the current view;
    console commands address tasks by that number.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out or sys.stdout

    def _print(self, line: str = "") -> None:
        print(line, file=self._out, flush=True)

    def update(
        self,
        tasks: Sequence[Task],
        stats: TaskStats,
        empty_message: str | None,
    ) -> None:
        self._print()
        if empty_message is not None:
            self._print(f"  {empty_message}")
        else:
            width = len(str(len(tasks)))
            for pos, task in enumerate(tasks, start=1):
                mark = "x" if task.completed else " "
                self._print(f"  {pos:>{width}}. [{mark}] {task.text}")
        self._print(f"  -- total: {stats.total}  completed: {stats.completed}")

    def show_error(self, message: str | None) -> None:
        if message:
            self._print(f"  ! {message}")


class ConsolePrompt:
    """ConfirmPrompt port: y/N question on stdin."""

    def __init__(self, input_fn=input) -> None:
        self._input = input_fn

    def ask(self, message: str) -> bool:
        try:
            answer = self._input(f"{message} [y/N]: ")
        except EOFError:
            logger.debug("Prompt EOF; treating as 'no'.")
            return False
        return answer.strip().lower() in ("y", "yes")


class AutoConfirmPrompt:
    """ConfirmPrompt that always agrees (SAGE_CONFIRM_CLEAR=false)."""

    def ask(self, message: str) -> bool:
        logger.debug("Auto-confirmed: %s", message)
        return True
