# src/sage_tasks/tasks/filter_controller.py

from __future__ import annotations

import logging
from collections.abc import Callable

from .task_models import Task, TaskFilter

logger = logging.getLogger(__name__)


class FilterController:
    """Holds the active view filter (default: all, never persisted)."""

    def __init__(self, initial: TaskFilter | str = TaskFilter.ALL) -> None:
        self._current = TaskFilter.parse(initial)
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def current(self) -> TaskFilter:
        return self._current

    def set_filter(self, value: TaskFilter | str) -> TaskFilter:
        """Raises ValidationError for anything outside all/pending/completed."""
        new = TaskFilter.parse(value)
        if new is not self._current:
            logger.debug("Filter changed %s -> %s", self._current.value, new.value)
        self._current = new

        for listener in list(self._listeners):
            listener()
        return new

    def predicate(self) -> Callable[[Task], bool]:
        return self._current.matches
