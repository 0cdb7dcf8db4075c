# src/sage_tasks/tasks/task_manager.py

from __future__ import annotations

"""
Task manager.

Glue between the event sources (console commands, tests) and the core:
- routes each user action to exactly one TaskStore / FilterController call,
- re-renders after every state change (both components notify us),
- turns recoverable errors into inline messages on the renderer.
"""

import logging

from ..core.errors import ConfirmationPendingError, ValidationError
from ..core.ports import AsyncConfirmPrompt, Renderer
from .filter_controller import FilterController
from .task_models import Task, TaskFilter
from .task_store import TaskStore
from .task_view import TaskView, derive_view

logger = logging.getLogger(__name__)


class TaskManager:
    def __init__(self, store: TaskStore, filters: FilterController, renderer: Renderer) -> None:
        self.store = store
        self.filters = filters
        self.renderer = renderer

        store.subscribe(self.render)
        store.set_warning_sink(self._show_warning)
        filters.subscribe(self.render)

    def start(self) -> int:
        """Load persisted tasks (load() triggers the first render)."""
        try:
            return self.store.load()
        except ConfirmationPendingError as e:
            self.renderer.show_error(str(e))
            return 0

    # ---- view ----

    def view(self) -> TaskView:
        return derive_view(self.store, self.filters.current())

    def render(self) -> None:
        v = self.view()
        self.renderer.update(v.tasks, v.stats, v.empty_message)

    def _show_warning(self, message: str) -> None:
        logger.warning("User warning: %s", message)
        self.renderer.show_error(message)

    # ---- actions ----

    def add_task(self, text: str) -> Task | None:
        # Clear first: a failed save inside add() must stay visible.
        self.renderer.show_error(None)
        try:
            return self.store.add(text)
        except ValidationError as e:
            logger.debug("Add rejected reason=%s", e.reason.value)
            self.renderer.show_error(e.message)
            return None
        except ConfirmationPendingError as e:
            self.renderer.show_error(str(e))
            return None

    def toggle_task(self, task_id: int) -> bool:
        try:
            return self.store.toggle(task_id)
        except ConfirmationPendingError as e:
            self.renderer.show_error(str(e))
            return False

    def delete_task(self, task_id: int) -> bool:
        try:
            return self.store.delete(task_id)
        except ConfirmationPendingError as e:
            self.renderer.show_error(str(e))
            return False

    def clear_completed(self) -> int:
        try:
            return self.store.clear_completed()
        except ConfirmationPendingError as e:
            self.renderer.show_error(str(e))
            return 0

    async def clear_completed_async(self, prompt: AsyncConfirmPrompt) -> int:
        """
        Clear-completed for callers whose prompt is awaitable.

        The store stays locked between the count and the deletion, so other
        handlers running while we await the answer cannot mutate it.
        """
        try:
            request = self.store.begin_clear_completed()
        except ConfirmationPendingError as e:
            self.renderer.show_error(str(e))
            return 0
        if request is None:
            return 0

        try:
            confirmed = bool(await prompt.ask(request.message))
        except BaseException:
            self.store.finish_clear_completed(request, False)
            raise
        return self.store.finish_clear_completed(request, confirmed)

    def set_filter(self, value: TaskFilter | str) -> TaskFilter | None:
        try:
            return self.filters.set_filter(value)
        except ValidationError as e:
            self.renderer.show_error(e.message)
            return None
