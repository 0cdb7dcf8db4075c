# src/sage_tasks/tasks/task_view.py

from __future__ import annotations

from dataclasses import dataclass

from .task_models import Task, TaskFilter, TaskStats
from .task_store import TaskStore

EMPTY_COLLECTION_MESSAGE = "No tasks yet. Add one to get started!"

EMPTY_FILTER_MESSAGES: dict[TaskFilter, str] = {
    TaskFilter.PENDING: "No pending tasks",
    TaskFilter.COMPLETED: "No completed tasks",
    TaskFilter.ALL: "No tasks",
}


@dataclass(slots=True, frozen=True)
class TaskView:
    """Everything a renderer needs for one frame."""

    tasks: tuple[Task, ...]
    stats: TaskStats
    empty_message: str | None
    filter: TaskFilter


def derive_view(store: TaskStore, task_filter: TaskFilter | str) -> TaskView:
    """
    Pure projection of store state through a filter.

    Stats are always computed over the full collection.
    """
    f = TaskFilter.parse(task_filter)
    tasks = tuple(store.filtered_view(f))
    stats = store.stats()

    empty_message: str | None = None
    if stats.total == 0:
        empty_message = EMPTY_COLLECTION_MESSAGE
    elif not tasks:
        empty_message = EMPTY_FILTER_MESSAGES[f]

    return TaskView(tasks=tasks, stats=stats, empty_message=empty_message, filter=f)
