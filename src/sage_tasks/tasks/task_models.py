# src/sage_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from ..core.errors import ValidationError, ValidationReason


class TaskFilter(StrEnum):
    """
    View selector.

    Process-wide, defaults to ALL and is never persisted.
    """

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: TaskFilter | str) -> TaskFilter:
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().lower())
            except ValueError:
                pass
        raise ValidationError(
            ValidationReason.INVALID_FILTER,
            f"Unknown filter: {raw!r}. Use one of: {', '.join(f.value for f in cls)}.",
        )

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.PENDING:
            return not task.completed
        if self is TaskFilter.COMPLETED:
            return task.completed
        return True


def utc_timestamp(ts: float) -> str:
    """ISO-8601 UTC with milliseconds and a Z suffix: 2026-10-16T09:30:00.123Z"""
    dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool = False
    created_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Strict decoder for one stored record.

        All four keys are required. Raises KeyError/ValueError/TypeError on
        anything that could not have been written by to_dict(); the caller
        decides how to degrade.
        """
        task_id = raw["id"]
        # bool is an int subclass; reject it explicitly.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise TypeError(f"task id must be an integer, got {task_id!r}")

        text = raw["text"]
        if not isinstance(text, str) or not text.strip():
            raise ValueError(f"task {task_id} has empty or non-string text")

        completed = raw["completed"]
        if not isinstance(completed, bool):
            raise TypeError(f"task {task_id} has non-boolean completed={completed!r}")

        created_at = raw["createdAt"]
        if not isinstance(created_at, str):
            raise TypeError(f"task {task_id} has non-string createdAt")

        return cls(id=task_id, text=text, completed=completed, created_at=created_at)


@dataclass(slots=True, frozen=True)
class TaskStats:
    total: int
    completed: int

    @property
    def pending(self) -> int:
        return self.total - self.completed
