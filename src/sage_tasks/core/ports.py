# src/sage_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
Storage, prompts and render targets stay swappable and tests can use fakes.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Awaitable, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task, TaskStats


class PersistenceStore(Protocol):
    """
    String key-value storage.

    get() returns None for a missing key. set() raises on failure
    (quota, I/O, closed database...).
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class ConfirmPrompt(Protocol):
    """Blocking yes/no question."""
    def ask(self, message: str) -> bool: ...


class AsyncConfirmPrompt(Protocol):
    def ask(self, message: str) -> Awaitable[bool]: ...


class Renderer(Protocol):
    """
    Render target.

    update() is called after every state change; it must be idempotent.
    show_error() sets (or clears, with None) the inline message slot.
    """

    def update(
            self,
            tasks: Sequence[Task],
            stats: TaskStats,
            empty_message: str | None,
    ) -> None: ...

    def show_error(self, message: str | None) -> None: ...
