# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sage_tasks.core.errors import PersistenceError
from sage_tasks.tasks.task_models import Task, TaskStats


class FakeKVStore:
    """
    In-memory PersistenceStore.

    - `fail_writes` / `fail_reads` simulate quota or I/O problems
    - `writes` counts successful set() calls
    """

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.fail_writes = False
        self.fail_reads = False
        self.writes = 0

    def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise PersistenceError("simulated read failure")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise PersistenceError("simulated quota exceeded")
        self.data[key] = value
        self.writes += 1


class FakePrompt:
    """Scripted ConfirmPrompt: answers `answer` and records every question."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.asked: list[str] = []

    def ask(self, message: str) -> bool:
        self.asked.append(message)
        return self.answer


class FakeClock:
    """Frozen time source; advance() moves it forward in seconds."""

    def __init__(self, now: float = 1_760_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass(slots=True)
class RenderCall:
    tasks: list[Task]
    stats: TaskStats
    empty_message: str | None


@dataclass(slots=True)
class FakeRenderer:
    """Renderer that records frames and inline messages."""

    frames: list[RenderCall] = field(default_factory=list)
    errors: list[str | None] = field(default_factory=list)

    def update(
        self,
        tasks: Sequence[Task],
        stats: TaskStats,
        empty_message: str | None,
    ) -> None:
        self.frames.append(RenderCall(list(tasks), stats, empty_message))

    def show_error(self, message: str | None) -> None:
        self.errors.append(message)

    @property
    def last(self) -> RenderCall:
        return self.frames[-1]

    @property
    def last_error(self) -> str | None:
        return self.errors[-1] if self.errors else None
