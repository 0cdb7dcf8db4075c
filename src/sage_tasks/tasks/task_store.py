# src/sage_tasks/tasks/task_store.py

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..core.errors import (
    ConfirmationPendingError,
    PersistenceError,
    ValidationError,
    ValidationReason,
)
from ..core.ports import ConfirmPrompt, PersistenceStore
from .task_models import Task, TaskFilter, TaskStats, utc_timestamp

logger = logging.getLogger(__name__)

TASKS_KEY = "taskManagerTasks"
MAX_TEXT_LENGTH = 200

SAVE_FAILED_MESSAGE = "Unable to save tasks. Please try again."

Listener = Callable[[], None]
WarningSink = Callable[[str], None]


def dump_tasks(tasks: Iterable[Task]) -> str:
    """Encode tasks (display order, newest first) as the stored JSON array."""
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def parse_tasks(raw: str) -> list[Task]:
    """
    Decode the stored JSON array.

    All-or-nothing: any malformed record or a duplicate id makes the whole
    payload unreadable (PersistenceError).
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise PersistenceError(f"stored tasks are not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise PersistenceError(f"stored tasks must be a JSON array, got {type(data).__name__}")

    tasks: list[Task] = []
    seen: set[int] = set()
    for item in data:
        if not isinstance(item, dict):
            raise PersistenceError(f"stored task must be an object, got {type(item).__name__}")
        try:
            task = Task.from_dict(item)
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"invalid stored task: {e}") from e
        if task.id in seen:
            raise PersistenceError(f"duplicate task id {task.id}")
        seen.add(task.id)
        tasks.append(task)
    return tasks


@dataclass(slots=True, frozen=True)
class ClearRequest:
    """Phase one of a clear-completed: what the user is asked to confirm."""

    token: int
    count: int

    @property
    def message(self) -> str:
        return f"Delete {self.count} completed task(s)?"


class TaskStore:
    """
    In-memory task collection backed by a key-value store.

    - the collection is ordered newest-first (add prepends)
    - every mutation runs persist-then-notify
    - persist failures never roll back the in-memory state; they are logged
      and reported through `on_warning`

    Clear-completed is two-phase (begin/finish). While a request is open the
    store refuses other mutations with ConfirmationPendingError, so nothing
    can change between the count shown to the user and the deletion.
    """

    def __init__(
        self,
        kv: PersistenceStore,
        *,
        prompt: ConfirmPrompt | None = None,
        key: str = TASKS_KEY,
        max_length: int = MAX_TEXT_LENGTH,
        on_warning: WarningSink | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._kv = kv
        self._prompt = prompt
        self._key = key
        self._max_length = int(max_length)
        self._on_warning = on_warning
        self._clock = clock

        self._tasks: list[Task] = []
        self._last_id = 0
        self._listeners: list[Listener] = []

        self._pending_clear: ClearRequest | None = None
        self._clear_seq = 0

    # ---- wiring ----

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def set_warning_sink(self, sink: WarningSink | None) -> None:
        self._on_warning = sink

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _warn(self, message: str) -> None:
        if self._on_warning is not None:
            self._on_warning(message)

    def _ensure_unlocked(self) -> None:
        if self._pending_clear is not None:
            raise ConfirmationPendingError(
                "Finish the pending clear-completed confirmation first."
            )

    def _next_id(self) -> int:
        now_ms = int(self._clock() * 1000)
        task_id = max(now_ms, self._last_id + 1)
        self._last_id = task_id
        return task_id

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # ---- queries ----

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def clear_pending(self) -> bool:
        return self._pending_clear is not None

    def get(self, task_id: int) -> Task | None:
        return self._find(task_id)

    def filtered_view(self, task_filter: TaskFilter | str = TaskFilter.ALL) -> list[Task]:
        f = TaskFilter.parse(task_filter)
        return [t for t in self._tasks if f.matches(t)]

    def stats(self) -> TaskStats:
        completed = sum(1 for t in self._tasks if t.completed)
        return TaskStats(total=len(self._tasks), completed=completed)

    # ---- mutations ----

    def add(self, text: str) -> Task:
        self._ensure_unlocked()

        cleaned = (text or "").strip()
        if not cleaned:
            raise ValidationError(ValidationReason.EMPTY, "Please enter a task description")
        if len(cleaned) > self._max_length:
            raise ValidationError(
                ValidationReason.TOO_LONG,
                f"Task description cannot exceed {self._max_length} characters",
            )

        now = self._clock()
        task = Task(
            id=self._next_id(),
            text=cleaned,
            completed=False,
            created_at=utc_timestamp(now),
        )
        self._tasks.insert(0, task)
        logger.debug("Task added id=%s len=%s", task.id, len(cleaned))

        self.persist()
        self._notify()
        return task

    def toggle(self, task_id: int) -> bool:
        self._ensure_unlocked()

        task = self._find(task_id)
        if task is None:
            logger.debug("Toggle ignored: no task id=%s", task_id)
            return False

        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)

        self.persist()
        self._notify()
        return True

    def delete(self, task_id: int) -> bool:
        self._ensure_unlocked()

        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        if len(self._tasks) == before:
            logger.debug("Delete ignored: no task id=%s", task_id)
            return False

        logger.debug("Task deleted id=%s", task_id)
        self.persist()
        self._notify()
        return True

    def begin_clear_completed(self) -> ClearRequest | None:
        """
        Phase one: count completed tasks and lock the store.

        Returns None (and stays unlocked) when there is nothing to clear.
        """
        self._ensure_unlocked()

        count = self.stats().completed
        if count == 0:
            return None

        self._clear_seq += 1
        request = ClearRequest(token=self._clear_seq, count=count)
        self._pending_clear = request
        return request

    def finish_clear_completed(self, request: ClearRequest, confirmed: bool) -> int:
        """
        Phase two: release the lock and, if confirmed, drop completed tasks.

        Returns the number of removed tasks (0 when rejected).
        """
        if self._pending_clear is None or self._pending_clear != request:
            raise ConfirmationPendingError("No matching clear-completed request is open.")

        self._pending_clear = None
        if not confirmed:
            logger.debug("Clear completed rejected count=%s", request.count)
            return 0

        self._tasks = [t for t in self._tasks if not t.completed]
        logger.info("Cleared completed tasks count=%s", request.count)

        self.persist()
        self._notify()
        return request.count

    def clear_completed(self) -> int:
        request = self.begin_clear_completed()
        if request is None:
            return 0

        if self._prompt is None:
            logger.warning("Clear completed rejected: no confirmation prompt configured.")
            return self.finish_clear_completed(request, False)

        try:
            confirmed = bool(self._prompt.ask(request.message))
        except BaseException:
            self.finish_clear_completed(request, False)
            raise
        return self.finish_clear_completed(request, confirmed)

    # ---- persistence ----

    def persist(self) -> bool:
        try:
            self._kv.set(self._key, dump_tasks(self._tasks))
        except Exception:
            logger.exception("Failed to save tasks key=%s total=%s", self._key, len(self._tasks))
            self._warn(SAVE_FAILED_MESSAGE)
            return False
        return True

    def load(self) -> int:
        """
        Rehydrate the collection from the store.

        Missing key, unreadable content or a store read failure all degrade
        to an empty collection. Refused while a clear-completed
        confirmation is open.
        """
        self._ensure_unlocked()

        tasks: list[Task] = []
        try:
            raw = self._kv.get(self._key)
            if raw:
                tasks = parse_tasks(raw)
        except PersistenceError as e:
            logger.warning("Stored tasks unreadable key=%s (%s); starting empty.", self._key, e)
            tasks = []
        except Exception:
            logger.exception("Failed to load tasks key=%s; starting empty.", self._key)
            tasks = []

        self._tasks = tasks
        self._last_id = max([self._last_id, *(t.id for t in tasks)])
        logger.info("TaskStore loaded key=%s total=%s", self._key, len(tasks))

        self._notify()
        return len(tasks)
