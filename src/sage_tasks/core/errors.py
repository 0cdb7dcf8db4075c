# src/sage_tasks/core/errors.py

from __future__ import annotations

from enum import StrEnum


class ValidationReason(StrEnum):
    EMPTY = "empty"
    TOO_LONG = "tooLong"
    INVALID_FILTER = "invalidFilter"


class TaskError(Exception):
    """Base class for recoverable task-list errors."""


class ValidationError(TaskError):
    """
    Rejected user input.

    `message` is the user-facing text shown inline; the operation was aborted
    and state is unchanged.
    """

    def __init__(self, reason: ValidationReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


class PersistenceError(TaskError):
    """Key-value store read/write failure or unreadable stored content."""


class ConfirmationPendingError(TaskError):
    """A mutation was attempted while a clear-completed confirmation is open."""
