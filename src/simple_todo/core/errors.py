# src/simple_todo/core/errors.py

"""Error taxonomy shared by the store, the gateway and the UI."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for application errors. None of them is fatal."""


class ValidationError(TodoError, ValueError):
    """User-supplied task text is empty or whitespace-only."""


class NotFoundError(TodoError, LookupError):
    """A mutation targets a task id that is not in the collection."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task not found: {task_id!r}")
        self.task_id = task_id


class PersistenceError(TodoError):
    """Reading from or writing to the key-value storage failed."""
