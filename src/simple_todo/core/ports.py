# src/simple_todo/core/ports.py

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the storage backend swappable and makes testing easier.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_models import TaskCollection


class KeyValueStorage(Protocol):
    """
    Device-local key-value storage service.

    Values are opaque strings. get_item returns None for a missing key;
    any other failure is raised to the caller.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class TaskPersistence(Protocol):
    """What the actions layer needs from the persistence gateway."""

    def load(self) -> str | None: ...
    def save(self, collection: TaskCollection) -> None: ...
    def flush(self) -> None: ...
    def shutdown(self) -> None: ...
