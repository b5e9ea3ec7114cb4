# src/simple_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Notes:
    - Immutable: the store produces new Task values instead of mutating.
    - The persisted record uses camelCase "isCompleted" for compatibility
      with existing storage.
    """

    id: str
    text: str
    is_completed: bool = False

    def to_record(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "isCompleted": self.is_completed}


TaskCollection = tuple[Task, ...]
