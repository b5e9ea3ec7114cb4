# src/simple_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.edit_session import EditSession
from ..tasks.task_models import TaskCollection
from .ports import TaskPersistence


@dataclass
class AppState:
    # Settings object (config.Settings or a test namespace).
    settings: Any

    persistence: TaskPersistence

    # Authoritative in-memory collection; replaced, never mutated.
    tasks: TaskCollection = ()
    session: EditSession = field(default_factory=EditSession)
