# src/simple_todo/tasks/edit_session.py

"""
Edit-mode selector.

Transient UI state: the text input buffer and, at most, one task id being
edited. Submitting routes to add or edit depending on whether an edit
session is active. Buffer and marker are always cleared together.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import StrEnum

from ..core.errors import NotFoundError
from . import task_store
from .task_models import Task, TaskCollection

logger = logging.getLogger(__name__)


class SubmitOutcome(StrEnum):
    ADDED = "added"
    EDITED = "edited"
    STALE = "stale"  # edit target vanished before commit


@dataclass(slots=True)
class EditSession:
    input_text: str = ""
    editing_task_id: str | None = None

    @property
    def active(self) -> bool:
        return self.editing_task_id is not None

    def clear(self) -> None:
        self.input_text = ""
        self.editing_task_id = None


@dataclass(slots=True, frozen=True)
class SubmitResult:
    collection: TaskCollection
    outcome: SubmitOutcome
    task: Task | None


def begin_edit(session: EditSession, task: Task) -> None:
    """
    Start editing `task`. An already active session is replaced
    without being committed.
    """
    if session.active and session.editing_task_id != task.id:
        logger.info(
            "Edit session for id=%s discarded; now editing id=%s",
            session.editing_task_id,
            task.id,
        )
    session.input_text = task.text
    session.editing_task_id = task.id


def cancel_edit(session: EditSession) -> None:
    if session.active:
        logger.debug("Edit session for id=%s cancelled", session.editing_task_id)
    session.clear()


def submit(
    session: EditSession,
    collection: TaskCollection,
    *,
    clock: task_store.Clock = time.time,
) -> SubmitResult:
    """
    Add the buffer as a new task, or commit it to the task being edited.

    ValidationError propagates and leaves the session as it was.
    """
    if session.editing_task_id is None:
        new_collection, task = task_store.add(collection, session.input_text, clock=clock)
        session.clear()
        return SubmitResult(new_collection, SubmitOutcome.ADDED, task)

    target = session.editing_task_id
    try:
        new_collection = task_store.edit(collection, target, session.input_text)
    except NotFoundError:
        logger.debug("Edit target id=%s no longer exists; dropping edit session", target)
        session.clear()
        return SubmitResult(collection, SubmitOutcome.STALE, None)

    session.clear()
    return SubmitResult(new_collection, SubmitOutcome.EDITED, task_store.find_task(new_collection, target))
