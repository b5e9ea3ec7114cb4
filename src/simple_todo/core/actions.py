# src/simple_todo/core/actions.py

"""
UI event handlers.

Each handler applies one task_store operation to state.tasks, swaps in the
resulting collection and hands it to the persistence gateway (fire-and-forget).
A failed save never rolls the in-memory change back.

ValidationError is raised before anything changes; NotFoundError is
swallowed (stale reference -> no-op) and reported as a False return.
"""

from __future__ import annotations

import logging

from ..tasks import edit_session, task_store
from ..tasks.edit_session import SubmitOutcome, SubmitResult
from ..tasks.task_models import TaskCollection
from .errors import NotFoundError
from .state import AppState

logger = logging.getLogger(__name__)


def _commit(state: AppState, new_tasks: TaskCollection) -> None:
    state.tasks = new_tasks
    state.persistence.save(new_tasks)


def submit_input(state: AppState, text: str) -> SubmitResult:
    """Add `text` as a task, or commit it to the task being edited."""
    state.session.input_text = text
    result = edit_session.submit(state.session, state.tasks)
    if result.outcome is not SubmitOutcome.STALE:
        _commit(state, result.collection)
        logger.info("Task %s id=%s", result.outcome.value, result.task.id if result.task else None)
    return result


def start_edit(state: AppState, task_id: str) -> bool:
    task = task_store.find_task(state.tasks, task_id)
    if task is None:
        logger.debug("start_edit: id=%s not found", task_id)
        return False
    edit_session.begin_edit(state.session, task)
    return True


def cancel_edit(state: AppState) -> None:
    edit_session.cancel_edit(state.session)


def toggle_task(state: AppState, task_id: str) -> bool:
    try:
        new_tasks = task_store.toggle(state.tasks, task_id)
    except NotFoundError:
        logger.debug("toggle_task: id=%s not found", task_id)
        return False
    _commit(state, new_tasks)
    return True


def delete_task(state: AppState, task_id: str) -> bool:
    """
    Remove the task. An active edit session pointing at it is left alone;
    committing it later is a no-op.
    """
    try:
        new_tasks = task_store.remove(state.tasks, task_id)
    except NotFoundError:
        logger.debug("delete_task: id=%s not found", task_id)
        return False
    _commit(state, new_tasks)
    logger.info("Task removed id=%s", task_id)
    return True
