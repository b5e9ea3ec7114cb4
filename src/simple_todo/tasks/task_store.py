# src/simple_todo/tasks/task_store.py

"""
Task store.

Pure operations over an immutable TaskCollection:
- load / serialize the persisted JSON form,
- add / edit / toggle / remove, each returning a new collection.

Nothing here touches storage or UI state. Given the same collection and
inputs every operation is deterministic, except id generation on add
(the clock is injectable for tests).
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from ..core.errors import NotFoundError, ValidationError
from .task_models import Task, TaskCollection

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

EMPTY_TEXT_MESSAGE = "Task cannot be empty!"


# ---- helpers ----


def _require_text(text: str | None) -> str:
    """Reject blank text; the text itself is kept exactly as typed."""
    if not (text or "").strip():
        raise ValidationError(EMPTY_TEXT_MESSAGE)
    return text


def _index_of(collection: TaskCollection, task_id: str) -> int:
    for i, task in enumerate(collection):
        if task.id == task_id:
            return i
    raise NotFoundError(task_id)


def _record_to_task(raw: Any) -> Task | None:
    if not isinstance(raw, Mapping):
        return None

    tid = raw.get("id")
    if isinstance(tid, bool) or not isinstance(tid, (str, int)):
        return None
    tid = str(tid)
    if not tid:
        return None

    text = raw.get("text")
    if not isinstance(text, str) or not text.strip():
        return None

    done = raw.get("isCompleted", False)
    if not isinstance(done, bool):
        return None

    return Task(id=tid, text=text, is_completed=done)


# ---- public API ----


def new_task_id(collection: TaskCollection, *, clock: Clock = time.time) -> str:
    """
    Creation timestamp in milliseconds, bumped until it is unique
    within the collection.
    """
    taken = {t.id for t in collection}
    stamp = int(clock() * 1000)
    while str(stamp) in taken:
        stamp += 1
    return str(stamp)


def find_task(collection: TaskCollection, task_id: str) -> Task | None:
    for task in collection:
        if task.id == task_id:
            return task
    return None


def load(persisted: str | bytes | None) -> TaskCollection:
    """
    Parse a previously serialized collection.

    Never raises: a missing or unparsable payload yields an empty collection.
    Malformed records and repeated ids are dropped, the rest keep their order.
    """
    if persisted is None:
        return ()

    try:
        data = json.loads(persisted)
    except (TypeError, ValueError):
        logger.exception("Stored tasks are not valid JSON; starting with an empty list.")
        return ()

    if data is None:
        return ()
    if not isinstance(data, list):
        logger.error(
            "Stored tasks have unexpected type %s; starting with an empty list.",
            type(data).__name__,
        )
        return ()

    out: list[Task] = []
    seen: set[str] = set()
    for pos, raw in enumerate(data):
        task = _record_to_task(raw)
        if task is None:
            logger.warning("Skipping malformed task record at position %d: %r", pos, raw)
            continue
        if task.id in seen:
            logger.warning("Skipping task record with duplicate id=%s", task.id)
            continue
        seen.add(task.id)
        out.append(task)

    logger.debug("Loaded %d tasks (%d records stored)", len(out), len(data))
    return tuple(out)


def serialize(collection: TaskCollection) -> str:
    return json.dumps([t.to_record() for t in collection], ensure_ascii=False)


def add(
    collection: TaskCollection,
    text: str,
    *,
    clock: Clock = time.time,
) -> tuple[TaskCollection, Task]:
    text = _require_text(text)
    task = Task(id=new_task_id(collection, clock=clock), text=text, is_completed=False)
    logger.debug("Task added id=%s", task.id)
    return (*collection, task), task


def edit(collection: TaskCollection, task_id: str, new_text: str) -> TaskCollection:
    new_text = _require_text(new_text)
    idx = _index_of(collection, task_id)
    updated = replace(collection[idx], text=new_text)
    logger.debug("Task edited id=%s", task_id)
    return collection[:idx] + (updated,) + collection[idx + 1 :]


def toggle(collection: TaskCollection, task_id: str) -> TaskCollection:
    idx = _index_of(collection, task_id)
    current = collection[idx]
    updated = replace(current, is_completed=not current.is_completed)
    logger.debug("Task toggled id=%s completed=%s", task_id, updated.is_completed)
    return collection[:idx] + (updated,) + collection[idx + 1 :]


def remove(collection: TaskCollection, task_id: str) -> TaskCollection:
    """Drop the task; raises NotFoundError when it is already gone."""
    idx = _index_of(collection, task_id)
    logger.debug("Task removed id=%s", task_id)
    return collection[:idx] + collection[idx + 1 :]
