# src/simple_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the storage backend and persistence gateway into AppState,
- seeds the task collection from storage (once).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import PersistenceError
from ..core.ports import KeyValueStorage
from ..core.state import AppState
from ..storage.gateway import PersistenceGateway
from ..storage.kv_store import JsonFileStorage
from ..tasks import task_store
from ..tasks.task_models import TaskCollection

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def load_initial_tasks(gateway: PersistenceGateway) -> TaskCollection:
    """Read the stored collection; storage errors fall back to an empty list."""
    try:
        persisted = gateway.load()
    except PersistenceError:
        logger.exception("Error loading tasks; starting with an empty list.")
        return ()
    tasks = task_store.load(persisted)
    logger.info("Loaded %d tasks (key=%s)", len(tasks), gateway.key)
    return tasks


def create_initial_state(*, settings=None, storage: KeyValueStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and storage injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if storage is None:
        _ensure_local_dirs(settings)
        storage = JsonFileStorage(settings.storage_path)

    gateway = PersistenceGateway(
        storage,
        key=settings.storage_key,
        background=settings.background_saves,
    )

    return AppState(
        settings=settings,
        persistence=gateway,
        tasks=load_initial_tasks(gateway),
    )
