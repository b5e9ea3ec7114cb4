# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from simple_todo.core.state import AppState
from simple_todo.storage.gateway import PersistenceGateway

from .fakes import MemoryStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="Simple To-Do List",
        log_level="INFO",
        data_dir=tmp_path,
        storage_path=tmp_path / "storage.json",
        storage_key="tasks",
        background_saves=False,
        color=False,
    )


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def state(settings: SimpleNamespace, storage: MemoryStorage) -> AppState:
    """AppState with a synchronous gateway over in-memory storage."""
    return AppState(
        settings=settings,
        persistence=PersistenceGateway(storage, key=settings.storage_key, background=False),
    )
