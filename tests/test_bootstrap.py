# tests/test_bootstrap.py

from __future__ import annotations

import json

from simple_todo.cli.bootstrap import create_initial_state
from simple_todo.core import actions
from simple_todo.tasks.task_models import Task

from .fakes import FailingStorage, MemoryStorage


def test_seeds_tasks_from_storage(settings) -> None:
    storage = MemoryStorage(
        items={"tasks": json.dumps([{"id": "1", "text": "Stored", "isCompleted": True}])}
    )
    state = create_initial_state(settings=settings, storage=storage)
    assert state.tasks == (Task(id="1", text="Stored", is_completed=True),)
    assert not state.session.active


def test_first_run_and_corrupt_payload_start_empty(settings) -> None:
    assert create_initial_state(settings=settings, storage=MemoryStorage()).tasks == ()

    corrupt = MemoryStorage(items={"tasks": "{oops"})
    assert create_initial_state(settings=settings, storage=corrupt).tasks == ()


def test_unreadable_storage_still_starts(settings) -> None:
    state = create_initial_state(settings=settings, storage=FailingStorage())
    assert state.tasks == ()
    # still usable from memory
    actions.submit_input(state, "offline task")
    assert [t.text for t in state.tasks] == ["offline task"]


def test_file_storage_survives_restart(settings) -> None:
    state = create_initial_state(settings=settings)
    actions.submit_input(state, "A")
    actions.submit_input(state, "B")
    actions.toggle_task(state, state.tasks[1].id)
    state.persistence.shutdown()

    assert settings.storage_path.exists()
    again = create_initial_state(settings=settings)
    assert again.tasks == state.tasks
