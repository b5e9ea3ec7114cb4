# tests/test_actions.py

from __future__ import annotations

import pytest

from simple_todo.core import actions
from simple_todo.core.errors import ValidationError
from simple_todo.core.state import AppState
from simple_todo.storage.gateway import PersistenceGateway
from simple_todo.tasks import task_store
from simple_todo.tasks.edit_session import SubmitOutcome

from .fakes import FailingStorage, MemoryStorage


def persisted(storage: MemoryStorage):
    return task_store.load(storage.items.get("tasks"))


def test_add_then_remove_keeps_order_and_persists(state: AppState, storage: MemoryStorage) -> None:
    a = actions.submit_input(state, "A").task
    b = actions.submit_input(state, "B").task
    assert [t.text for t in state.tasks] == ["A", "B"]
    assert persisted(storage) == state.tasks

    assert actions.delete_task(state, a.id) is True
    assert [t.id for t in state.tasks] == [b.id]
    assert persisted(storage) == state.tasks


def test_every_mutation_writes_full_collection(state: AppState, storage: MemoryStorage) -> None:
    task = actions.submit_input(state, "Buy milk").task
    actions.toggle_task(state, task.id)
    actions.start_edit(state, task.id)
    actions.submit_input(state, "Buy oat milk")
    actions.delete_task(state, task.id)

    assert len(storage.writes) == 4
    assert storage.items["tasks"] == "[]"


def test_blank_input_raises_before_any_write(state: AppState, storage: MemoryStorage) -> None:
    with pytest.raises(ValidationError):
        actions.submit_input(state, "   ")
    assert state.tasks == ()
    assert storage.writes == []


def test_edit_flow_through_session(state: AppState) -> None:
    task = actions.submit_input(state, "Draft").task
    assert actions.start_edit(state, task.id) is True
    assert state.session.input_text == "Draft"

    result = actions.submit_input(state, "Final")
    assert result.outcome is SubmitOutcome.EDITED
    assert state.tasks[0].text == "Final"
    assert state.tasks[0].id == task.id
    assert not state.session.active


def test_stale_ids_are_silent_noops(state: AppState, storage: MemoryStorage) -> None:
    task = actions.submit_input(state, "A").task
    assert actions.delete_task(state, task.id) is True
    writes = len(storage.writes)

    assert actions.delete_task(state, task.id) is False
    assert actions.toggle_task(state, task.id) is False
    assert actions.start_edit(state, task.id) is False
    assert len(state.tasks) == 0
    assert len(storage.writes) == writes


def test_committing_edit_of_deleted_task_changes_nothing(state: AppState, storage: MemoryStorage) -> None:
    a = actions.submit_input(state, "A").task
    actions.submit_input(state, "B")
    actions.start_edit(state, a.id)
    actions.delete_task(state, a.id)
    writes = len(storage.writes)

    result = actions.submit_input(state, "A2")
    assert result.outcome is SubmitOutcome.STALE
    assert [t.text for t in state.tasks] == ["B"]
    assert len(storage.writes) == writes
    assert not state.session.active


def test_cancel_edit(state: AppState) -> None:
    task = actions.submit_input(state, "A").task
    actions.start_edit(state, task.id)
    actions.cancel_edit(state)
    assert not state.session.active
    assert state.session.input_text == ""


def test_save_failure_keeps_in_memory_change(settings) -> None:
    gw = PersistenceGateway(FailingStorage(), background=False)
    state = AppState(settings=settings, persistence=gw)

    task = actions.submit_input(state, "A").task
    assert state.tasks == (task,)
    assert gw.failed_writes == 1

    assert actions.toggle_task(state, task.id) is True
    assert state.tasks[0].is_completed is True
