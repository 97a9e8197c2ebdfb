# tests/test_task_dialog.py

from __future__ import annotations

from dataclasses import replace

import pytest

from tasklist.core.errors import DialogStateError, NotFoundError, ValidationError
from tasklist.tasks.task_dialog import (
    DELETE_CONFIRM_MESSAGE,
    DialogMode,
    TaskDialog,
    delete_with_confirmation,
    request_delete,
)
from tasklist.tasks.task_models import TaskFields, TaskStatus
from tasklist.tasks.task_store import TaskStore

from .fakes import FakePrompt


def test_create_flow_closes_on_success(store: TaskStore) -> None:
    dialog = TaskDialog(store)
    fields = dialog.open_create()
    assert dialog.mode is DialogMode.CREATING
    assert (dialog.title, dialog.ok_text) == ("Add Item", "Add")

    task = dialog.submit(replace(fields, title="a", description="b"))

    assert store.get(task.id) == task
    assert dialog.mode is DialogMode.CLOSED
    assert dialog.editing_id is None


def test_failed_submit_keeps_dialog_open(store: TaskStore) -> None:
    dialog = TaskDialog(store)
    dialog.open_create()

    with pytest.raises(ValidationError):
        dialog.submit(TaskFields(title="", description="b"))

    assert dialog.mode is DialogMode.CREATING
    assert len(store) == 0

    dialog.submit(TaskFields(title="a", description="b"))
    assert len(store) == 1


def test_edit_flow_prefills_and_updates(store: TaskStore) -> None:
    t = store.create(TaskFields(title="a", description="b", tags="x,y", status="WORKING"))
    dialog = TaskDialog(store)

    prefilled = dialog.open_edit(t.id)

    assert dialog.mode is DialogMode.EDITING
    assert dialog.editing_id == t.id
    assert (dialog.title, dialog.ok_text) == ("Edit Item", "Save")
    assert prefilled.title == "a" and prefilled.tags == ["x", "y"]
    assert prefilled.status is TaskStatus.WORKING

    updated = dialog.submit(replace(prefilled, title="A"))

    assert updated.id == t.id
    assert updated.title == "A"
    assert updated.tags == ("x", "y")
    assert updated.status is TaskStatus.WORKING
    assert not dialog.is_open


def test_open_edit_unknown_id(store: TaskStore) -> None:
    dialog = TaskDialog(store)
    with pytest.raises(NotFoundError):
        dialog.open_edit(7)
    assert dialog.mode is DialogMode.CLOSED


def test_submit_while_closed(store: TaskStore) -> None:
    with pytest.raises(DialogStateError):
        TaskDialog(store).submit(TaskFields(title="a", description="b"))


def test_submit_editing_without_id(store: TaskStore) -> None:
    dialog = TaskDialog(store)
    dialog.mode = DialogMode.EDITING

    with pytest.raises(DialogStateError):
        dialog.submit(TaskFields(title="a", description="b"))
    assert len(store) == 0


def test_cancel_discards(store: TaskStore) -> None:
    dialog = TaskDialog(store)
    dialog.open_create()
    dialog.cancel()
    assert dialog.mode is DialogMode.CLOSED
    assert len(store) == 0


def test_delete_protocol_confirm_and_cancel(store: TaskStore) -> None:
    a = store.create(TaskFields(title="a", description="b"))
    b = store.create(TaskFields(title="c", description="d"))

    pending = request_delete(store, a.id)
    pending.cancel()
    assert store.get(a.id) is not None

    pending = request_delete(store, a.id)
    pending.confirm()
    assert store.get(a.id) is None
    assert [t.id for t in store.all()] == [b.id]

    with pytest.raises(DialogStateError):
        pending.confirm()


def test_request_delete_unknown_id(store: TaskStore) -> None:
    with pytest.raises(NotFoundError):
        request_delete(store, 123)


@pytest.mark.parametrize("answer", [True, False])
def test_delete_with_confirmation(store: TaskStore, answer: bool) -> None:
    t = store.create(TaskFields(title="a", description="b"))
    prompt = FakePrompt(answer=answer)

    deleted = delete_with_confirmation(store, t.id, prompt)

    assert deleted is answer
    assert prompt.asked == [DELETE_CONFIRM_MESSAGE]
    assert (store.get(t.id) is None) is answer
