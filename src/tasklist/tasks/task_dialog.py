# src/tasklist/tasks/task_dialog.py

from __future__ import annotations

"""
Add/edit form dialog and the two-step delete protocol.

The dialog is a small state machine:
  CLOSED --open_create--> CREATING --submit ok--> CLOSED
  CLOSED --open_edit(id)--> EDITING(id) --submit ok--> CLOSED
  any --cancel--> CLOSED
A submit that fails validation keeps the current state so the user can fix
the fields and submit again.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from ..core.errors import DialogStateError, NotFoundError
from ..core.ports import ConfirmationPrompt
from .task_models import Task, TaskFields, TaskId
from .task_store import TaskStore

logger = logging.getLogger(__name__)

DELETE_CONFIRM_MESSAGE = "Are you sure you want to delete this item?"


class DialogMode(str, Enum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


class TaskDialog:
    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self.mode = DialogMode.CLOSED
        self.editing_id: TaskId | None = None

    @property
    def is_open(self) -> bool:
        return self.mode is not DialogMode.CLOSED

    @property
    def title(self) -> str:
        return "Edit Item" if self.mode is DialogMode.EDITING else "Add Item"

    @property
    def ok_text(self) -> str:
        return "Save" if self.mode is DialogMode.EDITING else "Add"

    def open_create(self) -> TaskFields:
        self.mode = DialogMode.CREATING
        self.editing_id = None
        return TaskFields()

    def open_edit(self, task_id: TaskId) -> TaskFields:
        """Open the dialog on an existing task; returns the prefilled fields."""
        task = self._store.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        self.mode = DialogMode.EDITING
        self.editing_id = task_id
        return TaskFields.from_task(task)

    def cancel(self) -> None:
        self.mode = DialogMode.CLOSED
        self.editing_id = None

    def submit(self, fields: TaskFields) -> Task:
        if self.mode is DialogMode.CREATING:
            task = self._store.create(fields)
        elif self.mode is DialogMode.EDITING:
            if self.editing_id is None:
                raise DialogStateError("dialog is editing but has no task id")
            task = self._store.update(self.editing_id, fields)
        else:
            raise DialogStateError("submit() called while the dialog is closed")

        self.cancel()
        return task


@dataclass(slots=True)
class PendingDelete:
    """
    A requested but not yet confirmed delete.

    Resolve it exactly once with confirm() or cancel().
    """

    store: TaskStore
    task_id: TaskId
    message: str = DELETE_CONFIRM_MESSAGE
    resolved: bool = field(default=False)

    def _resolve(self) -> None:
        if self.resolved:
            raise DialogStateError(f"delete of task {self.task_id!r} already resolved")
        self.resolved = True

    def confirm(self) -> None:
        self._resolve()
        self.store.delete(self.task_id)

    def cancel(self) -> None:
        self._resolve()
        logger.debug("Delete cancelled id=%s", self.task_id)


def request_delete(store: TaskStore, task_id: TaskId) -> PendingDelete:
    if task_id not in store:
        raise NotFoundError(task_id)
    return PendingDelete(store=store, task_id=task_id)


def delete_with_confirmation(store: TaskStore, task_id: TaskId, prompt: ConfirmationPrompt) -> bool:
    """Run request -> prompt -> commit/cancel. Returns True if the task was deleted."""
    pending = request_delete(store, task_id)
    if prompt.confirm(pending.message):
        pending.confirm()
        return True
    pending.cancel()
    return False
