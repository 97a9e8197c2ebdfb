# src/tasklist/core/errors.py

from __future__ import annotations

"""
Error kinds raised by the task core.

Every error here is recoverable: the store is left in its last valid state
and the UI layer decides how to present the failure.
"""

from typing import Any


class TaskListError(Exception):
    """Base class for all tasklist errors."""


class ValidationError(TaskListError):
    """
    One or more form fields violate their constraints.

    `errors` maps field name -> human-readable message, in form order.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()) or "Validation failed")


class NotFoundError(TaskListError):
    def __init__(self, task_id: Any) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found: id={task_id!r}")


class LoadFailure(TaskListError):
    """Initial load source unreachable or returned a malformed payload."""


class DialogStateError(TaskListError):
    """A dialog transition was requested from a state that does not allow it."""
