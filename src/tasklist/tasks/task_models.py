# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Any

TaskId = int | str

TITLE_MAX_LEN = 100
DESCRIPTION_MAX_LEN = 1000
STATUS_MAX_LEN = 20


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values are upper-case because they are shown verbatim in the status column
    and used as filter labels.
    """

    OPEN = "OPEN"
    WORKING = "WORKING"
    DONE = "DONE"
    OVERDUE = "OVERDUE"

    @property
    def color(self) -> str:
        return STATUS_COLORS[self]

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus | None:
        """Case-insensitive lookup; None for anything that is not a known status."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return None


STATUS_COLORS: dict[TaskStatus, str] = {
    TaskStatus.OPEN: "blue",
    TaskStatus.WORKING: "orange",
    TaskStatus.DONE: "green",
    TaskStatus.OVERDUE: "red",
}


@dataclass(slots=True)
class Task:
    id: TaskId
    timestamp_created: datetime | None

    title: str
    description: str
    due_date: date | None = None
    tags: tuple[str, ...] = ()
    status: TaskStatus = TaskStatus.OPEN


@dataclass(slots=True)
class TaskFields:
    """
    Raw editable fields as submitted by the form.

    Nothing here is validated yet: due_date may be a string, tags may be a
    comma-separated string, status may be any text.
    """

    title: str | None = None
    description: str | None = None
    due_date: Any = None
    tags: Any = None
    status: Any = None

    @classmethod
    def from_task(cls, task: Task) -> TaskFields:
        return cls(
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            tags=list(task.tags),
            status=task.status,
        )


@dataclass(slots=True, frozen=True)
class ValidatedFields:
    title: str
    description: str
    due_date: date | None
    tags: tuple[str, ...] = field(default_factory=tuple)
    status: TaskStatus = TaskStatus.OPEN
