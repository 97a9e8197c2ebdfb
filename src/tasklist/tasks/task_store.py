# src/tasklist/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from ..core.errors import NotFoundError
from ..core.ports import Notifier
from .task_models import Task, TaskFields, TaskId
from .task_validation import validate_fields

logger = logging.getLogger(__name__)

MSG_CREATED = "Item added successfully!"
MSG_UPDATED = "Item updated successfully!"
MSG_DELETED = "Item deleted successfully!"


class TaskStore:
    """
    In-memory task store.

    The collection keeps insertion order; deletes never reorder survivors and
    updates replace a task in place.

    Ids handed out by create() come from a monotonic counter that is checked
    against every id currently in the collection, so rapid successive creates
    can never collide (loaded ids may be arbitrary ints or strings).
    """

    def __init__(self, notifier: Notifier | None = None) -> None:
        self._tasks: list[Task] = []
        self._index: dict[TaskId, int] = {}
        self._ids = itertools.count(1)
        self._notifier = notifier
        self.loading = False

    # ---- low-level helpers ----

    def _reindex(self) -> None:
        self._index = {t.id: i for i, t in enumerate(self._tasks)}

    def _reseed_ids(self) -> None:
        int_ids = [t.id for t in self._tasks if isinstance(t.id, int) and not isinstance(t.id, bool)]
        self._ids = itertools.count(max(int_ids, default=0) + 1)

    def _next_id(self) -> int:
        while True:
            candidate = next(self._ids)
            if candidate not in self._index:
                return candidate

    def _notify(self, message: str) -> None:
        if self._notifier is not None:
            self._notifier.success(message)

    def _position(self, task_id: TaskId) -> int:
        pos = self._index.get(task_id)
        if pos is None:
            raise NotFoundError(task_id)
        return pos

    # ---- loading ----

    def mark_loading(self) -> None:
        self.loading = True

    def load_all(self, tasks: Iterable[Task]) -> None:
        """
        Replace the whole collection (initial load). No field validation.

        A sequence holding anything but Task objects, or repeating an id, is
        rejected as a whole and leaves an empty collection.
        """
        incoming = list(tasks)
        seen: set[TaskId] = set()
        malformed = False
        for t in incoming:
            if not isinstance(t, Task) or t.id in seen:
                malformed = True
                break
            seen.add(t.id)

        if malformed:
            logger.warning("Rejected malformed initial load (%d entries); starting empty.", len(incoming))
            incoming = []

        self._tasks = incoming
        self._reindex()
        self._reseed_ids()
        self.loading = False
        logger.info("TaskStore loaded total=%d", len(self._tasks))

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._index

    def get(self, task_id: TaskId) -> Task | None:
        pos = self._index.get(task_id)
        return self._tasks[pos] if pos is not None else None

    def all(self) -> list[Task]:
        return list(self._tasks)

    def create(self, fields: TaskFields) -> Task:
        values = validate_fields(fields)

        task = Task(
            id=self._next_id(),
            timestamp_created=datetime.now(UTC),
            title=values.title,
            description=values.description,
            due_date=values.due_date,
            tags=values.tags,
            status=values.status,
        )
        self._tasks.append(task)
        self._index[task.id] = len(self._tasks) - 1
        logger.debug("Task created id=%s status=%s due=%s", task.id, task.status, task.due_date)
        self._notify(MSG_CREATED)
        return task

    def update(self, task_id: TaskId, fields: TaskFields) -> Task:
        pos = self._position(task_id)
        values = validate_fields(fields)

        old = self._tasks[pos]
        task = Task(
            id=old.id,
            timestamp_created=old.timestamp_created,
            title=values.title,
            description=values.description,
            due_date=values.due_date,
            tags=values.tags,
            status=values.status,
        )
        self._tasks[pos] = task
        logger.debug("Task updated id=%s status=%s due=%s", task.id, task.status, task.due_date)
        self._notify(MSG_UPDATED)
        return task

    def delete(self, task_id: TaskId) -> None:
        pos = self._position(task_id)
        del self._tasks[pos]
        self._reindex()
        logger.debug("Task deleted id=%s", task_id)
        self._notify(MSG_DELETED)
