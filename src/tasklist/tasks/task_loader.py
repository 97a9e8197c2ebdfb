# src/tasklist/tasks/task_loader.py

from __future__ import annotations

"""
Initial load.

Fetches task-shaped records once at startup, turns them into Task objects and
hands them to TaskStore.load_all(). Any failure (network, HTTP status, bad
JSON, malformed records) ends in an empty collection instead of a crash.
"""

import asyncio
import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

import httpx

from ..core.errors import LoadFailure
from ..core.ports import TaskRecord, TaskSource
from .task_models import Task, TaskStatus
from .task_store import TaskStore
from .task_validation import parse_due_date, parse_tags

logger = logging.getLogger(__name__)


class HttpTaskSource:
    """
    GET a JSON list of tasks from `url`.

    `retries` is the number of extra attempts after the first one; the delay
    between attempts doubles each time, starting at `retry_delay` seconds.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        retries: int = 0,
        retry_delay: float = 0.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.retries = max(0, int(retries))
        self.retry_delay = retry_delay
        self._transport = transport

    async def _fetch_once(self) -> list[TaskRecord]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.get(self.url, headers={"Accept": "application/json"})
                resp.raise_for_status()
            except httpx.HTTPError as e:
                raise LoadFailure(f"GET {self.url} failed: {e.__class__.__name__}: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise LoadFailure(f"GET {self.url} returned a non-JSON body") from e

        if not isinstance(data, list):
            raise LoadFailure(f"GET {self.url} returned {type(data).__name__}, expected a list")
        return data

    async def fetch(self) -> list[TaskRecord]:
        delay = self.retry_delay
        for attempt in range(self.retries + 1):
            try:
                return await self._fetch_once()
            except LoadFailure as e:
                if attempt == self.retries:
                    raise
                logger.info("Task source attempt %d failed (%s); retrying in %.2fs", attempt + 1, e, delay)
                await asyncio.sleep(delay)
                delay *= 2
        raise LoadFailure("unreachable")  # pragma: no cover


class StaticTaskSource:
    """In-process source: returns a copy of the given records (offline mode, tests)."""

    def __init__(self, records: Sequence[TaskRecord] = ()) -> None:
        self._records = [dict(r) for r in records]

    async def fetch(self) -> list[TaskRecord]:
        return [dict(r) for r in self._records]


def _parse_timestamp(raw: Any) -> datetime | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ValueError(f"bad timestamp: {raw!r}")
    if isinstance(raw, (int, float)):
        # epoch milliseconds, as produced by Date.getTime()
        return datetime.fromtimestamp(raw / 1000.0, tz=UTC)
    if isinstance(raw, str):
        dt = datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
        return dt if dt.tzinfo is not None else dt.replace(tzinfo=UTC)
    raise ValueError(f"bad timestamp: {raw!r}")


def _parse_status(rec: TaskRecord) -> TaskStatus:
    status = TaskStatus.parse(rec.get("status"))
    if status is not None:
        return status
    return TaskStatus.DONE if rec.get("completed") is True else TaskStatus.OPEN


def _text(raw: Any) -> str:
    return "" if raw is None else str(raw)


def parse_task_record(rec: Any) -> Task:
    if not isinstance(rec, dict):
        raise LoadFailure(f"task record is {type(rec).__name__}, expected an object")

    task_id = rec.get("id")
    if isinstance(task_id, bool) or not (
        isinstance(task_id, int) or (isinstance(task_id, str) and task_id.strip())
    ):
        raise LoadFailure(f"task record without a usable id: {task_id!r}")

    try:
        return Task(
            id=task_id,
            timestamp_created=_parse_timestamp(rec.get("timestampCreated")),
            title=_text(rec.get("title")),
            description=_text(rec.get("description")),
            due_date=parse_due_date(rec.get("dueDate")),
            tags=parse_tags(rec.get("tags")),
            status=_parse_status(rec),
        )
    except (ValueError, OverflowError, OSError) as e:
        raise LoadFailure(f"task record id={task_id!r} is malformed: {e}") from e


def parse_task_records(payload: Any) -> list[Task]:
    """All-or-nothing: one bad record rejects the whole payload."""
    if not isinstance(payload, list):
        raise LoadFailure(f"payload is {type(payload).__name__}, expected a list")

    tasks = [parse_task_record(rec) for rec in payload]
    ids = [t.id for t in tasks]
    if len(set(ids)) != len(ids):
        raise LoadFailure("payload contains duplicate task ids")
    return tasks


async def load_initial_tasks(store: TaskStore, source: TaskSource) -> int:
    """
    Populate the store from `source`. Returns the number of loaded tasks.

    The store reports loading=True until this returns.
    """
    store.mark_loading()
    try:
        records = await source.fetch()
        tasks = parse_task_records(records)
    except LoadFailure as e:
        logger.warning("Initial load failed, starting with an empty list: %s", e)
        tasks = []

    store.load_all(tasks)
    return len(tasks)
