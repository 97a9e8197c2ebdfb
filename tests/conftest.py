# tests/conftest.py

from __future__ import annotations

from datetime import UTC, date, datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_models import Task, TaskStatus
from tasklist.tasks.task_store import TaskStore
from tasklist.tasks.task_view import ViewSpec

from .fakes import FakeNotifier, FakePrompt


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        source_enabled=False,
        source_url="http://tasks.test/todos",
        load_timeout_seconds=1.0,
        load_retries=0,
        load_retry_delay_seconds=0.0,
        page_size=3,
    )


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def prompt() -> FakePrompt:
    return FakePrompt(answer=True)


@pytest.fixture()
def store(notifier: FakeNotifier) -> TaskStore:
    return TaskStore(notifier=notifier)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, notifier: FakeNotifier, prompt: FakePrompt) -> AppState:
    return AppState(
        settings=settings,
        store=store,
        notifier=notifier,
        prompt=prompt,
        view=ViewSpec(page_size=settings.page_size),
    )


def make_task(
    task_id,
    *,
    title: str = "t",
    description: str = "d",
    created: datetime | None = None,
    due: date | None = None,
    tags: tuple[str, ...] = (),
    status: TaskStatus = TaskStatus.OPEN,
) -> Task:
    return Task(
        id=task_id,
        timestamp_created=created or datetime(2024, 1, 1, tzinfo=UTC),
        title=title,
        description=description,
        due_date=due,
        tags=tags,
        status=status,
    )
