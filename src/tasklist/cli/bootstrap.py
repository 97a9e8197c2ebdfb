# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires concrete implementations into AppState (store/notifier/prompt),
- picks the initial load source (HTTP or an empty offline list).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier, ConsolePrompt
from ..core.ports import ConfirmationPrompt, Notifier, TaskSource
from ..core.state import AppState
from ..tasks.task_loader import HttpTaskSource, StaticTaskSource, load_initial_tasks
from ..tasks.task_store import TaskStore
from ..tasks.task_view import ViewSpec

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    notifier: Notifier | None = None,
    prompt: ConfirmationPrompt | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and ports injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    notifier = notifier if notifier is not None else ConsoleNotifier()
    prompt = prompt if prompt is not None else ConsolePrompt()

    return AppState(
        settings=settings,
        store=TaskStore(notifier=notifier),
        notifier=notifier,
        prompt=prompt,
        view=ViewSpec(page_size=settings.page_size),
    )


def build_task_source(settings) -> TaskSource:
    if not settings.source_enabled:
        logger.info("Task source disabled; starting with an empty list.")
        return StaticTaskSource()

    return HttpTaskSource(
        settings.source_url,
        timeout=settings.load_timeout_seconds,
        retries=settings.load_retries,
        retry_delay=settings.load_retry_delay_seconds,
    )


async def run_initial_load(state: AppState, source: TaskSource | None = None) -> int:
    if source is None:
        source = build_task_source(state.settings)
    n = await load_initial_tasks(state.store, source)
    logger.info("Initial load finished: %d tasks", n)
    return n
