# src/tasklist/tasks/task_api.py

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from ..core.errors import NotFoundError, ValidationError
from ..core.state import AppState
from .task_dialog import delete_with_confirmation
from .task_models import Task, TaskFields, TaskId
from .task_view import Page, paginate, project_store

logger = logging.getLogger(__name__)

MSG_NOT_FOUND = "Item not found."


def add_task(state: AppState, fields: TaskFields) -> Task | None:
    """
    Open the dialog in create mode and submit `fields`.

    Validation failures are reported through the notifier (one line per field)
    and leave the dialog open; returns None in that case.
    """
    dialog = state.dialog
    dialog.open_create()
    try:
        return dialog.submit(fields)
    except ValidationError as e:
        _report_validation(state, e)
        return None


def edit_task(state: AppState, task_id: TaskId, overrides: dict[str, Any]) -> Task | None:
    """
    Open the dialog on `task_id`, apply `overrides` to the prefilled fields and submit.

    Keys missing from `overrides` keep their current value, so the edit still
    replaces all editable fields at once.
    """
    dialog = state.dialog
    try:
        prefilled = dialog.open_edit(task_id)
    except NotFoundError:
        logger.info("Edit requested for unknown task id=%s", task_id)
        state.notifier.error(MSG_NOT_FOUND)
        return None

    try:
        return dialog.submit(replace(prefilled, **overrides))
    except ValidationError as e:
        _report_validation(state, e)
        return None
    except NotFoundError:
        dialog.cancel()
        state.notifier.error(MSG_NOT_FOUND)
        return None


def remove_task(state: AppState, task_id: TaskId) -> bool:
    """Ask for confirmation, then delete. Returns True only if the task was removed."""
    try:
        return delete_with_confirmation(state.store, task_id, state.prompt)
    except NotFoundError:
        logger.info("Delete requested for unknown task id=%s", task_id)
        state.notifier.error(MSG_NOT_FOUND)
        return False


def visible_page(state: AppState) -> Page:
    rows = project_store(state.store, state.view)
    page = paginate(rows, state.view.page, state.view.page_size)
    state.view.page = page.page
    return page


def _report_validation(state: AppState, err: ValidationError) -> None:
    logger.debug("Validation failed: %s", err.errors)
    for message in err.errors.values():
        state.notifier.error(message)
