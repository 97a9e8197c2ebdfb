# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_dialog import TaskDialog
from ..tasks.task_store import TaskStore
from ..tasks.task_view import ViewSpec
from .ports import ConfirmationPrompt, Notifier


@dataclass
class AppState:
    """
    Everything the rendering layer holds a reference to.

    The store is the only authoritative data; `view` and `dialog` are UI state.
    """

    # Store Settings on the state for easy access in other modules later.
    settings: Any

    store: TaskStore
    notifier: Notifier
    prompt: ConfirmationPrompt

    view: ViewSpec = field(default_factory=ViewSpec)
    dialog: TaskDialog | None = None

    def __post_init__(self) -> None:
        if self.dialog is None:
            self.dialog = TaskDialog(self.store)
