# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the data source, prompts and UI feedback swappable and makes testing easier.
"""

from typing import Any, Awaitable, Protocol

TaskRecord = dict[str, Any]
# Task-shaped JSON object as delivered by the source: {"id": ..., "title": ..., ...}.


class TaskSource(Protocol):
    """Initial load provider. Raises LoadFailure when unreachable or malformed."""
    def fetch(self) -> Awaitable[list[TaskRecord]]: ...


class ConfirmationPrompt(Protocol):
    """
    Asks the user to confirm a destructive action.

    Returns True for "confirmed", False for "cancelled".
    """

    def confirm(self, message: str) -> bool: ...


class Notifier(Protocol):
    """Toast sink for human-readable outcome messages. Purely cosmetic."""
    def success(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
