# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
import shlex
from collections import Counter
from collections.abc import Callable
from dataclasses import replace
from typing import Any, cast

from ..core.state import AppState
from ..tasks.task_api import add_task, edit_task, remove_task, visible_page
from ..tasks.task_models import TaskFields, TaskId, TaskStatus
from ..tasks.task_view import SortField, SortOrder, SortSpec
from .table import render_page, render_task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

# command key -> TaskFields attribute
FIELD_KEYS = {
    "title": "title",
    "description": "description",
    "desc": "description",
    "due": "due_date",
    "due_date": "due_date",
    "tags": "tags",
    "status": "status",
}

SORT_FIELD_ALIASES = {
    "created": SortField.CREATED,
    "time": SortField.CREATED,
    "title": SortField.TITLE,
    "description": SortField.DESCRIPTION,
    "desc": SortField.DESCRIPTION,
    "due": SortField.DUE_DATE,
}

SORT_ORDER_ALIASES = {
    "asc": SortOrder.ASCEND,
    "ascend": SortOrder.ASCEND,
    "desc": SortOrder.DESCEND,
    "descend": SortOrder.DESCEND,
}


class CommandError(ValueError):
    """Bad command arguments; the message is shown to the user as-is."""


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, emit: CommandEmitter | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except CommandError as e:
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


def parse_task_id(state: AppState, raw: str) -> TaskId:
    """Ids are ints when created here; loaded ids may also be strings."""
    raw = raw.strip().lstrip("#")
    if raw.isdecimal() and int(raw) in state.store:
        return int(raw)
    return raw


def parse_field_args(args: list[str]) -> dict[str, Any]:
    """Turn ["title=Buy milk", "due=2024-05-01"] into TaskFields keyword arguments."""
    out: dict[str, Any] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep:
            raise CommandError(f"Expected key=value, got {arg!r}. Keys: title, description, due, tags, status.")
        attr = FIELD_KEYS.get(key.strip().lower())
        if attr is None:
            raise CommandError(f"Unknown field {key!r}. Keys: title, description, due, tags, status.")
        out[attr] = value
    return out


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    counts = Counter(t.status for t in state.store.all())
    per_status = ", ".join(f"{s.value}={counts.get(s, 0)}" for s in TaskStatus)
    flt = ", ".join(sorted(s.value for s in state.view.statuses)) or "none"
    source = state.settings.source_url if state.settings.source_enabled else "offline"
    return (
        "Status:\n"
        f"  Tasks: {len(state.store)} ({per_status})\n"
        f"  Loading: {'yes' if state.store.loading else 'no'}\n"
        f"  Sort: {state.view.sort.field.value} {state.view.sort.order.value}\n"
        f"  Filter: {flt}\n"
        f"  Source: {source}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list      -> current page
    /list N    -> page N
    """
    if args:
        if not args[0].isdecimal():
            raise CommandError("Usage: /list [page]")
        state.view.page = int(args[0])
    page = visible_page(state)
    return render_page(page, sort=state.view.sort, loading=state.store.loading)


def cmd_show(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        raise CommandError("Usage: /show <id>")
    task = state.store.get(parse_task_id(state, args[0]))
    if task is None:
        return "Item not found."
    return render_task(task)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add title="Buy milk" description="2 litres" due=2024-05-01 tags=home,food status=OPEN
    """
    if not args:
        raise CommandError('Usage: /add title="..." description="..." [due=YYYY-MM-DD] [tags=a,b] [status=OPEN]')
    task = add_task(state, replace(TaskFields(), **parse_field_args(args)))
    if task is None:
        return "Task not added."
    return f"Added task {task.id}."


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id> key=value ...   (keys not given keep their current value)
    """
    if len(args) < 2:
        raise CommandError("Usage: /edit <id> key=value ... (keys: title, description, due, tags, status)")
    task_id = parse_task_id(state, args[0])
    task = edit_task(state, task_id, parse_field_args(args[1:]))
    if task is None:
        return "Task not updated."
    return f"Updated task {task.id}."


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        raise CommandError("Usage: /delete <id>")
    task_id = parse_task_id(state, args[0])
    if remove_task(state, task_id):
        return f"Deleted task {task_id}."
    return "Nothing deleted."


def cmd_sort(state: AppState, args: list[str]) -> str:
    """
    /sort                    -> show current sort
    /sort <field> [asc|desc] -> field: created, title, description, due
    """
    if not args:
        sort = state.view.sort
        return f"Sorted by {sort.field.value} {sort.order.value}."

    sort_field = SORT_FIELD_ALIASES.get(args[0].lower())
    if sort_field is None:
        raise CommandError("Usage: /sort <created|title|description|due> [asc|desc]")

    order = None
    if len(args) > 1:
        order = SORT_ORDER_ALIASES.get(args[1].lower())
        if order is None:
            raise CommandError("Sort order must be asc or desc.")

    state.view.sort = SortSpec.for_field(sort_field, order)
    state.view.page = 1
    return f"Sorted by {state.view.sort.field.value} {state.view.sort.order.value}."


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                 -> clear the status filter
    /filter DONE WORKING    -> show only these statuses
    """
    statuses: set[TaskStatus] = set()
    for raw in args:
        for part in raw.split(","):
            if not part.strip():
                continue
            status = TaskStatus.parse(part)
            if status is None:
                raise CommandError(
                    f"Unknown status {part!r}. Use: {', '.join(s.value for s in TaskStatus)}."
                )
            statuses.add(status)

    state.view.statuses = frozenset(statuses)
    state.view.page = 1
    if not statuses:
        return "Filter cleared."
    return "Filtering by status: " + ", ".join(s.value for s in TaskStatus if s in statuses) + "."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts, sort, filter and source.")
registry.register("list", cmd_list, help_text="Show the task table: /list [page].", aliases=["ls"])
registry.register("show", cmd_show, help_text="Show one task in full: /show <id>.")
registry.register("add", cmd_add, help_text='Add a task: /add title="..." description="..." [due=] [tags=] [status=].')
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> key=value ...")
registry.register("delete", cmd_delete, help_text="Delete a task (asks for confirmation): /delete <id>.", aliases=["rm"])
registry.register("sort", cmd_sort, help_text="Sort: /sort <created|title|description|due> [asc|desc].")
registry.register("filter", cmd_filter, help_text="Filter by status: /filter [OPEN WORKING DONE OVERDUE].")
