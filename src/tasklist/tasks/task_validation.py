# src/tasklist/tasks/task_validation.py

from __future__ import annotations

"""
Form validation for the task write path.

All fields are checked and every failure is reported at once, keyed by field
name, so the form can show each message next to its input.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from ..core.errors import ValidationError
from .task_models import (
    DESCRIPTION_MAX_LEN,
    STATUS_MAX_LEN,
    TITLE_MAX_LEN,
    TaskFields,
    TaskStatus,
    ValidatedFields,
)

TITLE_MESSAGE = f"Please input a title (maximum {TITLE_MAX_LEN} characters)"
DESCRIPTION_MESSAGE = f"Please input a description (maximum {DESCRIPTION_MAX_LEN} characters)"
STATUS_LENGTH_MESSAGE = f"Please input a status (maximum {STATUS_MAX_LEN} characters)"
STATUS_VALUE_MESSAGE = "Please select a valid status ({})".format(
    ", ".join(s.value for s in TaskStatus)
)
DUE_DATE_MESSAGE = "Please input a valid due date (YYYY-MM-DD)"
TAGS_MESSAGE = "Please input tags as text, separated by commas"


def _required_text(value: Any, max_len: int) -> bool:
    return isinstance(value, str) and bool(value.strip()) and len(value) <= max_len


def parse_due_date(raw: Any) -> date | None:
    """
    Accept a date, a datetime (date part) or an ISO string.

    Empty values mean "no deadline". Raises ValueError for anything else.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        s = raw.strip()
        if not s:
            return None
        # Accept full ISO timestamps too ("2024-05-01T00:00:00.000Z").
        if "T" in s:
            return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
        return date.fromisoformat(s)
    raise ValueError(f"unsupported due date: {raw!r}")


def parse_tags(raw: Any) -> tuple[str, ...]:
    """
    Normalize tags into a duplicate-free tuple (first occurrence wins).

    Accepts "a, b, c" or a list/tuple/set of strings. Raises ValueError otherwise.
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        parts: Iterable[Any] = raw.split(",")
    elif isinstance(raw, (list, tuple, set, frozenset)):
        parts = raw
    else:
        raise ValueError(f"unsupported tags: {raw!r}")

    out: list[str] = []
    for p in parts:
        if not isinstance(p, str):
            raise ValueError(f"tag is not text: {p!r}")
        label = p.strip()
        if label and label not in out:
            out.append(label)
    return tuple(out)


def validate_fields(fields: TaskFields) -> ValidatedFields:
    errors: dict[str, str] = {}

    if not _required_text(fields.title, TITLE_MAX_LEN):
        errors["title"] = TITLE_MESSAGE

    if not _required_text(fields.description, DESCRIPTION_MAX_LEN):
        errors["description"] = DESCRIPTION_MESSAGE

    due_date: date | None = None
    try:
        due_date = parse_due_date(fields.due_date)
    except ValueError:
        errors["due_date"] = DUE_DATE_MESSAGE

    tags: tuple[str, ...] = ()
    try:
        tags = parse_tags(fields.tags)
    except ValueError:
        errors["tags"] = TAGS_MESSAGE

    status = TaskStatus.OPEN
    raw_status = fields.status
    if isinstance(raw_status, str) and not isinstance(raw_status, TaskStatus):
        if len(raw_status) > STATUS_MAX_LEN:
            errors["status"] = STATUS_LENGTH_MESSAGE
        elif raw_status.strip():
            parsed = TaskStatus.parse(raw_status)
            if parsed is None:
                errors["status"] = STATUS_VALUE_MESSAGE
            else:
                status = parsed
    elif isinstance(raw_status, TaskStatus):
        status = raw_status
    elif raw_status is not None:
        errors["status"] = STATUS_VALUE_MESSAGE

    if errors:
        raise ValidationError(errors)

    return ValidatedFields(
        title=str(fields.title),
        description=str(fields.description),
        due_date=due_date,
        tags=tags,
        status=status,
    )
