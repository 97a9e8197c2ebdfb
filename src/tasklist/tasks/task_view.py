# src/tasklist/tasks/task_view.py

from __future__ import annotations

"""
View projection: sort + status filter + page-size cap over a store snapshot.

Sorting goes through one table keyed by SortField. Each entry is a pure key
function plus the field's default order. Python's sort is stable in both
directions (reverse=True keeps equal items in their original order), so ties
always fall back to insertion order.
"""

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from .task_models import Task, TaskStatus
from .task_store import TaskStore

DEFAULT_PAGE_SIZE = 10

_EARLIEST = datetime.min.replace(tzinfo=UTC)


class SortField(StrEnum):
    CREATED = "created"
    TITLE = "title"
    DESCRIPTION = "description"
    DUE_DATE = "due"


class SortOrder(StrEnum):
    ASCEND = "asc"
    DESCEND = "desc"


@dataclass(slots=True, frozen=True)
class SortRule:
    key: Callable[[Task], Any]
    default_order: SortOrder
    # Tasks for which this returns False go last regardless of direction.
    has_value: Callable[[Task], bool] | None = None


SORT_RULES: dict[SortField, SortRule] = {
    SortField.CREATED: SortRule(
        key=lambda t: t.timestamp_created or _EARLIEST,
        default_order=SortOrder.DESCEND,
    ),
    SortField.TITLE: SortRule(key=lambda t: t.title, default_order=SortOrder.ASCEND),
    SortField.DESCRIPTION: SortRule(key=lambda t: t.description, default_order=SortOrder.ASCEND),
    SortField.DUE_DATE: SortRule(
        key=lambda t: t.due_date,
        default_order=SortOrder.ASCEND,
        has_value=lambda t: t.due_date is not None,
    ),
}


@dataclass(slots=True, frozen=True)
class SortSpec:
    field: SortField = SortField.CREATED
    order: SortOrder = SortOrder.DESCEND

    @classmethod
    def for_field(cls, sort_field: SortField, order: SortOrder | None = None) -> SortSpec:
        return cls(sort_field, order or SORT_RULES[sort_field].default_order)


DEFAULT_SORT = SortSpec.for_field(SortField.CREATED)


@dataclass(slots=True)
class ViewSpec:
    """Mutable view settings owned by the rendering layer."""

    sort: SortSpec = DEFAULT_SORT
    statuses: frozenset[TaskStatus] = field(default_factory=frozenset)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(slots=True, frozen=True)
class Page:
    items: list[Task]
    page: int
    page_count: int
    total: int


def sort_tasks(tasks: Iterable[Task], spec: SortSpec = DEFAULT_SORT) -> list[Task]:
    rule = SORT_RULES[spec.field]
    reverse = spec.order is SortOrder.DESCEND
    rows = list(tasks)

    if rule.has_value is None:
        return sorted(rows, key=rule.key, reverse=reverse)

    with_value = [t for t in rows if rule.has_value(t)]
    without_value = [t for t in rows if not rule.has_value(t)]
    return sorted(with_value, key=rule.key, reverse=reverse) + without_value


def filter_tasks(tasks: Iterable[Task], statuses: Iterable[TaskStatus] = ()) -> list[Task]:
    active = frozenset(statuses)
    if not active:
        return list(tasks)
    return [t for t in tasks if t.status in active]


def project(
    tasks: Iterable[Task],
    sort: SortSpec = DEFAULT_SORT,
    statuses: Iterable[TaskStatus] = (),
) -> list[Task]:
    """Sort the full collection, then drop rows whose status is not selected."""
    return filter_tasks(sort_tasks(tasks, sort), statuses)


def project_store(store: TaskStore, spec: ViewSpec) -> list[Task]:
    if store.loading:
        return []
    return project(store.all(), spec.sort, spec.statuses)


def paginate(rows: Sequence[Task], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    """Cut one page out of `rows`. Out-of-range page numbers are clamped."""
    size = max(1, int(page_size))
    total = len(rows)
    page_count = max(1, math.ceil(total / size))
    current = min(max(1, int(page)), page_count)
    start = (current - 1) * size
    return Page(items=list(rows[start : start + size]), page=current, page_count=page_count, total=total)
