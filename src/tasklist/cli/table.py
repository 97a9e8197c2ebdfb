# src/tasklist/cli/table.py

"""Plain-text rendering of a task page (one row per task, fixed columns)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from ..tasks.task_models import Task
from ..tasks.task_view import Page, SortSpec

SEP = " | "
ELLIPSIS = "…"
EMPTY_CELL = "-"


def _ts_local(ts: datetime | None) -> str:
    if ts is None:
        return EMPTY_CELL
    return ts.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _clip(text: str, width: int) -> str:
    text = " ".join(text.split())
    if len(text) <= width:
        return text
    return text[: max(0, width - 1)] + ELLIPSIS


# (header, max width, cell getter)
COLUMNS: list[tuple[str, int, Callable[[Task], str]]] = [
    ("ID", 6, lambda t: str(t.id)),
    ("Timestamp Created", 19, lambda t: _ts_local(t.timestamp_created)),
    ("Title", 30, lambda t: t.title),
    ("Description", 40, lambda t: t.description),
    ("Due Date", 10, lambda t: t.due_date.isoformat() if t.due_date else EMPTY_CELL),
    ("Tags", 20, lambda t: ", ".join(t.tags) if t.tags else EMPTY_CELL),
    ("Status", 7, lambda t: t.status.value),
]


def render_page(page: Page, *, sort: SortSpec | None = None, loading: bool = False) -> str:
    if loading:
        return "Loading..."

    cells = [[_clip(get(t), width) for _, width, get in COLUMNS] for t in page.items]
    widths = [
        max([len(header)] + [len(row[i]) for row in cells])
        for i, (header, _, _) in enumerate(COLUMNS)
    ]

    lines = [SEP.join(h.ljust(w) for (h, _, _), w in zip(COLUMNS, widths))]
    lines.append(SEP.join("-" * w for w in widths))
    if not cells:
        lines.append("(no tasks)")
    for row in cells:
        lines.append(SEP.join(c.ljust(w) for c, w in zip(row, widths)).rstrip())

    footer = f"Page {page.page}/{page.page_count} ({page.total} tasks)"
    if sort is not None:
        footer += f", sorted by {sort.field.value} {sort.order.value}"
    lines.append(footer)
    return "\n".join(lines)


def render_task(task: Task) -> str:
    return "\n".join(
        [
            f"Task {task.id}",
            f"  Created:     {_ts_local(task.timestamp_created)}",
            f"  Title:       {task.title}",
            f"  Description: {task.description}",
            f"  Due date:    {task.due_date.isoformat() if task.due_date else EMPTY_CELL}",
            f"  Tags:        {', '.join(task.tags) if task.tags else EMPTY_CELL}",
            f"  Status:      {task.status.value} ({task.status.color})",
        ]
    )
