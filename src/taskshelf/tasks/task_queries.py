# src/taskshelf/tasks/task_queries.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from ..core import query
from .task_models import Completion, Priority, Task


@dataclass(slots=True, frozen=True)
class TaskSummary:
    total: int
    by_priority: list[tuple[Priority, int]]
    by_completion: list[tuple[Completion, int]]


def default_order(tasks: Iterable[Task]) -> list[Task]:
    """Soonest due date first (no date last), higher priority first on ties."""
    return query.order_by(tasks, "due_date", then_desc="priority")


def by_completion(tasks: Iterable[Task], status: Completion | None) -> list[Task]:
    return query.filter_choice(default_order(tasks), "is_completed", status)


def by_priority(tasks: Iterable[Task], priority: Priority | None) -> list[Task]:
    return query.filter_choice(default_order(tasks), "priority", priority)


def due_between(tasks: Iterable[Task], start: date | None, end: date | None) -> list[Task]:
    return query.filter_range(default_order(tasks), "due_date", start, end)


def due_this_week(tasks: Iterable[Task], today: date | None = None) -> list[Task]:
    """Tasks due from `today` through the next 7 days, inclusive."""
    today = today or date.today()
    return due_between(tasks, today, today + timedelta(days=7))


def summarize(tasks: Iterable[Task]) -> TaskSummary:
    items = list(tasks)
    return TaskSummary(
        total=len(items),
        by_priority=query.count_by(items, "priority"),  # type: ignore[arg-type]
        by_completion=query.count_by(items, "is_completed"),  # type: ignore[arg-type]
    )
