# src/taskshelf/tasks/task_store.py

from __future__ import annotations

from pathlib import Path

from ..storage.repository import RecordRepository
from .task_models import Task

DEFAULT_FILENAME = "tasks.json"

TaskStore = RecordRepository[Task]


def open_task_store(path: str | Path | None = None) -> TaskStore:
    """Task repository backed by `path` (defaults to ./tasks.json)."""
    return RecordRepository(Task, Path(path) if path is not None else Path(DEFAULT_FILENAME))
