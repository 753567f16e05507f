# src/taskshelf/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..library.library_models import LibraryItem
from ..tasks.task_models import Task
from .ports import RecordRepo


@dataclass(slots=True)
class AppState:
    # Settings object (real Settings or a test namespace with the same fields).
    settings: Any

    tasks: RecordRepo[Task]
    library: RecordRepo[LibraryItem]
