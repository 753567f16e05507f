# src/taskshelf/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from ..core.choices import Choice
from ..core.fields import int_from_json
from ..core.timestamps import date_from_json, date_to_json, ts_from_json, ts_to_json, utc_now


class Priority(Choice):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Completion(Choice):
    COMPLETED = "completed"
    PENDING = "pending"


@dataclass(slots=True)
class Task:
    title: str
    description: str = ""
    due_date: date | None = None
    priority: Priority = Priority.MEDIUM
    is_completed: Completion = Completion.PENDING

    id: int = 0
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": date_to_json(self.due_date),
            "priority": self.priority.value,
            "isCompleted": self.is_completed.value,
            "createdAt": ts_to_json(self.created_at),
            "updatedAt": ts_to_json(self.updated_at),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Task:
        created_at = ts_from_json(data["createdAt"])
        raw_updated = data.get("updatedAt")
        return cls(
            id=int_from_json(data["id"], "id"),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            due_date=date_from_json(data.get("dueDate")),
            priority=Priority.from_json(data.get("priority", Priority.MEDIUM.value)),
            is_completed=Completion.from_json(data.get("isCompleted", Completion.PENDING.value)),
            created_at=created_at,
            updated_at=ts_from_json(raw_updated) if raw_updated is not None else created_at,
        )

    def __str__(self) -> str:
        due = self.due_date.isoformat() if self.due_date else "(no due date)"
        mark = "x" if self.is_completed is Completion.COMPLETED else " "
        head = f"[{self.id}] [{mark}] {self.title} ({self.priority.label}) - Due: {due}"
        return f"{head}\n    {self.description}" if self.description else head
