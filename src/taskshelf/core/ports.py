# src/taskshelf/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Menus and queries depend on these Protocols instead of the concrete
JSON repository, which keeps tests free to pass in-memory fakes.
"""

from datetime import datetime
from typing import Any, Protocol, Self, TypeVar


class Record(Protocol):
    """A persisted entity: unique integer id plus lifecycle timestamps."""

    id: int
    created_at: datetime
    updated_at: datetime

    def to_json(self) -> dict[str, Any]: ...

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Self: ...


RecordT = TypeVar("RecordT", bound=Record)


class RecordRepo(Protocol[RecordT]):
    async def load(self) -> list[RecordT]: ...
    async def save(self, records: list[RecordT]) -> bool: ...
    async def add(self, record: RecordT) -> RecordT: ...
    async def update(self, record: RecordT) -> bool: ...
    async def delete(self, record_id: int) -> bool: ...
    async def get_by_id(self, record_id: int) -> RecordT | None: ...
