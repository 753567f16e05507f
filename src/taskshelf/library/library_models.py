# src/taskshelf/library/library_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..core.choices import Choice
from ..core.fields import int_from_json
from ..core.timestamps import ts_from_json, ts_to_json, utc_now


class ReadStatus(Choice):
    READ = "read"
    UNREAD = "unread"


@dataclass(slots=True)
class LibraryItem:
    """One catalogued book. `genre` is free text; grouping on it is exact-match."""

    title: str
    author: str
    genre: str
    publication_year: int
    is_read: ReadStatus = ReadStatus.UNREAD

    id: int = 0
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
            "publicationYear": self.publication_year,
            "isRead": self.is_read.value,
            "createdAt": ts_to_json(self.created_at),
            "updatedAt": ts_to_json(self.updated_at),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> LibraryItem:
        created_at = ts_from_json(data["createdAt"])
        raw_updated = data.get("updatedAt")
        return cls(
            id=int_from_json(data["id"], "id"),
            title=str(data.get("title") or ""),
            author=str(data.get("author") or ""),
            genre=str(data.get("genre") or ""),
            publication_year=int_from_json(data["publicationYear"], "publicationYear"),
            is_read=ReadStatus.from_json(data.get("isRead", ReadStatus.UNREAD.value)),
            created_at=created_at,
            updated_at=ts_from_json(raw_updated) if raw_updated is not None else created_at,
        )

    def __str__(self) -> str:
        return (
            f"[{self.id}] {self.title} by {self.author} "
            f"({self.genre}, {self.publication_year}) - {self.is_read.label}"
        )
