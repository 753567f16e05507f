# src/taskshelf/library/library_store.py

from __future__ import annotations

from pathlib import Path

from ..storage.repository import RecordRepository
from .library_models import LibraryItem

DEFAULT_FILENAME = "library.json"

LibraryStore = RecordRepository[LibraryItem]


def open_library_store(path: str | Path | None = None) -> LibraryStore:
    """Library repository backed by `path` (defaults to ./library.json)."""
    return RecordRepository(LibraryItem, Path(path) if path is not None else Path(DEFAULT_FILENAME))
