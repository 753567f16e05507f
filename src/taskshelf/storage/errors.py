# src/taskshelf/storage/errors.py

from __future__ import annotations

from pathlib import Path


class StoreError(Exception):
    """Base class for failures of a file-backed store."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        self.message = message
        super().__init__(f"{message} ({self.path})")


class StoreCorruptedError(StoreError):
    """
    The backing file exists but cannot be read as a list of records.

    Raised instead of returning an empty list, so a corrupt file is never
    silently replaced by an empty one on the next save.
    """


class StoreWriteError(StoreError):
    """A snapshot could not be written. The previous file is left untouched."""
