# src/taskshelf/storage/atomic_file.py

"""
Whole-file JSON snapshots with atomic replace.

Write protocol:
- serialize into "<target>.tmp" next to the target,
- flush + fsync, close,
- os.replace(tmp, target),
- fsync the parent directory (POSIX) so the rename survives a crash.

The target path is only touched by the final rename, so a reader (or a crash)
sees either the previous snapshot or the new one, never a partial file.

Blocking file IO runs in a worker thread so the event loop only suspends
at read/write boundaries.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from .errors import StoreCorruptedError, StoreError, StoreWriteError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not allowed")


class AtomicFileStore:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._tmp_path = self._path.with_name(self._path.name + ".tmp")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tmp_path(self) -> Path:
        return self._tmp_path

    def exists(self) -> bool:
        return self._path.exists()

    # ---- public API ----

    async def read(self) -> list[Any] | None:
        """
        Return the stored JSON array, or None when the file does not exist.

        Raises StoreCorruptedError when the file exists but is not a JSON array.
        """
        return await asyncio.to_thread(self._read_sync)

    async def write(self, payload: list[Any]) -> None:
        """Replace the file content with `payload`. Raises StoreWriteError on failure."""
        await asyncio.to_thread(self._write_sync, payload)

    # ---- blocking helpers ----

    def _read_sync(self) -> list[Any] | None:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            raise StoreCorruptedError(self._path, f"File is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StoreError(self._path, f"Read failed: {e}") from e

        try:
            data = json.loads(raw, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            # JSONDecodeError is a ValueError; so are oversized int literals.
            raise StoreCorruptedError(self._path, f"Invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise StoreCorruptedError(
                self._path, f"Expected a JSON array, got {type(data).__name__}"
            )
        return data

    def _write_sync(self, payload: list[Any]) -> None:
        try:
            text = json.dumps(payload, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise StoreWriteError(self._path, f"Snapshot is not JSON-serializable: {e}") from e

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._tmp_path, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            self._replace()
        except OSError as e:
            with contextlib.suppress(OSError):
                self._tmp_path.unlink()
            raise StoreWriteError(self._path, f"Write failed: {e}") from e

        # The new snapshot is already in place; a failed directory sync is not a failed write.
        try:
            self._fsync_dir()
        except OSError:
            logger.debug("Directory fsync failed path=%s", self._path.parent, exc_info=True)

        logger.debug("Snapshot written path=%s items=%d", self._path, len(payload))

    def _replace(self) -> None:
        os.replace(self._tmp_path, self._path)

    def _fsync_dir(self) -> None:
        """Persist the rename itself. POSIX only; Windows cannot open directories."""
        if os.name != "posix":
            return
        fd = os.open(self._path.parent, os.O_RDONLY)
        try:
            os.fsync(fd)
        finally:
            os.close(fd)
