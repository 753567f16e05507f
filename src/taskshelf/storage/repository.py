# src/taskshelf/storage/repository.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any, Generic

from ..core.ports import RecordT
from ..core.timestamps import utc_now
from .atomic_file import AtomicFileStore
from .errors import StoreCorruptedError, StoreWriteError
from .guard import MutualExclusionGuard

logger = logging.getLogger(__name__)


class RecordRepository(Generic[RecordT]):
    """
    JSON-file repository for one record type.

    Every operation is a whole-file round trip:
    - load/get_by_id: read under the guard
    - save: write under the guard
    - add/update/delete: read-modify-write, guard held for the whole span,
      so concurrent mutations in one event loop never interleave.

    Lifecycle fields are owned here: `add` assigns the id and stamps both
    timestamps, `update` keeps the stored created_at and refreshes updated_at.
    """

    def __init__(
        self,
        record_type: type[RecordT],
        path: str | Path,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._record_type = record_type
        self._file = AtomicFileStore(path)
        self._guard = MutualExclusionGuard(name=self._file.path.name)
        self._clock = clock
        logger.info(
            "RecordRepository ready type=%s path=%s exists=%s",
            record_type.__name__,
            self._file.path,
            self._file.exists(),
        )

    @property
    def path(self) -> Path:
        return self._file.path

    @property
    def guard(self) -> MutualExclusionGuard:
        return self._guard

    # ---- helpers (guard must be held) ----

    def _decode(self, raw: list[Any]) -> list[RecordT]:
        out: list[RecordT] = []
        for i, item in enumerate(raw):
            if not isinstance(item, dict):
                raise StoreCorruptedError(self.path, f"Item #{i} is not an object")
            try:
                out.append(self._record_type.from_json(item))
            except (KeyError, TypeError, ValueError, OverflowError) as e:
                raise StoreCorruptedError(self.path, f"Item #{i} is malformed: {e!r}") from e
        return out

    async def _read_locked(self) -> list[RecordT]:
        try:
            raw = await self._file.read()
            return self._decode(raw) if raw is not None else []
        except StoreCorruptedError as e:
            logger.warning("Refusing to use corrupt store: %s", e)
            raise

    async def _write_locked(self, records: list[RecordT]) -> None:
        await self._file.write([r.to_json() for r in records])

    @staticmethod
    def _next_id(records: list[RecordT]) -> int:
        return max((r.id for r in records), default=0) + 1

    # ---- public API ----

    async def load(self) -> list[RecordT]:
        """
        Return the full collection.

        Missing file -> []. Corrupt file -> StoreCorruptedError.
        """
        async with self._guard:
            return await self._read_locked()

    async def save(self, records: list[RecordT]) -> bool:
        """Replace the stored collection. Returns False (and logs) if the write failed."""
        async with self._guard:
            try:
                await self._write_locked(list(records))
            except StoreWriteError:
                logger.exception("Save failed path=%s", self.path)
                return False
            return True

    async def add(self, record: RecordT) -> RecordT:
        """Store `record` under a fresh id and return the stored copy."""
        async with self._guard:
            records = await self._read_locked()
            now = self._clock()
            stored = replace(record, id=self._next_id(records), created_at=now, updated_at=now)
            records.append(stored)
            await self._write_locked(records)
        logger.debug("Record added type=%s id=%s", self._record_type.__name__, stored.id)
        return stored

    async def update(self, record: RecordT) -> bool:
        """Replace the record with the same id. False (no write) if it does not exist."""
        async with self._guard:
            records = await self._read_locked()
            idx = next((i for i, r in enumerate(records) if r.id == record.id), None)
            if idx is None:
                return False
            records[idx] = replace(
                record,
                created_at=records[idx].created_at,
                updated_at=self._clock(),
            )
            await self._write_locked(records)
        logger.debug("Record updated type=%s id=%s", self._record_type.__name__, record.id)
        return True

    async def delete(self, record_id: int) -> bool:
        """Remove every record with `record_id`. False (no write) if none matched."""
        async with self._guard:
            records = await self._read_locked()
            kept = [r for r in records if r.id != record_id]
            if len(kept) == len(records):
                return False
            await self._write_locked(kept)
        logger.debug("Record deleted type=%s id=%s", self._record_type.__name__, record_id)
        return True

    async def get_by_id(self, record_id: int) -> RecordT | None:
        async with self._guard:
            records = await self._read_locked()
        return next((r for r in records if r.id == record_id), None)
