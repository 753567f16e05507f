# src/taskshelf/storage/guard.py

from __future__ import annotations

import asyncio
import logging
from types import TracebackType

logger = logging.getLogger(__name__)


class MutualExclusionGuard:
    """
    Single-permit lock around a store's backing file.

    Usage:
        async with guard:
            ...read, modify, write...

    The lock is not re-entrant: code running under the guard must call the
    unlocked helpers, never the public repository methods.
    """

    def __init__(self, name: str = "store") -> None:
        self._name = name
        self._lock = asyncio.Lock()

    def locked(self) -> bool:
        return self._lock.locked()

    async def __aenter__(self) -> MutualExclusionGuard:
        await self._lock.acquire()
        logger.debug("Guard acquired name=%s", self._name)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._lock.release()
        logger.debug("Guard released name=%s", self._name)
