"""TTL cache for homepage sections.

Entries are keyed by section and timed with an injected clock. Entries
older than ttl_seconds are refetched; if the refetch fails and an old entry
exists it is served stale rather than failing the page.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger("cm.cache")


@dataclass
class _Entry:
    data: Any
    fetched_at: float


def _size(data: Any) -> str:
    return str(len(data)) if isinstance(data, list) else "?"


class HomepageCache:
    def __init__(
        self,
        ttl_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    async def get(
        self, key: str, fetcher: Callable[[], Awaitable[Any]]
    ) -> tuple[Any, bool]:
        """Return (data, from_cache)."""
        now = self._clock()
        cached = self._entries.get(key)

        if cached is not None and now - cached.fetched_at < self._ttl:
            logger.debug(
                "%s → cache hit (%s items, age=%.1fs)",
                key, _size(cached.data), now - cached.fetched_at,
            )
            return cached.data, True

        try:
            data = await fetcher()
        except Exception:
            if cached is None:
                raise
            logger.warning(
                "%s → fetch failed, serving stale cache (age=%.1fs)",
                key, now - cached.fetched_at, exc_info=True,
            )
            return cached.data, True

        self._entries[key] = _Entry(data=data, fetched_at=now)
        logger.debug("%s → cached %s items", key, _size(data))
        return data, False
