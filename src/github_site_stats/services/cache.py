"""Short-lived in-memory cache for live API responses."""

import asyncio
import time
from typing import Any, Awaitable, Callable, Optional

DEFAULT_TTL_SECONDS = 3600.0


class ResponseCache:
    """One shared cache entry for several keyed values.

    All keys share a single capture timestamp: a successful refresh of any key
    renews it, and once it is older than ``ttl`` every key is stale.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self._clock = clock
        self._values: dict[str, Any] = {}
        self._timestamp: Optional[float] = None
        self._locks: dict[str, asyncio.Lock] = {}

    def is_valid(self) -> bool:
        """Whether cached values are still fresh."""
        if self._timestamp is None:
            return False
        return (self._clock() - self._timestamp) < self.ttl

    def _lookup(self, key: str) -> Any:
        if self.is_valid():
            return self._values.get(key)
        return None

    async def get_or_refresh(
        self,
        key: str,
        loader: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Return the cached value for ``key`` or load and cache a fresh one.

        A ``None`` result from ``loader`` is returned but not cached.
        Concurrent callers for the same key share one ``loader`` call.
        """
        cached = self._lookup(key)
        if cached is not None:
            return cached

        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            # Another task may have refreshed while we waited
            cached = self._lookup(key)
            if cached is not None:
                return cached

            value = await loader()
            if value is not None:
                self._values[key] = value
                self._timestamp = self._clock()
            return value

    def clear(self) -> None:
        """Drop all cached values."""
        self._values.clear()
        self._timestamp = None
