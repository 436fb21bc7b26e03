# src/cache/memory_store.py — v1
"""In-process cache store (default CACHE_BACKEND=memory).

Slots live in plain dicts owned by one event loop. Every transition runs
without an intervening await, so check-and-set in begin_load() is atomic for
all coroutines sharing the loop.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from sitecontent.cache.base_cache_store import BaseCacheStore, CacheStateError, LoadTicket
from sitecontent.cache.models import CacheEntry, EntryState, Outcome

logger = logging.getLogger(__name__)


class MemoryCacheStore(BaseCacheStore):
    """Dict-backed cache store with per-path single-flight futures."""

    def __init__(self) -> None:
        self._inflight: dict[str, asyncio.Future[Outcome]] = {}
        self._cached: dict[str, tuple[Outcome, datetime]] = {}

    def get(self, path: str) -> CacheEntry:
        """Return the current slot snapshot."""
        cached = self._cached.get(path)
        if cached is not None:
            outcome, loaded_at = cached
            return CacheEntry(
                path=path, state=EntryState.CACHED,
                outcome=outcome, loaded_at=loaded_at,
            )
        if path in self._inflight:
            return CacheEntry(path=path, state=EntryState.LOADING)
        return CacheEntry(path=path)

    def begin_load(self, path: str) -> LoadTicket:
        """Elect a leader for path or attach to the existing load."""
        cached = self._cached.get(path)
        if cached is not None:
            future: asyncio.Future[Outcome] = asyncio.get_running_loop().create_future()
            future.set_result(cached[0])
            return LoadTicket(path=path, is_leader=False, future=future)

        inflight = self._inflight.get(path)
        if inflight is not None:
            logger.debug("Attaching to in-flight load of %s", path)
            return LoadTicket(path=path, is_leader=False, future=inflight)

        future = asyncio.get_running_loop().create_future()
        self._inflight[path] = future
        return LoadTicket(path=path, is_leader=True, future=future)

    def complete(
        self, path: str, outcome: Outcome, ticket: LoadTicket | None = None,
    ) -> None:
        """Store outcome and wake every follower."""
        current = self._inflight.get(path)
        future = ticket.future if ticket is not None else current
        if future is None:
            raise CacheStateError(f"No load in flight for {path!r}")
        if future.done():
            raise CacheStateError(f"Load of {path!r} already completed")

        if future is current:
            del self._inflight[path]
            self._cached[path] = (outcome, datetime.now(timezone.utc))
        else:
            logger.debug("Load of %s finished after reset, outcome not stored", path)
        future.set_result(outcome)

    def reset(self, path: str) -> None:
        """Drop any cached outcome and detach any in-flight load."""
        self._cached.pop(path, None)
        self._inflight.pop(path, None)

    def reset_all(self) -> None:
        """Drop every slot."""
        self._cached.clear()
        self._inflight.clear()

    def entries(self) -> list[CacheEntry]:
        """Snapshots of every LOADING or CACHED slot, sorted by path."""
        paths = sorted(set(self._cached) | set(self._inflight))
        return [self.get(p) for p in paths]
