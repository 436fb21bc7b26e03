# src/cache/base_cache_store.py — v2
"""Abstract cache store interface.

A store maps a logical path to one slot moving through
EMPTY -> LOADING -> CACHED. The single-flight primitive is begin_load():
exactly one caller per load becomes the leader, every other caller gets a
ticket that resolves to the leader's outcome.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass

from sitecontent.cache.models import CacheEntry, Outcome


class CacheStateError(Exception):
    """Raised on an illegal slot transition (e.g. complete() on an EMPTY slot)."""


@dataclass(frozen=True)
class LoadTicket:
    """Handle returned by begin_load().

    The leader must perform fetch+validate and call complete(); followers
    await wait() for the same outcome.
    """

    path: str
    is_leader: bool
    future: asyncio.Future[Outcome]

    async def wait(self) -> Outcome:
        """Wait for the outcome of the load this ticket belongs to."""
        return await asyncio.shield(self.future)


class BaseCacheStore(ABC):
    """Unified interface for content cache storage backends."""

    @abstractmethod
    def get(self, path: str) -> CacheEntry:
        """Return a snapshot of the slot for path without blocking."""

    @abstractmethod
    def begin_load(self, path: str) -> LoadTicket:
        """Atomically move EMPTY -> LOADING, electing the caller as leader.

        If the slot is already LOADING or CACHED the caller is a follower.
        """

    @abstractmethod
    def complete(
        self, path: str, outcome: Outcome, ticket: LoadTicket | None = None,
    ) -> None:
        """Move LOADING -> CACHED and release every follower.

        When ticket is given, the followers of that particular load are
        released even if the slot was reset while the load was in flight;
        in that case the outcome is not stored.

        Raises:
            CacheStateError: If there is no matching load in flight.
        """

    @abstractmethod
    def reset(self, path: str) -> None:
        """Move any state back to EMPTY."""

    @abstractmethod
    def reset_all(self) -> None:
        """Reset every slot."""

    @abstractmethod
    def entries(self) -> list[CacheEntry]:
        """List snapshots of every non-EMPTY slot."""
