# tests/unit/cache/test_unit_memory_store.py — v1
"""Tests for cache/memory_store.py — slot transitions and single-flight."""

from __future__ import annotations

import asyncio

import pytest

from sitecontent.cache.base_cache_store import CacheStateError
from sitecontent.cache.memory_store import MemoryCacheStore
from sitecontent.cache.models import EntryState, FieldError, Invalid, Valid

NAV = "content/navigation.json"


class TestTransitions:
    def test_unknown_path_is_empty(self):
        store = MemoryCacheStore()
        assert store.get(NAV).state is EntryState.EMPTY

    @pytest.mark.asyncio
    async def test_first_caller_is_leader(self):
        store = MemoryCacheStore()
        ticket = store.begin_load(NAV)
        assert ticket.is_leader is True
        assert store.get(NAV).state is EntryState.LOADING

    @pytest.mark.asyncio
    async def test_second_caller_is_follower(self):
        store = MemoryCacheStore()
        leader = store.begin_load(NAV)
        follower = store.begin_load(NAV)
        assert follower.is_leader is False
        assert follower.future is leader.future

    @pytest.mark.asyncio
    async def test_complete_caches_and_releases(self):
        store = MemoryCacheStore()
        leader = store.begin_load(NAV)
        follower = store.begin_load(NAV)
        outcome = Valid(content={"ok": True})

        store.complete(NAV, outcome)

        assert await follower.wait() is outcome
        entry = store.get(NAV)
        assert entry.state is EntryState.CACHED
        assert entry.outcome is outcome
        assert entry.loaded_at is not None
        assert leader.future.done()

    @pytest.mark.asyncio
    async def test_begin_on_cached_returns_resolved_follower(self):
        store = MemoryCacheStore()
        store.begin_load(NAV)
        outcome = Invalid(kind="source_not_found", errors=(FieldError(message="gone"),))
        store.complete(NAV, outcome)

        ticket = store.begin_load(NAV)
        assert ticket.is_leader is False
        assert await ticket.wait() is outcome

    @pytest.mark.asyncio
    async def test_complete_without_load_raises(self):
        store = MemoryCacheStore()
        with pytest.raises(CacheStateError):
            store.complete(NAV, Valid(content=1))

    @pytest.mark.asyncio
    async def test_double_complete_raises(self):
        store = MemoryCacheStore()
        ticket = store.begin_load(NAV)
        store.complete(NAV, Valid(content=1), ticket)
        with pytest.raises(CacheStateError):
            store.complete(NAV, Valid(content=2), ticket)


class TestReset:
    @pytest.mark.asyncio
    async def test_reset_cached(self):
        store = MemoryCacheStore()
        store.begin_load(NAV)
        store.complete(NAV, Valid(content=1))
        store.reset(NAV)
        assert store.get(NAV).state is EntryState.EMPTY
        assert store.begin_load(NAV).is_leader is True

    @pytest.mark.asyncio
    async def test_reset_while_loading_detaches(self):
        store = MemoryCacheStore()
        old = store.begin_load(NAV)
        old_follower = store.begin_load(NAV)
        store.reset(NAV)

        new = store.begin_load(NAV)
        assert new.is_leader is True

        stale = Valid(content="stale")
        store.complete(NAV, stale, old)
        assert await old_follower.wait() is stale
        assert store.get(NAV).state is EntryState.LOADING

        fresh = Valid(content="fresh")
        store.complete(NAV, fresh, new)
        assert store.get(NAV).outcome is fresh

    @pytest.mark.asyncio
    async def test_reset_all_and_entries(self):
        store = MemoryCacheStore()
        store.begin_load("b.json")
        store.begin_load("a.json")
        store.complete("a.json", Valid(content=1))
        assert [(e.path, e.state) for e in store.entries()] == [
            ("a.json", EntryState.CACHED),
            ("b.json", EntryState.LOADING),
        ]
        store.reset_all()
        assert store.entries() == []


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_racing_callers_elect_one_leader(self):
        store = MemoryCacheStore()

        async def claim() -> bool:
            await asyncio.sleep(0)
            return store.begin_load(NAV).is_leader

        results = await asyncio.gather(*(claim() for _ in range(50)))
        assert results.count(True) == 1
