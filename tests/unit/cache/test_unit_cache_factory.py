# tests/unit/cache/test_unit_cache_factory.py — v4
"""Tests for cache/cache_factory.py."""

from __future__ import annotations

import pytest

from sitecontent.cache.cache_factory import create_cache_store
from sitecontent.cache.memory_store import MemoryCacheStore
from sitecontent.config.settings import Settings


class TestCreateCacheStore:
    def test_default_memory(self):
        assert isinstance(create_cache_store(), MemoryCacheStore)

    def test_from_settings(self):
        s = Settings(_env_file=None, cache_backend="memory")
        assert isinstance(create_cache_store(s), MemoryCacheStore)

    def test_fresh_instance_each_call(self):
        assert create_cache_store() is not create_cache_store()

    def test_unsupported_backend(self):
        """Settings validation rejects unknown backends before the factory runs."""
        with pytest.raises(ValueError):
            Settings(_env_file=None, cache_backend="redis")
