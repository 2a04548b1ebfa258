"""Tests for the in-memory session cache."""

from datetime import datetime, timezone

import pytest

from ehr_connect.core.entities import SessionRecord
from ehr_connect.core.protocols import SessionStore
from ehr_connect.infrastructure.cache import MemorySessionCache, get_default_session_cache


NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestMemorySessionCache:
    """Test keyed storage semantics."""

    def test_satisfies_session_store_protocol(self, cache):
        assert isinstance(cache, SessionStore)

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, cache):
        assert await cache.get("missing") is None

    @pytest.mark.asyncio
    async def test_set_overwrites(self, cache):
        first = SessionRecord.issue("session_id=1", NOW, 300)
        second = SessionRecord.issue("session_id=2", NOW, 300)

        await cache.set("key", first)
        await cache.set("key", second)

        assert await cache.get("key") is second
        assert len(cache) == 1

    @pytest.mark.asyncio
    async def test_get_returns_stale_records(self, cache):
        """Expiry is the session manager's call, not the cache's."""
        stale = SessionRecord.issue("session_id=1", datetime(2000, 1, 1, tzinfo=timezone.utc), 1)
        await cache.set("key", stale)

        assert await cache.get("key") is stale

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, cache):
        await cache.set("key", SessionRecord.issue("session_id=1", NOW, 300))

        await cache.delete("key")
        await cache.delete("key")

        assert "key" not in cache
        assert cache.get_stats()["deletes"] == 1

    @pytest.mark.asyncio
    async def test_clear(self, cache):
        await cache.set("a", SessionRecord.issue("session_id=1", NOW, 300))
        await cache.set("b", SessionRecord.issue("session_id=2", NOW, 300))

        await cache.clear()

        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_stats_track_hits_and_misses(self, cache):
        await cache.set("key", SessionRecord.issue("session_id=1", NOW, 300))
        await cache.get("key")
        await cache.get("other")

        stats = cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 0.5
        assert stats["writes"] == 1

    def test_default_cache_is_process_wide(self):
        assert get_default_session_cache() is get_default_session_cache()
        assert isinstance(get_default_session_cache(), MemorySessionCache)
