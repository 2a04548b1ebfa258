"""In-memory session cache shared by session managers."""

import asyncio
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from ...core.entities import SessionRecord

logger = logging.getLogger(__name__)


class MemorySessionCache:
    """Process-local keyed store of session records.

    Handles ONLY storage. Expiry is judged by SessionManager at read time and
    stale entries are removed lazily by it; there is no background eviction.
    Concurrent writers for the same key are last-writer-wins.
    """

    def __init__(self) -> None:
        self._records: Dict[str, SessionRecord] = {}
        self._lock = asyncio.Lock()

        # Statistics
        self._hits = 0
        self._misses = 0
        self._writes = 0
        self._deletes = 0

    async def get(self, key: str) -> Optional[SessionRecord]:
        """Get the cached record for ``key``.

        Args:
            key: Session identity key

        Returns:
            Stored record (possibly stale) or None
        """
        async with self._lock:
            record = self._records.get(key)
            if record is None:
                self._misses += 1
            else:
                self._hits += 1
            return record

    async def set(self, key: str, record: SessionRecord) -> None:
        """Store ``record`` under ``key``, overwriting any previous record."""
        async with self._lock:
            self._records[key] = record
            self._writes += 1
            logger.debug(f"Cached session record for {key} until {record.expires_at.isoformat()}")

    async def delete(self, key: str) -> None:
        """Remove ``key``. Deleting a missing key is a no-op."""
        async with self._lock:
            if self._records.pop(key, None) is not None:
                self._deletes += 1
                logger.debug(f"Removed session record for {key}")

    async def clear(self) -> None:
        """Clear all cached records."""
        async with self._lock:
            self._records.clear()
            logger.debug("Cleared session cache")

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        lookups = self._hits + self._misses
        return {
            "size": len(self._records),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": self._hits / lookups if lookups else 0,
            "writes": self._writes,
            "deletes": self._deletes,
        }


@lru_cache()
def get_default_session_cache() -> MemorySessionCache:
    """Process-wide cache used when no cache is injected."""
    return MemorySessionCache()
