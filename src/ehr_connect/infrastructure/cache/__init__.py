"""Session cache implementations."""

from .memory_session_cache import MemorySessionCache, get_default_session_cache

__all__ = ["MemorySessionCache", "get_default_session_cache"]
