"""Session store protocol contract."""

from typing import Optional, Protocol, runtime_checkable

from ..entities import SessionRecord


@runtime_checkable
class SessionStore(Protocol):
    """Keyed store for session records.

    Stores never evaluate expiry; SessionManager decides staleness on read.
    """

    async def get(self, key: str) -> Optional[SessionRecord]:
        ...

    async def set(self, key: str, record: SessionRecord) -> None:
        """Insert or overwrite the record for ``key``."""
        ...

    async def delete(self, key: str) -> None:
        """Remove the record for ``key``; missing keys are ignored."""
        ...
