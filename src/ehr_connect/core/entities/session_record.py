"""Cached session record."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict

from ...utils.masking import mask_secret


@dataclass(frozen=True)
class SessionRecord:
    """Credential obtained by one successful authentication handshake.

    A record is usable while ``now < expires_at``. Records are never refreshed
    in place; each handshake produces a new one.
    """

    credential: str
    refreshed_at: datetime
    expires_at: datetime

    @classmethod
    def issue(cls, credential: str, now: datetime, ttl_seconds: float) -> "SessionRecord":
        """Create a record valid for ``ttl_seconds`` starting at ``now``."""
        if ttl_seconds <= 0:
            raise ValueError("Session TTL must be positive")
        return cls(
            credential=credential,
            refreshed_at=now,
            expires_at=now + timedelta(seconds=ttl_seconds),
        )

    def is_usable(self, now: datetime) -> bool:
        return now < self.expires_at

    def remaining_seconds(self, now: datetime) -> float:
        return max(0.0, (self.expires_at - now).total_seconds())

    def to_dict(self) -> Dict[str, Any]:
        """Log-safe representation."""
        return {
            "credential": mask_secret(self.credential),
            "refreshed_at": self.refreshed_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
        }

    def __repr__(self) -> str:
        return (
            f"SessionRecord(credential={mask_secret(self.credential)!r}, "
            f"expires_at={self.expires_at.isoformat()})"
        )
