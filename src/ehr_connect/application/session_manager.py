"""Session lifecycle for one backend identity."""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from ..core.entities import SessionRecord
from ..core.exceptions import AuthenticationFailure, EhrConnectError
from ..core.protocols import AuthStrategy, HttpTransport, SessionStore
from ..core.value_objects import SessionIdentity
from ..utils.datetime import utc_now
from ..utils.masking import mask_secret

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL_SECONDS = 300


class SessionManager:
    """Keeps a usable credential for one identity.

    Handles ONLY credential lifecycle: cache lookup, lazy expiry and refresh.
    Never retries a failed handshake; retry-after-refresh is RequestClient's
    job.

    Refreshes are single-flight per instance: while a handshake is running,
    further ``refresh()`` calls await that same handshake instead of starting
    another one. Distinct instances sharing a cache may still race; the cache
    keeps the last record written.
    """

    def __init__(
        self,
        strategy: AuthStrategy,
        transport: HttpTransport,
        cache: SessionStore,
        *,
        ttl_seconds: float = DEFAULT_SESSION_TTL_SECONDS,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize session manager.

        Args:
            strategy: Backend variant used for the handshake
            transport: HTTP transport for the handshake calls
            cache: Shared session store
            ttl_seconds: Lifetime of a credential after a successful handshake
            clock: Source of the current UTC time
        """
        if ttl_seconds <= 0:
            raise ValueError("Session TTL must be positive")

        self._strategy = strategy
        self._transport = transport
        self._cache = cache
        self._ttl_seconds = ttl_seconds
        self._clock = clock

        self._credential: Optional[str] = None
        self._inflight: Optional[asyncio.Task] = None

    @property
    def identity(self) -> SessionIdentity:
        return self._strategy.identity

    @property
    def session_key(self) -> str:
        return self.identity.key

    @property
    def credential(self) -> Optional[str]:
        """Credential adopted by the last successful ensure/refresh."""
        return self._credential

    @property
    def is_refreshing(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def ensure_valid_session(self) -> str:
        """Make sure a fresh credential is adopted.

        Returns:
            The active credential

        Raises:
            AuthenticationFailure: If a needed handshake is rejected
            SessionDiscoveryFailure: If the handshake response lacks the credential
        """
        key = self.session_key
        record = await self._cache.get(key)

        if record is not None:
            if record.is_usable(self._clock()):
                logger.info(f"Using cached session for {self.identity}")
                self._credential = record.credential
                return record.credential

            logger.info(f"Cached session expired for {self.identity}, refreshing")
            await self._cache.delete(key)
        else:
            logger.info(f"No cached session for {self.identity}, refreshing")

        return await self.refresh()

    async def refresh(self) -> str:
        """Authenticate against the backend and cache the new credential.

        Bypasses the cache-hit path. Joins a handshake already in flight on
        this instance rather than starting a second one.

        Returns:
            The new credential
        """
        task = self._inflight
        if task is None or task.done():
            task = asyncio.ensure_future(self._authenticate())
            task.add_done_callback(self._clear_inflight)
            self._inflight = task
        else:
            logger.debug(f"Refresh already in flight for {self.identity}, joining it")

        return await asyncio.shield(task)

    async def invalidate(self) -> None:
        """Forget the credential for this identity, locally and in the cache."""
        await self._cache.delete(self.session_key)
        self._credential = None
        logger.info(f"Session invalidated for {self.identity}")

    async def _authenticate(self) -> str:
        logger.info(f"Refreshing session for {self.identity}")
        try:
            credential = await self._strategy.authenticate(self._transport)
        except EhrConnectError as e:
            if e.retryable:
                # Transport trouble during a handshake is an authentication failure
                logger.error(f"Failed to reach backend while refreshing session for {self.identity}: {e.message}")
                raise AuthenticationFailure(
                    f"Authentication handshake failed: {e.message}",
                    principal_id=self.identity.principal_id,
                    reason="transport_error",
                    context={"error": e.to_dict()},
                ) from e
            logger.error(f"Failed to refresh session for {self.identity}: {e.message}")
            raise

        record = SessionRecord.issue(credential, self._clock(), self._ttl_seconds)
        await self._cache.set(self.session_key, record)
        self._credential = credential

        logger.info(
            f"Session refreshed for {self.identity}: {mask_secret(credential)} "
            f"valid until {record.expires_at.isoformat()}"
        )
        return credential

    def _clear_inflight(self, task: asyncio.Task) -> None:
        if self._inflight is task:
            self._inflight = None
