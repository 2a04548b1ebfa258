"""Client factory wiring strategy, session manager and request client."""

import logging
from datetime import datetime
from typing import Callable, Mapping, Optional

from ...application import EndpointResolver, LayoutClient, RequestClient, SessionManager
from ...config.client_config import BackendVariant, ClientConfig
from ...config.endpoints import DEFAULT_ENDPOINTS
from ...core.protocols import AuthStrategy, HttpTransport, SessionStore
from ...core.value_objects import SessionIdentity
from ...utils.datetime import utc_now
from ..auth import ConnectTokenStrategy, CookieLoginStrategy
from ..cache import get_default_session_cache
from ..transport import HttpxTransport

logger = logging.getLogger(__name__)


class ClientFactory:
    """Builds clients from a resolved ClientConfig.

    Handles ONLY instantiation. Clients built by the same factory share one
    transport and, unless a cache is injected, the process-wide session cache.
    A transport created here belongs to the factory and is closed by
    ``aclose()``; closing an individual client never closes it.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[HttpTransport] = None,
        cache: Optional[SessionStore] = None,
        endpoints: Optional[Mapping[str, str]] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize client factory.

        Args:
            config: Resolved client configuration
            transport: HTTP transport (an HttpxTransport is created if omitted)
            cache: Session store (process-wide default if omitted)
            endpoints: Endpoint table (DEFAULT_ENDPOINTS if omitted)
            clock: Source of the current UTC time
        """
        self.config = config
        self._owns_transport = transport is None
        self._transport = transport or HttpxTransport(
            timeout_seconds=config.timeout_seconds,
            verify_ssl=config.verify_ssl,
            user_agent=config.user_agent,
        )
        self._cache = cache if cache is not None else get_default_session_cache()
        self._endpoints = endpoints if endpoints is not None else DEFAULT_ENDPOINTS
        self._clock = clock

    @property
    def identity(self) -> SessionIdentity:
        return SessionIdentity(self.config.base_url.rstrip("/"), self.config.principal_id)

    def create_strategy(self) -> AuthStrategy:
        """Create the AuthStrategy for the configured backend variant."""
        if self.config.backend == BackendVariant.CONNECT_TOKEN:
            return ConnectTokenStrategy(
                self.identity,
                self.config.connect_token or "",
                ip_address=self.config.ip_address,
            )
        if self.config.backend == BackendVariant.COOKIE_LOGIN:
            return CookieLoginStrategy(self.identity, self.config.secret or "")
        raise ValueError(f"Unsupported backend variant: {self.config.backend}")

    def create_session_manager(self, strategy: Optional[AuthStrategy] = None) -> SessionManager:
        return SessionManager(
            strategy or self.create_strategy(),
            self._transport,
            self._cache,
            ttl_seconds=self.config.session_ttl_seconds,
            clock=self._clock,
        )

    def create_request_client(self, *, owns_transport: bool = False) -> RequestClient:
        """Create a request client on the shared transport.

        Args:
            owns_transport: Hand the transport over to the client, which then
                closes it on ``aclose``. Only for a factory that builds a
                single client.
        """
        strategy = self.create_strategy()
        client = RequestClient(
            self.create_session_manager(strategy),
            strategy,
            self._transport,
            EndpointResolver(self._endpoints),
            owns_transport=owns_transport,
        )
        logger.debug(f"Created request client for {strategy!r}")
        return client

    def create_layout_client(self) -> LayoutClient:
        """Create a layout client; only connect-token backends serve layouts.

        Raises:
            ValueError: If the backend variant is not connect_token
        """
        strategy = self.create_strategy()
        if not isinstance(strategy, ConnectTokenStrategy):
            raise ValueError("Layouts are only available on connect_token backends")
        return LayoutClient(self.create_session_manager(strategy), strategy, self._transport)

    async def aclose(self) -> None:
        """Close the transport if this factory created it."""
        if self._owns_transport:
            await self._transport.aclose()
            logger.debug("Closed factory transport")

    async def __aenter__(self) -> "ClientFactory":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()


def create_request_client(
    config: ClientConfig,
    *,
    transport: Optional[HttpTransport] = None,
    cache: Optional[SessionStore] = None,
    endpoints: Optional[Mapping[str, str]] = None,
) -> RequestClient:
    """Build a RequestClient for ``config``.

    Example::

        async with create_request_client(get_settings().to_client_config()) as client:
            patient = await client.get("Patient", {"id": 42})
    """
    factory = ClientFactory(config, transport=transport, cache=cache, endpoints=endpoints)
    # The factory is discarded, so its single client takes over a transport created here
    return factory.create_request_client(owns_transport=transport is None)
