"""ehr-connect: session-caching client for legacy CGI-style medical records APIs.

Typical use::

    from ehr_connect import create_request_client, get_settings

    async with create_request_client(get_settings().to_client_config()) as client:
        patient = await client.get("Patient", {"id": 42})
        await client.put("Patient", data={"id": 42, "first_name": "Ada"})
"""

from .__version__ import __version__
from .application import (
    EndpointResolver,
    LayoutClient,
    RequestClient,
    SessionManager,
    classify_response,
)
from .config import (
    DEFAULT_ENDPOINTS,
    BackendVariant,
    ClientConfig,
    EhrConnectSettings,
    LoggingConfig,
    get_settings,
)
from .core import (
    ApplicationFailure,
    AuthenticationFailure,
    BackendError,
    EhrConnectError,
    SessionDiscoveryFailure,
    SessionIdentity,
    SessionRecord,
    Success,
    TransportFailure,
    TransportResponse,
)
from .infrastructure.auth import ConnectTokenStrategy, CookieLoginStrategy
from .infrastructure.cache import MemorySessionCache, get_default_session_cache
from .infrastructure.factories import ClientFactory, create_request_client
from .infrastructure.transport import HttpxTransport

__all__ = [
    "__version__",
    # Entry points
    "create_request_client",
    "ClientFactory",
    "RequestClient",
    "LayoutClient",
    "SessionManager",
    "EndpointResolver",
    "classify_response",
    # Strategies, cache, transport
    "CookieLoginStrategy",
    "ConnectTokenStrategy",
    "MemorySessionCache",
    "get_default_session_cache",
    "HttpxTransport",
    # Configuration
    "ClientConfig",
    "BackendVariant",
    "EhrConnectSettings",
    "get_settings",
    "LoggingConfig",
    "DEFAULT_ENDPOINTS",
    # Domain objects
    "SessionIdentity",
    "SessionRecord",
    "TransportResponse",
    "Success",
    "BackendError",
    # Errors
    "EhrConnectError",
    "AuthenticationFailure",
    "SessionDiscoveryFailure",
    "TransportFailure",
    "ApplicationFailure",
]
