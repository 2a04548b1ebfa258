"""Core domain objects.

Value objects, entities, exceptions and protocols. No third-party imports
and no I/O live here.
"""

from .entities import BackendError, BackendResponse, SessionRecord, Success, TransportResponse
from .exceptions import (
    ApplicationFailure,
    AuthenticationFailure,
    EhrConnectError,
    SessionDiscoveryFailure,
    TransportFailure,
)
from .protocols import AuthStrategy, HttpTransport, RequestParams, SessionStore
from .value_objects import SessionIdentity

__all__ = [
    # Value objects
    "SessionIdentity",

    # Entities
    "SessionRecord",
    "TransportResponse",
    "Success",
    "BackendError",
    "BackendResponse",

    # Exceptions
    "EhrConnectError",
    "AuthenticationFailure",
    "SessionDiscoveryFailure",
    "TransportFailure",
    "ApplicationFailure",

    # Protocols
    "AuthStrategy",
    "HttpTransport",
    "SessionStore",
    "RequestParams",
]
