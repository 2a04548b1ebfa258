"""Exceptions raised by ehr-connect.

- AuthenticationFailure / SessionDiscoveryFailure come from the session manager
  and are never retried.
- TransportFailure / ApplicationFailure come from request execution and are
  retried once after a forced session refresh.
"""

from .base import EhrConnectError
from .authentication import AuthenticationFailure, SessionDiscoveryFailure
from .request import ApplicationFailure, TransportFailure

__all__ = [
    "EhrConnectError",
    "AuthenticationFailure",
    "SessionDiscoveryFailure",
    "TransportFailure",
    "ApplicationFailure",
]
