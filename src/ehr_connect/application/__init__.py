"""Application services: endpoint resolution, sessions and requests."""

from .endpoint_resolver import EndpointResolver
from .layout_client import LayoutClient
from .request_client import RequestClient, as_sequence
from .response_classifier import classify_response
from .session_manager import DEFAULT_SESSION_TTL_SECONDS, SessionManager

__all__ = [
    "EndpointResolver",
    "SessionManager",
    "RequestClient",
    "LayoutClient",
    "classify_response",
    "as_sequence",
    "DEFAULT_SESSION_TTL_SECONDS",
]
