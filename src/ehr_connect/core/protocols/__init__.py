"""Protocols for the collaborators the core depends on."""

from .auth_strategy import AuthStrategy, RequestParams
from .http_transport import HttpTransport
from .session_store import SessionStore

__all__ = ["AuthStrategy", "HttpTransport", "SessionStore", "RequestParams"]
