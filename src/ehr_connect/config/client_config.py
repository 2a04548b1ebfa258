"""Resolved client configuration consumed by the core."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BackendVariant(str, Enum):
    """Supported backend authentication variants."""
    COOKIE_LOGIN = "cookie_login"        # username/password, Set-Cookie credential
    CONNECT_TOKEN = "connect_token"      # user id + connect token, x-db_name derived credential


@dataclass(frozen=True)
class ClientConfig:
    """Everything needed to build a client, already validated.

    ``principal_id`` is the login username for cookie backends and the user
    id for connect-token backends.
    """

    base_url: str
    principal_id: str
    backend: BackendVariant = BackendVariant.COOKIE_LOGIN
    secret: Optional[str] = None
    connect_token: Optional[str] = None
    ip_address: Optional[str] = None
    session_ttl_seconds: float = 300
    timeout_seconds: float = 30.0
    verify_ssl: bool = True
    user_agent: str = "ehr-connect/0.1"

    def __post_init__(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base_url format: {self.base_url}")
        if not self.principal_id:
            raise ValueError("principal_id is required")
        if self.backend == BackendVariant.COOKIE_LOGIN and not self.secret:
            raise ValueError("secret (password) is required for cookie_login backends")
        if self.backend == BackendVariant.CONNECT_TOKEN and not self.connect_token:
            raise ValueError("connect_token is required for connect_token backends")
        if self.session_ttl_seconds <= 0:
            raise ValueError("session_ttl_seconds must be positive")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
