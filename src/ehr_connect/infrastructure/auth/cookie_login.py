"""Username/password login that yields a Set-Cookie credential."""

import logging

from ...core.exceptions import AuthenticationFailure, SessionDiscoveryFailure
from ...core.protocols import HttpTransport
from ...core.value_objects import SessionIdentity
from .base import BaseAuthStrategy

logger = logging.getLogger(__name__)


class CookieLoginStrategy(BaseAuthStrategy):
    """Form login against the backend root.

    ``POST base_url`` with ``login_user``/``login_passwd``; the session cookie
    from ``Set-Cookie`` is the credential. Resource URLs are
    ``base_url/<token>`` and success is signalled by HTTP 2xx alone.
    """

    requires_payload_sentinel = False
    resource_prefix = ""

    def __init__(self, identity: SessionIdentity, password: str):
        super().__init__(identity)
        if not password:
            raise ValueError("Password cannot be empty")
        self._password = password

    @property
    def username(self) -> str:
        return self.identity.principal_id

    async def authenticate(self, transport: HttpTransport) -> str:
        response = await transport.request(
            "POST",
            self.base_url,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data={"login_user": self.username, "login_passwd": self._password},
        )

        if not response.is_success:
            raise AuthenticationFailure(
                f"Session initialization failed with HTTP {response.status_code}",
                principal_id=self.username,
                reason="login_rejected",
                status_code=response.status_code,
            )

        cookie = response.header("set-cookie")
        if not cookie:
            raise SessionDiscoveryFailure(
                "Login succeeded but no session cookie was returned",
                principal_id=self.username,
                missing="set-cookie",
            )

        logger.debug(f"Login accepted for {self.identity}")
        return cookie
