"""Authentication handshake exceptions."""

from typing import Any, Dict, Optional

from ...utils.masking import mask_principal
from .base import EhrConnectError


class AuthenticationFailure(EhrConnectError):
    """The backend rejected the handshake or answered with a malformed response."""

    def __init__(
        self,
        message: str = "Authentication failed",
        *,
        principal_id: Optional[str] = None,
        reason: Optional[str] = None,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.principal_id = mask_principal(principal_id)
        self.reason = reason
        self.status_code = status_code
        super().__init__(
            message,
            details={
                "principal_id": self.principal_id,
                "reason": reason,
                "status_code": status_code,
                **(context or {}),
            },
        )


class SessionDiscoveryFailure(EhrConnectError):
    """A handshake succeeded but the expected credential carrier was missing.

    Raised when e.g. the ``Set-Cookie`` or ``x-db_name`` header is absent from
    an otherwise successful authentication response.
    """

    def __init__(
        self,
        message: str,
        *,
        principal_id: Optional[str] = None,
        missing: Optional[str] = None,
    ) -> None:
        self.principal_id = mask_principal(principal_id)
        self.missing = missing
        super().__init__(
            message,
            details={"principal_id": self.principal_id, "missing": missing},
        )
