"""Request execution exceptions.

Both kinds are retryable: the backend reports expired sessions either with a
non-2xx status or inside a 200 payload.
"""

from typing import Any, Optional

from .base import EhrConnectError


class TransportFailure(EhrConnectError):
    """Network error, timeout or non-2xx HTTP status."""

    retryable = True

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message, details={"status_code": status_code, "url": url})


class ApplicationFailure(EhrConnectError):
    """2xx response whose payload carries an error sentinel."""

    retryable = True

    def __init__(
        self,
        message: str,
        *,
        code: Optional[Any] = None,
        url: Optional[str] = None,
    ) -> None:
        self.code = code
        self.url = url
        super().__init__(message, details={"backend_code": code, "url": url})
