"""HTTP transport protocol contract."""

from typing import Mapping, Optional, Protocol, runtime_checkable

from ..entities import TransportResponse


@runtime_checkable
class HttpTransport(Protocol):
    """Protocol for executing HTTP requests.

    Implementations must raise TransportFailure for network errors and
    timeouts, and must NOT raise for non-2xx statuses; status handling belongs
    to response classification.
    """

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        content: Optional[str] = None,
        data: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """Execute a request.

        Args:
            method: HTTP verb
            url: Absolute URL
            headers: Request headers
            content: Raw request body (already serialized)
            data: Form fields, sent url-encoded

        Returns:
            Transport response

        Raises:
            TransportFailure: On network errors or timeouts
        """
        ...

    async def aclose(self) -> None:
        """Release pooled connections."""
        ...
