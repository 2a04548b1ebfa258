"""httpx implementation of the HTTP transport protocol."""

import logging
from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Mapping, Optional

import httpx

from ...core.entities import TransportResponse
from ...core.exceptions import TransportFailure

logger = logging.getLogger(__name__)


class HttpxTransport:
    """HTTP transport backed by a shared ``httpx.AsyncClient``.

    Network errors and timeouts are raised as TransportFailure. Non-2xx
    statuses are returned as-is for response classification.

    The client never stores cookies: credentials travel only in the explicit
    ``Cookie`` header built per request, so a login for one identity cannot
    leak into handshakes of another identity on the same transport.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout_seconds: float = 30.0,
        verify_ssl: bool = True,
        user_agent: str = "ehr-connect/0.1",
    ):
        """Initialize transport.

        Args:
            client: Preconfigured client (tests pass one built on httpx.MockTransport)
            timeout_seconds: Total request timeout when the client is created here
            verify_ssl: Whether to verify TLS certificates
            user_agent: Default User-Agent header
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds),
            verify=verify_ssl,
            follow_redirects=True,
            headers={"User-Agent": user_agent},
        )
        self._client.cookies = _rejecting_cookie_jar()

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        content: Optional[str] = None,
        data: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        try:
            response = await self._client.request(
                method,
                url,
                headers=dict(headers or {}),
                content=content,
                data=data,
            )
        except httpx.TimeoutException as e:
            logger.error(f"{method} {url} timed out: {e}")
            raise TransportFailure(f"Request timed out: {e}", url=url) from e
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportFailure(f"Request failed: {e}", url=url) from e

        return TransportResponse.build(
            status_code=response.status_code,
            text=response.text,
            headers=_flatten_headers(response.headers),
            url=str(response.url),
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()


def _rejecting_cookie_jar() -> CookieJar:
    # An empty allow-list refuses every domain
    return CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))


def _flatten_headers(headers: httpx.Headers) -> dict:
    # Repeated headers (several Set-Cookie lines) are joined with "; " so the
    # value can be sent back verbatim in a Cookie header.
    flattened = {}
    for name in headers.keys():
        values = headers.get_list(name)
        if name.lower() == "set-cookie":
            flattened[name] = "; ".join(v.split(";", 1)[0] for v in values)
        else:
            flattened[name] = ", ".join(values)
    return flattened
