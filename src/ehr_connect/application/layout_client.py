"""Layout fetches for connect-token (WebChart) backends."""

import logging
from typing import Any, Mapping, Optional

from ..core.exceptions import ApplicationFailure, TransportFailure
from ..core.protocols import HttpTransport
from ..infrastructure.auth.connect_token import ConnectTokenStrategy
from .session_manager import SessionManager

logger = logging.getLogger(__name__)


class LayoutClient:
    """Fetches named CGI layouts with the session cookie attached.

    Layout URLs carry the user id and connect token in the query string in
    addition to the cookie credential. No retry is attempted.
    """

    def __init__(
        self,
        session_manager: SessionManager,
        strategy: ConnectTokenStrategy,
        transport: HttpTransport,
    ):
        self._session_manager = session_manager
        self._strategy = strategy
        self._transport = transport

    async def fetch_layout(
        self,
        module: str,
        name: str,
        params: Optional[Mapping[str, Any]] = None,
        raw: bool = True,
        json: bool = True,
    ) -> Any:
        """Fetch a layout.

        Args:
            module: Layout module name
            name: Layout name
            params: Extra CGI parameters (``raw``/``json`` are controlled by flags)
            raw: Append the ``&raw`` flag
            json: Append the ``&json`` flag and decode the body as JSON

        Returns:
            Parsed JSON when ``json`` is set, else the response text

        Raises:
            TransportFailure: On network errors or non-2xx responses
            ApplicationFailure: If a JSON layout body cannot be decoded
        """
        credential = await self._session_manager.ensure_valid_session()
        url = self._strategy.build_layout_url(module, name, params, raw=raw, json=json)

        logger.info(f"Fetching layout {module}/{name} for {self._session_manager.identity}")
        response = await self._transport.request(
            "GET", url, headers=self._strategy.credential_headers(credential)
        )

        if not response.is_success:
            logger.error(f"Layout {module}/{name} failed with HTTP {response.status_code}")
            raise TransportFailure(
                f"Layout {module}/{name} failed with HTTP {response.status_code}",
                status_code=response.status_code,
                url=response.url,
            )

        if not json:
            return response.text

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Layout {module}/{name} returned an undecodable body: {e}")
            raise ApplicationFailure(str(e), url=response.url) from e
