"""Connect-token session refresh for WebChart style backends."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from ...core.entities import is_success_sentinel
from ...core.exceptions import AuthenticationFailure, SessionDiscoveryFailure
from ...core.protocols import HttpTransport
from ...core.value_objects import SessionIdentity
from .base import BaseAuthStrategy

logger = logging.getLogger(__name__)


class ConnectTokenStrategy(BaseAuthStrategy):
    """Two-step CGI handshake deriving the credential from a pre-shared token.

    1. ``?f=layoutnouser&name=<refresh layout>`` validates the connect token
       for the user; the JSON body must carry ``status == 200``.
    2. ``?f=wcrelease&json`` answers with an ``x-db_name`` header naming the
       backend database.

    The credential is ``<db_name>_session_id=<connect_token>``. Resource URLs
    are ``base_url/json/<token>`` and 2xx bodies must carry ``meta.status ==
    "200"`` when a ``meta`` block is present.
    """

    requires_payload_sentinel = True
    resource_prefix = "json"

    REFRESH_LAYOUT = "BlueHive_Refresh_Session"
    DB_NAME_HEADER = "x-db_name"
    REFRESH_USER_AGENT = "BlueHive AI (Refresh Connection)"
    DB_NAME_USER_AGENT = "BlueHive AI (Get x-db_name)"

    def __init__(
        self,
        identity: SessionIdentity,
        connect_token: str,
        ip_address: Optional[str] = None,
    ):
        super().__init__(identity)
        if not connect_token:
            raise ValueError("Connect token cannot be empty")
        self._connect_token = connect_token
        self.ip_address = ip_address

    @property
    def user_id(self) -> str:
        return self.identity.principal_id

    @property
    def connect_token(self) -> str:
        return self._connect_token

    def cgi_url(self, pairs: List[Tuple[str, Any]], flags: Tuple[str, ...] = ()) -> str:
        """Build ``base_url?k=v&...&flag`` with bare flags such as ``raw``/``json``."""
        query = urlencode([(k, "" if v is None else v) for k, v in pairs])
        for flag in flags:
            query = f"{query}&{flag}" if query else flag
        return f"{self.base_url}?{query}"

    def build_refresh_url(self) -> str:
        pairs: List[Tuple[str, Any]] = [
            ("f", "layoutnouser"),
            ("name", self.REFRESH_LAYOUT),
            ("user_id", self.user_id),
            ("connectToken", self._connect_token),
        ]
        if self.ip_address:
            pairs.append(("ip_address", self.ip_address))
        return self.cgi_url(pairs, flags=("raw", "json"))

    def build_layout_url(
        self,
        module: str,
        name: str,
        params: Optional[Mapping[str, Any]] = None,
        raw: bool = True,
        json: bool = True,
    ) -> str:
        """URL of an authenticated layout fetch."""
        pairs: List[Tuple[str, Any]] = [
            ("f", "layout"),
            ("module", module),
            ("name", name),
            ("user_id", self.user_id),
            ("connectToken", self._connect_token),
        ]
        pairs.extend((params or {}).items())
        flags = tuple(flag for flag, enabled in (("raw", raw), ("json", json)) if enabled)
        return self.cgi_url(pairs, flags=flags)

    async def authenticate(self, transport: HttpTransport) -> str:
        await self._validate_connect_token(transport)
        db_name = await self._discover_db_name(transport)
        return f"{db_name}_session_id={self._connect_token}"

    async def _validate_connect_token(self, transport: HttpTransport) -> Dict[str, Any]:
        response = await transport.request(
            "GET",
            self.build_refresh_url(),
            headers={"User-Agent": self.REFRESH_USER_AGENT},
        )

        try:
            body = response.json()
        except ValueError as e:
            raise AuthenticationFailure(
                "Malformed response while refreshing connection",
                principal_id=self.user_id,
                reason="malformed_response",
                status_code=response.status_code,
            ) from e

        if not isinstance(body, dict) or not is_success_sentinel(body.get("status")):
            message = body.get("message") if isinstance(body, dict) else None
            raise AuthenticationFailure(
                message or "Error connecting to WebChart",
                principal_id=self.user_id,
                reason="connect_token_rejected",
                status_code=response.status_code,
            )

        logger.debug(f"Connect token accepted for user {self.identity}")
        return body

    async def _discover_db_name(self, transport: HttpTransport) -> str:
        response = await transport.request(
            "GET",
            self.cgi_url([("f", "wcrelease")], flags=("json",)),
            headers={"User-Agent": self.DB_NAME_USER_AGENT},
        )

        db_name = response.header(self.DB_NAME_HEADER)
        if not db_name:
            raise SessionDiscoveryFailure(
                "DB name not found in response",
                principal_id=self.user_id,
                missing=self.DB_NAME_HEADER,
            )
        return db_name
