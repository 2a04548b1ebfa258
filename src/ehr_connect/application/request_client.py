"""Resource calls against the encoded-URL backend API."""

import json
import logging
from typing import Any, Dict, Optional, Sequence

from ..core.entities import BackendError
from ..core.exceptions import EhrConnectError
from ..core.protocols import AuthStrategy, HttpTransport, RequestParams
from .endpoint_resolver import EndpointResolver
from .response_classifier import classify_response
from .session_manager import SessionManager

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class RequestClient:
    """Executes get/post/put calls against named backend resources.

    Every call first ensures a valid session, then embeds the verb, the
    resolved endpoint and the params in an opaque base64 path token. A
    retryable failure (transport error, non-2xx, payload error sentinel) is
    answered with one forced session refresh and exactly one retry.
    """

    def __init__(
        self,
        session_manager: SessionManager,
        strategy: AuthStrategy,
        transport: HttpTransport,
        resolver: EndpointResolver,
        *,
        owns_transport: bool = False,
    ):
        """Initialize request client.

        Args:
            session_manager: Session lifecycle for the strategy's identity
            strategy: Backend variant (URL layout and success sentinel)
            transport: HTTP transport
            resolver: Endpoint table lookup
            owns_transport: Close the transport in ``aclose``
        """
        self._session_manager = session_manager
        self._strategy = strategy
        self._transport = transport
        self._resolver = resolver
        self._owns_transport = owns_transport

    @property
    def session_manager(self) -> SessionManager:
        return self._session_manager

    async def call(
        self,
        endpoint: str,
        params: RequestParams = None,
        body: Any = None,
        method: str = "GET",
    ) -> Any:
        """Call ``endpoint`` with one retry after a forced session refresh.

        Args:
            endpoint: Logical endpoint name, or a raw backend path
            params: Mapping (url-encoded) or pre-encoded string
            body: JSON-serializable body for writes
            method: HTTP verb

        Returns:
            Parsed JSON payload

        Raises:
            AuthenticationFailure: If (re-)authentication is rejected
            SessionDiscoveryFailure: If the handshake lacks the credential
            TransportFailure: If both attempts fail at HTTP level
            ApplicationFailure: If both attempts return a payload error
        """
        method = method.upper()
        await self._session_manager.ensure_valid_session()

        try:
            return await self._execute(endpoint, params, body, method)
        except EhrConnectError as e:
            if not e.retryable:
                logger.error(f"{method} {endpoint} failed: {e.message}")
                raise
            logger.warning(f"First {method} {endpoint} attempt failed ({e.message}), refreshing session")

        await self._session_manager.refresh()

        try:
            return await self._execute(endpoint, params, body, method)
        except EhrConnectError as e:
            logger.error(f"{method} {endpoint} failed after session refresh: {e.message}")
            raise

    async def get(self, endpoint: str, params: RequestParams = None) -> Any:
        return await self.call(endpoint, params, None, "GET")

    async def post(self, endpoint: str, params: RequestParams = None, data: Any = None) -> Any:
        return await self.call(endpoint, params, data, "POST")

    async def put(self, endpoint: str, params: RequestParams = None, data: Any = None) -> Any:
        """PUT bodies are always array-shaped on this backend."""
        return await self.call(endpoint, params, as_sequence(data), "PUT")

    def resolve_endpoint(self, endpoint: str) -> str:
        """Physical path for ``endpoint``; unknown names pass through unchanged."""
        return self._resolver.resolve(endpoint) or endpoint

    def build_url(self, endpoint: str, params: RequestParams = None, method: str = "GET") -> str:
        return self._strategy.build_request_url(method.upper(), self.resolve_endpoint(endpoint), params)

    async def _execute(self, endpoint: str, params: RequestParams, body: Any, method: str) -> Any:
        url = self.build_url(endpoint, params, method)
        headers = self._build_headers(method)
        content = json.dumps(body) if body is not None and method != "GET" else None

        logger.debug(f"{method} {endpoint} -> {url}")
        response = await self._transport.request(method, url, headers=headers, content=content)

        result = classify_response(response, self._strategy.requires_payload_sentinel)
        if isinstance(result, BackendError):
            raise result.to_exception()
        return result.payload

    def _build_headers(self, method: str) -> Dict[str, str]:
        credential = self._session_manager.credential
        headers = {"Content-Type": FORM_CONTENT_TYPE if method == "GET" else JSON_CONTENT_TYPE}
        if credential:
            headers.update(self._strategy.credential_headers(credential))
        return headers

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "RequestClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()


def as_sequence(data: Any) -> Sequence[Any]:
    """Wrap a single object in a one-element list; sequences pass through."""
    if isinstance(data, (list, tuple)):
        return data
    return [data]
