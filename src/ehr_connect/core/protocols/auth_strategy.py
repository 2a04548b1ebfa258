"""Backend authentication strategy contract."""

from typing import Any, Dict, Mapping, Optional, Protocol, Union, runtime_checkable

from ..value_objects import SessionIdentity
from .http_transport import HttpTransport

RequestParams = Optional[Union[str, Mapping[str, Any]]]


@runtime_checkable
class AuthStrategy(Protocol):
    """One backend variant: how to log in and how to address resources.

    Attributes:
        identity: Backend + principal the strategy authenticates as
        requires_payload_sentinel: Whether 2xx bodies must carry the "200"
            status sentinel to count as success
    """

    identity: SessionIdentity
    requires_payload_sentinel: bool

    async def authenticate(self, transport: HttpTransport) -> str:
        """Run the handshake and return the credential.

        Raises:
            AuthenticationFailure: Handshake rejected or malformed
            SessionDiscoveryFailure: Credential carrier missing from response
        """
        ...

    def build_request_url(self, method: str, path: str, params: RequestParams = None) -> str:
        """Build the encoded resource URL for ``method`` on ``path``."""
        ...

    def credential_headers(self, credential: str) -> Dict[str, str]:
        """Headers that carry ``credential`` on an authorized request."""
        ...
