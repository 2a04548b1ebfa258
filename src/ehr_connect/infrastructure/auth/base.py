"""Shared URL encoding for backend strategies."""

import base64
from abc import ABC, abstractmethod
from typing import Dict
from urllib.parse import urlencode

from ...core.protocols import HttpTransport, RequestParams
from ...core.value_objects import SessionIdentity


def encode_params(params: RequestParams) -> str:
    """Render request params as the query part of an encoded segment.

    Mappings are url-encoded, strings are taken verbatim and None gives "".
    """
    if params is None:
        return ""
    if isinstance(params, str):
        return params
    return urlencode({k: v for k, v in params.items() if v is not None}, doseq=True)


def encode_segment(method: str, path: str, params: RequestParams = None) -> str:
    """Base64 of ``METHOD/path[/params]``, the opaque resource token."""
    query = encode_params(params)
    raw = f"{method.upper()}/{path}/{query}" if query else f"{method.upper()}/{path}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


class BaseAuthStrategy(ABC):
    """Common behaviour of both backend variants.

    Subclasses provide the handshake and the URL prefix under which encoded
    resource tokens are served. The credential always travels as a cookie.
    """

    requires_payload_sentinel: bool = False
    resource_prefix: str = ""

    def __init__(self, identity: SessionIdentity):
        self.identity = identity

    @property
    def base_url(self) -> str:
        return self.identity.base_url.rstrip("/")

    @abstractmethod
    async def authenticate(self, transport: HttpTransport) -> str:
        ...

    def build_request_url(self, method: str, path: str, params: RequestParams = None) -> str:
        token = encode_segment(method, path, params)
        prefix = f"/{self.resource_prefix}" if self.resource_prefix else ""
        return f"{self.base_url}{prefix}/{token}"

    def credential_headers(self, credential: str) -> Dict[str, str]:
        return {"Cookie": credential}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.identity})"
