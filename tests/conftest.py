"""Pytest configuration and fixtures for ehr-connect tests."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import asyncio
import json

import pytest

from ehr_connect.application import EndpointResolver, RequestClient, SessionManager
from ehr_connect.core.entities import TransportResponse
from ehr_connect.core.value_objects import SessionIdentity
from ehr_connect.infrastructure.auth.base import BaseAuthStrategy
from ehr_connect.infrastructure.cache import MemorySessionCache


EXAMPLE_ENDPOINTS = {
    "Patient": "patients",
    "Encounter": "encounters",
    "Document": "documents",
}


class FakeClock:
    """Controllable UTC clock."""

    def __init__(self, start: Optional[datetime] = None):
        self.start = start or datetime(2026, 1, 1, tzinfo=timezone.utc)
        self.now = self.start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)

    def at(self, seconds: float) -> datetime:
        """Absolute time ``seconds`` after the start."""
        return self.start + timedelta(seconds=seconds)


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    content: Optional[str] = None
    data: Optional[Mapping[str, str]] = None


Reply = Union[TransportResponse, Exception]


class FakeTransport:
    """HttpTransport double replaying queued responses in order."""

    def __init__(self, responder: Optional[Callable[[RecordedRequest], Reply]] = None):
        self.requests: List[RecordedRequest] = []
        self.replies: List[Reply] = []
        self.responder = responder
        self.closed = False

    def queue(self, *replies: Reply) -> "FakeTransport":
        self.replies.extend(replies)
        return self

    async def request(self, method, url, *, headers=None, content=None, data=None) -> TransportResponse:
        recorded = RecordedRequest(method, url, dict(headers or {}), content, data)
        self.requests.append(recorded)
        reply = self.responder(recorded) if self.responder else self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def aclose(self) -> None:
        self.closed = True


class StubStrategy(BaseAuthStrategy):
    """AuthStrategy issuing ``session_id=cred-<n>`` without network access."""

    def __init__(
        self,
        identity: SessionIdentity,
        *,
        resource_prefix: str = "",
        requires_payload_sentinel: bool = False,
    ):
        super().__init__(identity)
        self.resource_prefix = resource_prefix
        self.requires_payload_sentinel = requires_payload_sentinel
        self.calls = 0
        self.errors: List[Exception] = []
        self.gate: Optional[asyncio.Event] = None

    async def authenticate(self, transport) -> str:
        self.calls += 1
        call = self.calls
        if self.gate is not None:
            await self.gate.wait()
        if self.errors:
            raise self.errors.pop(0)
        return f"session_id=cred-{call}"


def build_json_response(payload: Any, status_code: int = 200, headers: Optional[Mapping[str, str]] = None) -> TransportResponse:
    return TransportResponse.build(status_code, json.dumps(payload), headers or {})


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache():
    """Fresh session cache per test."""
    return MemorySessionCache()


@pytest.fixture
def identity():
    return SessionIdentity("https://api.test", "user1")


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def strategy(identity):
    return StubStrategy(identity)


@pytest.fixture
def session_manager(strategy, transport, cache, clock):
    return SessionManager(strategy, transport, cache, ttl_seconds=300, clock=clock)


@pytest.fixture
def resolver():
    return EndpointResolver(EXAMPLE_ENDPOINTS)


@pytest.fixture
def request_client(session_manager, strategy, transport, resolver):
    return RequestClient(session_manager, strategy, transport, resolver)


@pytest.fixture
def json_response():
    """Builder for JSON transport responses."""
    return build_json_response


@pytest.fixture
def make_transport():
    """Builder for FakeTransport instances driven by a responder function."""
    return FakeTransport


@pytest.fixture
def make_strategy():
    """Builder for StubStrategy instances."""
    return StubStrategy
