"""Tests for layout fetches on connect-token backends."""

from urllib.parse import parse_qsl, urlsplit

import pytest
import pytest_asyncio

from ehr_connect.application import LayoutClient, SessionManager
from ehr_connect.core.entities import SessionRecord, TransportResponse
from ehr_connect.core.exceptions import ApplicationFailure, TransportFailure
from ehr_connect.core.value_objects import SessionIdentity
from ehr_connect.infrastructure.auth import ConnectTokenStrategy

CREDENTIAL = "wcdb_session_id=sampleToken123"


@pytest.fixture
def token_strategy():
    return ConnectTokenStrategy(SessionIdentity("https://ehr.test/webchart.cgi", "user123"), "sampleToken123")


@pytest_asyncio.fixture
async def layout_client(token_strategy, transport, cache, clock):
    """Layout client whose session is already cached."""
    await cache.set(token_strategy.identity.key, SessionRecord.issue(CREDENTIAL, clock(), 300))
    manager = SessionManager(token_strategy, transport, cache, clock=clock)
    return LayoutClient(manager, token_strategy, transport)


class TestFetchLayout:
    """Test layout URL, credential and response handling."""

    @pytest.mark.asyncio
    async def test_json_layout(self, layout_client, transport, json_response):
        transport.queue(json_response({"rows": [1, 2]}))

        result = await layout_client.fetch_layout("chart", "Summary", {"pat_id": 18})

        assert result == {"rows": [1, 2]}
        request = transport.requests[0]
        assert request.method == "GET"
        assert request.headers == {"Cookie": CREDENTIAL}
        query = urlsplit(request.url).query
        assert query.endswith("&raw&json")
        assert dict(parse_qsl(query))["pat_id"] == "18"

    @pytest.mark.asyncio
    async def test_non_2xx_raises_transport_failure(self, layout_client, transport):
        transport.queue(TransportResponse.build(502, "bad gateway", url="https://ehr.test/webchart.cgi"))

        with pytest.raises(TransportFailure) as exc_info:
            await layout_client.fetch_layout("chart", "Summary")

        assert exc_info.value.status_code == 502
        assert exc_info.value.url == "https://ehr.test/webchart.cgi"
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_text_layout_returns_raw_body(self, layout_client, transport):
        transport.queue(TransportResponse.build(200, "<table><tr><td>Jane</td></tr></table>"))

        result = await layout_client.fetch_layout("chart", "Summary", json=False)

        assert result == "<table><tr><td>Jane</td></tr></table>"
        assert not transport.requests[0].url.endswith("json")

    @pytest.mark.asyncio
    async def test_undecodable_json_raises_application_failure(self, layout_client, transport):
        transport.queue(TransportResponse.build(200, "<html>Please log in</html>"))

        with pytest.raises(ApplicationFailure):
            await layout_client.fetch_layout("chart", "Summary")

    @pytest.mark.asyncio
    async def test_empty_json_body_raises_application_failure(self, layout_client, transport):
        transport.queue(TransportResponse.build(200, ""))

        with pytest.raises(ApplicationFailure, match="Empty response body"):
            await layout_client.fetch_layout("chart", "Summary")
