"""Tests for the Trassenfinder HTTP client."""

import httpx
import pytest

from trassen_explorer.domain import StationReferenceError
from trassen_explorer.services.infrastructure_client import (
    ApiFormatError,
    ApiTransportError,
    InfrastructureClient,
)

BASE_URL = "https://api.test/infrastrukturen"


def _client(handler) -> InfrastructureClient:
    return InfrastructureClient(
        base_url=BASE_URL + "/",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_list_infrastructures_sorted_by_id():
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(
            200,
            json=[
                {"id": 3, "anzeigename": "Netz 2025", "fahrplanjahr": 2025},
                {"id": 1, "anzeigename": "Netz 2023"},
                {"id": 2, "anzeigename": "Netz 2024"},
            ],
        )

    summaries = await _client(handler).list_infrastructures()

    assert requested == [BASE_URL]
    assert [summary.id for summary in summaries] == [1, 2, 3]
    assert summaries[2].display_name == "Netz 2025"


@pytest.mark.asyncio
async def test_load_station_graph_fetches_document_by_id(alpha_beta_payload):
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, json=alpha_beta_payload)

    graph = await _client(handler).load_station_graph(7)

    assert requested == [f"{BASE_URL}/7"]
    assert [station.code for station in graph.stations] == ["A", "B"]
    assert graph.segments[0].route_number == 42


@pytest.mark.asyncio
async def test_dangling_reference_propagates(make_payload):
    payload = make_payload(stations=[("A", "Alpha", 0.0, 0.0)], segments=[("A", "C", 1)])

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(StationReferenceError) as excinfo:
        await _client(handler).load_station_graph(7)

    assert excinfo.value.code == "C"


@pytest.mark.asyncio
async def test_http_error_status_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with pytest.raises(ApiTransportError) as excinfo:
        await _client(handler).list_infrastructures()

    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    with pytest.raises(ApiTransportError, match="Connection refused"):
        await _client(handler).fetch_infrastructure(1)


@pytest.mark.asyncio
async def test_invalid_json_raises_format_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(ApiFormatError, match="not valid JSON"):
        await _client(handler).list_infrastructures()


@pytest.mark.asyncio
async def test_schema_mismatch_raises_format_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": 1, "anzeigename": "no framework"})

    with pytest.raises(ApiFormatError, match="Invalid infrastructure document 1"):
        await _client(handler).fetch_infrastructure(1)


def test_defaults_come_from_settings():
    from trassen_explorer.config import settings

    client = InfrastructureClient()

    assert client.base_url == settings.api.base_url
    assert client.timeout == settings.api.timeout
