"""Test module for the API client."""
# dhl_wrapper/tests/test_api_client.py

import asyncio
import pytest
import aiohttp
from unittest.mock import MagicMock, patch
from dhl_wrapper.api.client import (
    APIClient,
    APIConfig,
    API_KEY_HEADER
)
from dhl_wrapper.api.location_finder import (
    LocationFinderApi,
    ServicePoint,
    ServicePointsResponse,
    by_geo,
    by_id
)
from dhl_wrapper.api.request import ApiMode
from dhl_wrapper.api.shipment_tracking import ShipmentTrackingApi, ShipmentTrackingRequest
from dhl_wrapper.core.config import Config
from dhl_wrapper.core.exceptions import (
    MissingCredentialsError,
    ResponseNotOkError,
    SerializationError,
    TransportError,
    CommunicationError
)

@pytest.fixture
def api_config():
    """Fixture for API configuration"""
    return APIConfig(
        location_finder_api_key="lf-key",
        shipment_tracking_api_key="st-key",
        mode=ApiMode.SANDBOX,
        timeout=5.0
    )

@pytest.fixture
def api_client(api_config):
    """Fixture for API client"""
    return APIClient(config=api_config)

@pytest.mark.asyncio
async def test_get_session(api_client):
    """Test session creation and reuse"""
    session1 = await api_client._get_session()
    assert isinstance(session1, aiohttp.ClientSession)

    session2 = await api_client._get_session()
    assert session1 is session2

    await api_client.close()
    assert session1.closed

@pytest.mark.asyncio
async def test_send_sets_api_key_header_and_url(api_client, mock_http, service_points_payload):
    """Test the GET carries the family's key and the serialized URL"""
    with mock_http(payload=service_points_payload) as mock_request:
        response = await api_client.send(by_geo(53.575264, 9.954053))
    await api_client.close()

    assert isinstance(response, ServicePointsResponse)
    assert mock_request.call_count == 1
    args, kwargs = mock_request.call_args
    assert args[0] == "GET"
    assert str(args[1]) == (
        "https://api-sandbox.dhl.com/location-finder/v1/find-by-geo"
        "?latitude=53.575264&longitude=9.954053"
    )
    assert kwargs["headers"] == {API_KEY_HEADER: "lf-key"}

@pytest.mark.asyncio
async def test_send_uses_key_of_request_family(api_client, mock_http, tracking_payload):
    """Test tracking requests authenticate with the tracking key"""
    with mock_http(payload=tracking_payload) as mock_request:
        await api_client.send(ShipmentTrackingRequest("CN054067116JP"))
    await api_client.close()

    _, kwargs = mock_request.call_args
    assert kwargs["headers"] == {API_KEY_HEADER: "st-key"}

@pytest.mark.asyncio
async def test_missing_credentials_before_network(mock_http):
    """Test a missing key fails before any request is made"""
    client = APIClient(APIConfig(shipment_tracking_api_key="st-key"))
    with mock_http(payload={}) as mock_request:
        with pytest.raises(MissingCredentialsError) as exc_info:
            await client.send(by_id("8003-4101479"))

    assert mock_request.call_count == 0
    assert exc_info.value.details == {"family": "location_finder"}
    assert client._session is None

@pytest.mark.asyncio
async def test_empty_api_key_counts_as_missing():
    """Test an empty key is treated like no key"""
    client = ShipmentTrackingApi("")
    with pytest.raises(MissingCredentialsError):
        await client.track("CN054067116JP")

@pytest.mark.asyncio
async def test_error_body_becomes_response_not_ok(api_client, mock_http):
    """Test the status/title/detail body is surfaced as ResponseNotOkError"""
    with mock_http(status=404, payload={"status": 404, "title": "X", "detail": "Y"}, reason="Not Found"):
        with pytest.raises(ResponseNotOkError) as exc_info:
            await api_client.send(by_id("unknown"))
    await api_client.close()

    error = exc_info.value
    assert error.status == 404
    assert error.title == "X"
    assert error.detail == "Y"
    assert error.details["http_status"] == 404

@pytest.mark.asyncio
async def test_error_body_with_success_status(api_client, mock_http):
    """Test an error body answered with 200 is still an error"""
    with mock_http(status=200, payload={"status": 401, "title": "Unauthorized", "detail": "Invalid key"}):
        with pytest.raises(ResponseNotOkError) as exc_info:
            await api_client.send(by_id("8003-4101479"))
    await api_client.close()

    assert exc_info.value.status == 401

@pytest.mark.asyncio
@pytest.mark.parametrize("request_", [
    by_geo(53.575264, 9.954053),
    ShipmentTrackingRequest("X")
])
async def test_error_body_with_success_status_on_list_endpoints(api_client, mock_http, request_):
    """Test list responses do not swallow an error body answered with 200"""
    with mock_http(status=200, payload={"status": 404, "title": "X", "detail": "Y"}):
        with pytest.raises(ResponseNotOkError) as exc_info:
            await api_client.send(request_)
    await api_client.close()

    error = exc_info.value
    assert (error.status, error.title, error.detail) == (404, "X", "Y")

@pytest.mark.asyncio
async def test_non_json_error_falls_back_to_status_line(api_client, mock_http):
    """Test failures without DHL's error body use the HTTP status line"""
    with mock_http(status=502, body=b"<html>Bad Gateway</html>", reason="Bad Gateway"):
        with pytest.raises(ResponseNotOkError) as exc_info:
            await api_client.send(by_id("8003-4101479"))
    await api_client.close()

    assert exc_info.value.status == 502
    assert exc_info.value.title == "Bad Gateway"
    assert exc_info.value.detail == "<html>Bad Gateway</html>"

@pytest.mark.asyncio
async def test_unparseable_success_body(api_client, mock_http):
    """Test a 2xx body of the wrong shape raises SerializationError"""
    with mock_http(status=200, payload={"unexpected": True}):
        with pytest.raises(SerializationError) as exc_info:
            await api_client.send(by_id("8003-4101479"))
    await api_client.close()

    assert isinstance(exc_info.value, CommunicationError)

@pytest.mark.asyncio
async def test_transport_failure(api_client):
    """Test network errors are wrapped in TransportError without retrying"""
    mock_request = MagicMock(side_effect=aiohttp.ClientConnectionError("connection refused"))
    with patch.object(aiohttp.ClientSession, "request", mock_request):
        with pytest.raises(TransportError) as exc_info:
            await api_client.send(by_id("8003-4101479"))
    await api_client.close()

    assert mock_request.call_count == 1
    assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

@pytest.mark.asyncio
async def test_timeout_is_transport_failure(api_client):
    """Test timeouts are reported as TransportError"""
    mock_request = MagicMock(side_effect=asyncio.TimeoutError())
    with patch.object(aiohttp.ClientSession, "request", mock_request):
        with pytest.raises(TransportError):
            await api_client.send(by_id("8003-4101479"))
    await api_client.close()

@pytest.mark.asyncio
async def test_concurrent_sends_share_session(api_client, mock_http, service_point_payload):
    """Test parallel calls are independent and reuse one session"""
    with mock_http(payload=service_point_payload) as mock_request:
        results = await asyncio.gather(*(
            api_client.send(by_id(f"8003-{n}")) for n in range(3)
        ))
        session = api_client._session
    await api_client.close()

    assert all(isinstance(result, ServicePoint) for result in results)
    assert mock_request.call_count == 3
    assert session.closed

@pytest.mark.asyncio
async def test_context_manager_closes_session(mock_http, service_point_payload):
    """Test `async with` releases the session"""
    with mock_http(payload=service_point_payload):
        async with LocationFinderApi("lf-key") as api:
            await api.find_by_id("8003-4101479")
            session = api._session

    assert session.closed

def test_from_config(tmp_path):
    """Test client construction from Config"""
    config = Config()
    config.update({
        "api": {"mode": "sandbox", "timeout": 12},
        "credentials": {"location_finder_api_key": "from-config"},
        "logging": {"file": str(tmp_path / "client.log")}
    })

    client = APIClient.from_config(config)

    assert client.config.mode is ApiMode.SANDBOX
    assert client.config.timeout == 12.0
    assert client.config.location_finder_api_key == "from-config"
    assert client.config.shipment_tracking_api_key is None

if __name__ == "__main__":
    pytest.main(["-v"])
