"""Global test configuration and fixtures."""
import json
import os
from contextlib import contextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

@pytest.fixture(autouse=True)
def clean_env():
    """Remove DHL_ environment variables for the duration of a test"""
    saved_vars = {k: v for k, v in os.environ.items() if k.startswith("DHL_")}
    for key in saved_vars:
        del os.environ[key]

    yield

    for key in list(os.environ.keys()):
        if key.startswith("DHL_"):
            del os.environ[key]
    os.environ.update(saved_vars)

@contextmanager
def _patched_http(status=200, payload=None, body=None, reason="OK"):
    """
    Patch aiohttp so that every request answers with the given status and body.

    Yields the mock standing in for ClientSession.request so tests can inspect calls.
    """
    if body is None:
        body = json.dumps(payload).encode()

    mock_response = MagicMock()
    mock_response.status = status
    mock_response.reason = reason
    mock_response.read = AsyncMock(return_value=body)
    mock_response.headers = {"Content-Type": "application/json"}

    mock_cm = AsyncMock()
    mock_cm.__aenter__.return_value = mock_response
    mock_cm.__aexit__.return_value = None

    mock_request = MagicMock(return_value=mock_cm)
    with patch.object(aiohttp.ClientSession, "request", mock_request):
        yield mock_request

@pytest.fixture
def mock_http():
    """Context manager factory patching aiohttp responses, see _patched_http"""
    return _patched_http

@pytest.fixture
def service_point_payload():
    """A single service point as returned by find-by-id"""
    return {
        "url": "/locations/8003-4101479",
        "location": {
            "ids": [{"locationId": "8003-4101479", "provider": "parcel"}],
            "keyword": "Packstation",
            "keywordId": "433",
            "type": "locker",
            "leanLocker": False
        },
        "name": "Packstation 433",
        "place": {
            "address": {
                "countryCode": "DE",
                "postalCode": "20357",
                "addressLocality": "Hamburg",
                "streetAddress": "Schulterblatt 100"
            },
            "geo": {"latitude": 53.5637, "longitude": 9.9618},
            "containedInPlace": {"name": "Rewe"}
        },
        "openingHours": [
            {"opens": "00:00:00", "closes": "23:59:00", "dayOfWeek": "http://schema.org/Monday"},
            {"opens": "00:00:00", "closes": "23:59:00", "dayOfWeek": "Tuesday"}
        ],
        "closurePeriods": [],
        "serviceTypes": ["parcel:pick-up-registered", "parcel:drop-off", "xpress:pick-up"],
        "averageCapacityDayOfWeek": [
            {"dayOfWeek": "http://schema.org/Monday", "capacity": "very-low"},
            {"dayOfWeek": "http://schema.org/Tuesday", "capacity": "high"}
        ]
    }

@pytest.fixture
def service_points_payload(service_point_payload):
    """find-by-address / find-by-geo result with one hit"""
    located = dict(service_point_payload, distance=712)
    return {"locations": [located]}

@pytest.fixture
def tracking_payload():
    """Shipment tracking result modelled on a real parcel-de answer"""
    return {
        "url": "/shipments?trackingNumber=CN054067116JP&offset=0&limit=5",
        "shipments": [
            {
                "id": "CN054067116JP",
                "service": "parcel-de",
                "origin": {"address": {"countryCode": "JP"}},
                "destination": {"address": {"countryCode": "DE"}},
                "status": {
                    "timestamp": "2023-06-07T14:26:00",
                    "location": {"address": {"addressLocality": "Germany"}},
                    "statusCode": "delivered",
                    "status": "Delivery successful.",
                    "description": "Delivery successful."
                },
                "serviceUrl": "https://www.dhl.de/de/privatkunden.html?piececode=CN054067116JP",
                "details": {
                    "product": {"productName": "DHL PAKET (parcel)"},
                    "proofOfDeliverySignedAvailable": False,
                    "totalNumberOfPieces": 1,
                    "pieceIds": ["CN054067116JP"],
                    "references": [{"number": "4711", "type": "customer-reference"}]
                },
                "events": [
                    {
                        "timestamp": "2023-06-07T14:26:00",
                        "location": {"address": {"addressLocality": "Germany"}},
                        "statusCode": "delivered",
                        "status": "Delivery successful.",
                        "description": "Delivery successful."
                    },
                    {
                        "timestamp": "2023-06-07T08:40:00",
                        "statusCode": "transit",
                        "status": "Being delivered.",
                        "description": "Being delivered."
                    }
                ]
            }
        ],
        "possibleAdditionalShipmentsUrl": [
            "/track/shipments?trackingNumber=CN054067116JP&service=express"
        ]
    }
