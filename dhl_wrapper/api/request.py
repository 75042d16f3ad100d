# dhl_wrapper/api/request.py
# Author: dhl-wrapper

from dataclasses import replace
from enum import Enum
from typing import Any, ClassVar, Dict, Tuple, Type

from .query import to_query_string

class ApiMode(Enum):
    """DHL host environment requests are sent to"""
    SANDBOX = "sandbox"
    PRODUCTION = "production"

class ApiFamily(Enum):
    """DHL API products, each with its own API key"""
    LOCATION_FINDER = "location_finder"
    SHIPMENT_TRACKING = "shipment_tracking"

BASE_URLS: Dict[Tuple[ApiFamily, ApiMode], str] = {
    (ApiFamily.LOCATION_FINDER, ApiMode.SANDBOX): "https://api-sandbox.dhl.com/location-finder/v1",
    (ApiFamily.LOCATION_FINDER, ApiMode.PRODUCTION): "https://api.dhl.com/location-finder/v1",
    # Shipment tracking has no sandbox host
    (ApiFamily.SHIPMENT_TRACKING, ApiMode.SANDBOX): "https://api-eu.dhl.com/track",
    (ApiFamily.SHIPMENT_TRACKING, ApiMode.PRODUCTION): "https://api-eu.dhl.com/track",
}

def base_url(family: ApiFamily, mode: ApiMode) -> str:
    return BASE_URLS[(family, mode)]

class APIRequest:
    """
    Behaviour shared by all request dataclasses.

    Subclasses are frozen dataclasses and declare:
    - family: the API family whose key authenticates the call
    - response_model: pydantic model the success body is parsed into
    - endpoint: path below the family's base URL
    """

    family: ClassVar[ApiFamily]
    response_model: ClassVar[Type[Any]]
    endpoint: ClassVar[str]

    def path(self) -> str:
        return self.endpoint

    def url(self, mode: ApiMode = ApiMode.PRODUCTION) -> str:
        """Full request URL for the given host environment"""
        return f"{base_url(self.family, mode)}{self.path()}{to_query_string(self)}"

    def _with(self, **changes: Any):
        return replace(self, **changes)
