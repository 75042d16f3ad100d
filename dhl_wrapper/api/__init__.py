# dhl_wrapper/api/__init__.py
# Author: dhl-wrapper

"""
Typed bindings for DHL's location finder and shipment tracking APIs.
"""

from .client import (
    APIClient,
    APIConfig,
    APIResponse
)

from .codes import CountryCode, LanguageCode

from .enums import (
    Capacity,
    Division,
    LocationType,
    ProviderType,
    ServiceType,
    ShipmentDetailReferenceType,
    ShipmentStatusCode,
    Weekday
)

from .location_finder import (
    FindByAddressRequest,
    FindByGeoRequest,
    FindByIdRequest,
    FindByKeywordIdRequest,
    LocationFinderApi,
    ServicePoint,
    ServicePointsResponse,
    by_address,
    by_geo,
    by_id,
    by_keyword_id
)

from .query import query_pairs, to_query_string
from .request import ApiFamily, ApiMode, APIRequest
from .response_handler import ResponseHandler

from .shipment_tracking import (
    Shipment,
    ShipmentTrackingApi,
    ShipmentTrackingRequest,
    ShipmentTrackingResponse
)

__all__ = [
    'APIClient',
    'APIConfig',
    'APIResponse',
    'APIRequest',
    'ApiFamily',
    'ApiMode',
    'Capacity',
    'CountryCode',
    'Division',
    'FindByAddressRequest',
    'FindByGeoRequest',
    'FindByIdRequest',
    'FindByKeywordIdRequest',
    'LanguageCode',
    'LocationFinderApi',
    'LocationType',
    'ProviderType',
    'ResponseHandler',
    'ServicePoint',
    'ServicePointsResponse',
    'ServiceType',
    'Shipment',
    'ShipmentDetailReferenceType',
    'ShipmentStatusCode',
    'ShipmentTrackingApi',
    'ShipmentTrackingRequest',
    'ShipmentTrackingResponse',
    'Weekday',
    'by_address',
    'by_geo',
    'by_id',
    'by_keyword_id',
    'query_pairs',
    'to_query_string'
]
