# dhl_wrapper/api/location_finder.py
# Author: dhl-wrapper

"""
DHL "Location Finder - Unified" API.

API docs: https://developer.dhl.com/api-reference/location-finder

Example:

    async with LocationFinderApi(api_key, ApiMode.SANDBOX) as api:
        request = by_geo(53.575264, 9.954053).with_radius(500).with_limit(5)
        response = await api.send(request)
        for service_point in response.locations:
            print(service_point.name, service_point.distance)
"""

from dataclasses import dataclass, field
from datetime import date, time
from typing import Any, ClassVar, List, Optional, Type, Union
from urllib.parse import quote

from pydantic import Field

from .client import APIClient, APIConfig
from .codes import CountryCode
from .enums import Capacity, LocationType, ProviderType, ServiceType, Weekday
from .models import Address, DhlModel, Geo
from .query import WIRE
from .request import ApiFamily, ApiMode, APIRequest

# Responses

class LocationId(DhlModel):
    location_id: str = Field(alias="locationId")
    provider: str

class ServicePointLocation(DhlModel):
    ids: List[LocationId] = Field(default_factory=list)
    keyword: Optional[str] = None
    keyword_id: Optional[str] = Field(None, alias="keywordId")
    type: LocationType
    lean_locker: Optional[bool] = Field(None, alias="leanLocker")

class ContainedInPlace(DhlModel):
    """Building or shop a service point is located in"""
    name: Optional[str] = None

class Place(DhlModel):
    address: Address = Field(default_factory=Address)
    geo: Geo
    contained_in_place: Optional[ContainedInPlace] = Field(None, alias="containedInPlace")

class OpeningHours(DhlModel):
    opens: time
    closes: time
    day_of_week: Weekday = Field(alias="dayOfWeek")

class ClosurePeriod(DhlModel):
    """Period in which a service point is closed, e.g. public holidays"""
    type: Optional[str] = None
    from_date: Optional[date] = Field(None, alias="fromDate")
    to_date: Optional[date] = Field(None, alias="toDate")

class WeekdayCapacity(DhlModel):
    day_of_week: Weekday = Field(alias="dayOfWeek")
    capacity: Capacity

class ServicePoint(DhlModel):
    """
    A DHL drop-off or pick-up location.

    `distance` (meters from the searched address or coordinates) is only
    present in search results.
    """
    url: str
    location: ServicePointLocation
    name: str
    distance: Optional[int] = None
    place: Place
    opening_hours: List[OpeningHours] = Field(default_factory=list, alias="openingHours")
    closure_periods: List[ClosurePeriod] = Field(default_factory=list, alias="closurePeriods")
    service_types: List[ServiceType] = Field(default_factory=list, alias="serviceTypes")
    average_capacity_day_of_week: List[WeekdayCapacity] = Field(
        default_factory=list, alias="averageCapacityDayOfWeek"
    )

    def opening_hours_on(self, day: Weekday) -> List[OpeningHours]:
        """Opening hour slots for one weekday, in payload order"""
        return [hours for hours in self.opening_hours if hours.day_of_week is day]

class ServicePointsResponse(DhlModel):
    locations: List[ServicePoint]

# Requests

class _LocationFilters:
    """Setters for the optional filters shared by address and geo searches"""

    def with_provider_type(self, value: Optional[ProviderType]):
        return self._with(provider_type=value)

    def with_location_type(self, value: Optional[LocationType]):
        return self._with(location_type=value)

    def with_service_type(self, value: Optional[ServiceType]):
        return self._with(service_type=value)

    def with_radius(self, value: Optional[int]):
        """Search radius in meters"""
        return self._with(radius=value)

    def with_limit(self, value: Optional[int]):
        """Maximum number of locations returned"""
        return self._with(limit=value)

    def with_hide_closed_locations(self, value: Optional[bool]):
        return self._with(hide_closed_locations=value)

@dataclass(frozen=True)
class FindByAddressRequest(_LocationFilters, APIRequest):
    """Service points near an address"""
    family: ClassVar[ApiFamily] = ApiFamily.LOCATION_FINDER
    response_model: ClassVar[Type[Any]] = ServicePointsResponse
    endpoint: ClassVar[str] = "/find-by-address"

    country_code: CountryCode = field(metadata={WIRE: "countryCode"})
    address_locality: Optional[str] = field(default=None, metadata={WIRE: "addressLocality"})
    postal_code: Optional[str] = field(default=None, metadata={WIRE: "postalCode"})
    street_address: Optional[str] = field(default=None, metadata={WIRE: "streetAddress"})
    provider_type: Optional[ProviderType] = field(default=None, metadata={WIRE: "providerType"})
    location_type: Optional[LocationType] = field(default=None, metadata={WIRE: "locationType"})
    service_type: Optional[ServiceType] = field(default=None, metadata={WIRE: "serviceType"})
    radius: Optional[int] = field(default=None, metadata={WIRE: "radius"})
    limit: Optional[int] = field(default=None, metadata={WIRE: "limit"})
    hide_closed_locations: Optional[bool] = field(default=None, metadata={WIRE: "hideClosedLocations"})

    def with_address_locality(self, value: Optional[str]) -> "FindByAddressRequest":
        return self._with(address_locality=value)

    def with_postal_code(self, value: Optional[str]) -> "FindByAddressRequest":
        return self._with(postal_code=value)

    def with_street_address(self, value: Optional[str]) -> "FindByAddressRequest":
        return self._with(street_address=value)

@dataclass(frozen=True)
class FindByGeoRequest(_LocationFilters, APIRequest):
    """Service points near a coordinate"""
    family: ClassVar[ApiFamily] = ApiFamily.LOCATION_FINDER
    response_model: ClassVar[Type[Any]] = ServicePointsResponse
    endpoint: ClassVar[str] = "/find-by-geo"

    latitude: float = field(metadata={WIRE: "latitude"})
    longitude: float = field(metadata={WIRE: "longitude"})
    provider_type: Optional[ProviderType] = field(default=None, metadata={WIRE: "providerType"})
    location_type: Optional[LocationType] = field(default=None, metadata={WIRE: "locationType"})
    service_type: Optional[ServiceType] = field(default=None, metadata={WIRE: "serviceType"})
    radius: Optional[int] = field(default=None, metadata={WIRE: "radius"})
    limit: Optional[int] = field(default=None, metadata={WIRE: "limit"})
    hide_closed_locations: Optional[bool] = field(default=None, metadata={WIRE: "hideClosedLocations"})

@dataclass(frozen=True)
class FindByKeywordIdRequest(APIRequest):
    """A single service point identified by keyword id within a postal code"""
    family: ClassVar[ApiFamily] = ApiFamily.LOCATION_FINDER
    response_model: ClassVar[Type[Any]] = ServicePoint
    endpoint: ClassVar[str] = "/find-by-keyword-id"

    keyword_id: str = field(metadata={WIRE: "keywordId"})
    country_code: CountryCode = field(metadata={WIRE: "countryCode"})
    postal_code: str = field(metadata={WIRE: "postalCode"})

@dataclass(frozen=True)
class FindByIdRequest(APIRequest):
    """A single service point identified by its location id"""
    family: ClassVar[ApiFamily] = ApiFamily.LOCATION_FINDER
    response_model: ClassVar[Type[Any]] = ServicePoint
    endpoint: ClassVar[str] = "/locations"

    # path parameter, no wire name
    id: str

    def path(self) -> str:
        # the whole id is one path segment, "/" included
        return f"{self.endpoint}/{quote(self.id, safe='')}"

def by_address(country_code: Union[CountryCode, str]) -> FindByAddressRequest:
    return FindByAddressRequest(CountryCode(country_code))

def by_geo(latitude: float, longitude: float) -> FindByGeoRequest:
    return FindByGeoRequest(latitude, longitude)

def by_keyword_id(
    keyword_id: str,
    country_code: Union[CountryCode, str],
    postal_code: str
) -> FindByKeywordIdRequest:
    return FindByKeywordIdRequest(keyword_id, CountryCode(country_code), postal_code)

def by_id(location_id: str) -> FindByIdRequest:
    return FindByIdRequest(location_id)

class LocationFinderApi(APIClient):
    """Client for the location finder API family, authenticated with its own key"""

    def __init__(
        self,
        api_key: Optional[str],
        mode: ApiMode = ApiMode.PRODUCTION,
        **options: Any
    ):
        super().__init__(APIConfig(location_finder_api_key=api_key, mode=mode, **options))

    async def find_by_address(
        self,
        country_code: Union[CountryCode, str],
        **filters: Any
    ) -> ServicePointsResponse:
        """
        Search service points near an address

        Args:
            country_code: Country of the address
            **filters: Optional FindByAddressRequest fields (postal_code, radius, ...)
        """
        request = FindByAddressRequest(CountryCode(country_code), **filters)
        return await self.send(request)

    async def find_by_geo(
        self,
        latitude: float,
        longitude: float,
        **filters: Any
    ) -> ServicePointsResponse:
        """Search service points near a coordinate"""
        return await self.send(FindByGeoRequest(latitude, longitude, **filters))

    async def find_by_keyword_id(
        self,
        keyword_id: str,
        country_code: Union[CountryCode, str],
        postal_code: str
    ) -> ServicePoint:
        return await self.send(by_keyword_id(keyword_id, country_code, postal_code))

    async def find_by_id(self, location_id: str) -> ServicePoint:
        return await self.send(by_id(location_id))
