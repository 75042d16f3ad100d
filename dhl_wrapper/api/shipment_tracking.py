# dhl_wrapper/api/shipment_tracking.py
# Author: dhl-wrapper

"""
DHL "Shipment Tracking - Unified" API.

API docs: https://developer.dhl.com/api-reference/shipment-tracking

Example:

    async with ShipmentTrackingApi(api_key) as api:
        request = ShipmentTrackingRequest("00340434292135100186").with_language(LanguageCode.DE)
        response = await api.send(request)
        print(response.shipments[0].status.status_code)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, List, Optional, Type

from pydantic import Field

from .client import APIClient, APIConfig
from .codes import CountryCode, LanguageCode
from .enums import Division, ShipmentDetailReferenceType, ShipmentStatusCode
from .models import Address, DhlModel
from .query import WIRE
from .request import ApiFamily, ApiMode, APIRequest

# Responses

class SimpleServicePoint(DhlModel):
    """DHL service point that is a stop on a shipment's route"""
    url: Optional[str] = None
    label: Optional[str] = None

class ShipmentPathPoint(DhlModel):
    """A stop on a shipment's route: origin, destination or anything in between"""
    address: Address = Field(default_factory=Address)
    service_point: Optional[SimpleServicePoint] = Field(None, alias="servicePoint")

class ShipmentEvent(DhlModel):
    """Significant point in time during shipment processing"""
    timestamp: datetime
    location: Optional[ShipmentPathPoint] = None
    status_code: Optional[ShipmentStatusCode] = Field(None, alias="statusCode")
    status: Optional[str] = None
    description: Optional[str] = None
    piece_ids: Optional[List[str]] = Field(None, alias="pieceIds")
    remark: Optional[str] = None
    next_steps: Optional[str] = Field(None, alias="nextSteps")

class ShipmentStatus(ShipmentEvent):
    """Current status of a shipment, shaped like its latest event"""
    pass

class EstimatedDeliveryTimeFrame(DhlModel):
    estimated_from: datetime = Field(alias="estimatedFrom")
    estimated_through: datetime = Field(alias="estimatedThrough")

class ShipmentCarrier(DhlModel):
    type: Optional[str] = Field(None, alias="@type")
    organization_name: Optional[str] = Field(None, alias="organizationName")

class ShipmentParty(DhlModel):
    """Identification data of a sender or receiver"""
    type: Optional[str] = Field(None, alias="@type")
    organization_name: Optional[str] = Field(None, alias="organizationName")
    family_name: Optional[str] = Field(None, alias="familyName")
    given_name: Optional[str] = Field(None, alias="givenName")
    name: Optional[str] = None

class ShipmentProduct(DhlModel):
    product_name: Optional[str] = Field(None, alias="productName")

class ShipmentSigned(DhlModel):
    """Person who signed the proof of delivery"""
    type: Optional[str] = Field(None, alias="@type")
    family_name: Optional[str] = Field(None, alias="familyName")
    given_name: Optional[str] = Field(None, alias="givenName")
    name: Optional[str] = None

class ShipmentProofOfDelivery(DhlModel):
    timestamp: Optional[datetime] = None
    signature_url: Optional[str] = Field(None, alias="signatureUrl")
    document_url: Optional[str] = Field(None, alias="documentUrl")
    signed: Optional[ShipmentSigned] = None

class ShipmentFloatWithUnit(DhlModel):
    value: float
    unit_text: Optional[str] = Field(None, alias="unitText")

class ShipmentDimension(DhlModel):
    width: Optional[ShipmentFloatWithUnit] = None
    height: Optional[ShipmentFloatWithUnit] = None
    length: Optional[ShipmentFloatWithUnit] = None

class ShipmentDetailReference(DhlModel):
    number: str
    type: ShipmentDetailReferenceType

class ShipmentDgfSimpleLocation(DhlModel):
    dgf_location_name: Optional[str] = Field(None, alias="dgf:locationName")

class ShipmentDgfLocation(ShipmentDgfSimpleLocation):
    dgf_location_code: Optional[str] = Field(None, alias="dgf:locationCode")
    country_code: Optional[CountryCode] = Field(None, alias="countryCode")

class ShipmentDgfRoute(DhlModel):
    """DHL Global Forwarding leg of a shipment"""
    dgf_vessel_name: Optional[str] = Field(None, alias="dgf:vesselName")
    dgf_voyage_flight_number: Optional[str] = Field(None, alias="dgf:voyageFlightNumber")
    dgf_airport_of_departure: Optional[ShipmentDgfLocation] = Field(None, alias="dgf:airportOfDeparture")
    dgf_airport_of_destination: Optional[ShipmentDgfLocation] = Field(None, alias="dgf:airportOfDestination")
    dgf_estimated_departure_date: Optional[datetime] = Field(None, alias="dgf:estimatedDepartureDate")
    dgf_estimated_arrival_date: Optional[datetime] = Field(None, alias="dgf:estimatedArrivalDate")
    dgf_place_of_acceptance: Optional[ShipmentDgfSimpleLocation] = Field(None, alias="dgf:placeOfAcceptance")
    dgf_port_of_loading: Optional[ShipmentDgfSimpleLocation] = Field(None, alias="dgf:portOfLoading")
    dgf_port_of_unloading: Optional[ShipmentDgfSimpleLocation] = Field(None, alias="dgf:portOfUnloading")
    dgf_place_of_delivery: Optional[ShipmentDgfSimpleLocation] = Field(None, alias="dgf:placeOfDelivery")

class ShipmentDetail(DhlModel):
    """Details on a tracked shipment"""
    carrier: Optional[ShipmentCarrier] = None
    receiver: Optional[ShipmentParty] = None
    sender: Optional[ShipmentParty] = None
    product: Optional[ShipmentProduct] = None
    proof_of_delivery_signed_available: bool = Field(False, alias="proofOfDeliverySignedAvailable")
    proof_of_delivery: Optional[ShipmentProofOfDelivery] = Field(None, alias="proofOfDelivery")
    total_number_of_pieces: Optional[int] = Field(None, alias="totalNumberOfPieces")
    piece_ids: List[str] = Field(default_factory=list, alias="pieceIds")
    weight: Optional[ShipmentFloatWithUnit] = None
    volume: Optional[ShipmentFloatWithUnit] = None
    loading_meters: Optional[float] = Field(None, alias="loadingMeters")
    dimensions: Optional[ShipmentDimension] = None
    references: List[ShipmentDetailReference] = Field(default_factory=list)
    dgf_routes: List[ShipmentDgfRoute] = Field(default_factory=list, alias="dgf:routes")

class Shipment(DhlModel):
    """A shipment with its tracking information like status or ETA"""
    id: str
    service: Division
    origin: Optional[ShipmentPathPoint] = None
    destination: Optional[ShipmentPathPoint] = None
    status: ShipmentStatus
    estimated_time_of_delivery: Optional[datetime] = Field(None, alias="estimatedTimeOfDelivery")
    estimated_delivery_time_frame: Optional[EstimatedDeliveryTimeFrame] = Field(
        None, alias="estimatedDeliveryTimeFrame"
    )
    estimated_time_of_delivery_remark: Optional[str] = Field(None, alias="estimatedTimeOfDeliveryRemark")
    service_url: Optional[str] = Field(None, alias="serviceUrl")
    reroute_url: Optional[str] = Field(None, alias="rerouteUrl")
    details: ShipmentDetail = Field(default_factory=ShipmentDetail)
    events: List[ShipmentEvent] = Field(default_factory=list)

    def latest_event(self) -> ShipmentEvent:
        """Most recent known event, falling back to the current status"""
        if not self.events:
            return self.status
        newest = max(self.events, key=lambda event: event.timestamp)
        if newest.timestamp >= self.status.timestamp:
            return newest
        return self.status

class ShipmentTrackingResponse(DhlModel):
    """Page of tracked shipments with links to neighbouring pages"""
    url: Optional[str] = None
    prev_url: Optional[str] = Field(None, alias="prevUrl")
    next_url: Optional[str] = Field(None, alias="nextUrl")
    first_url: Optional[str] = Field(None, alias="firstUrl")
    last_url: Optional[str] = Field(None, alias="lastUrl")
    shipments: List[Shipment]
    possible_additional_shipments_url: List[str] = Field(
        default_factory=list, alias="possibleAdditionalShipmentsUrl"
    )

# Requests

@dataclass(frozen=True)
class ShipmentTrackingRequest(APIRequest):
    """Parameters of the GET request returning shipment tracking data"""
    family: ClassVar[ApiFamily] = ApiFamily.SHIPMENT_TRACKING
    response_model: ClassVar[Type[Any]] = ShipmentTrackingResponse
    endpoint: ClassVar[str] = "/shipments"

    tracking_number: str = field(metadata={WIRE: "trackingNumber"})
    service: Optional[Division] = field(default=None, metadata={WIRE: "service"})
    requester_country_code: Optional[CountryCode] = field(default=None, metadata={WIRE: "requesterCountryCode"})
    origin_country_code: Optional[CountryCode] = field(default=None, metadata={WIRE: "originCountryCode"})
    recipient_postal_code: Optional[str] = field(default=None, metadata={WIRE: "recipientPostalCode"})
    language: Optional[LanguageCode] = field(default=None, metadata={WIRE: "language"})
    offset: Optional[int] = field(default=None, metadata={WIRE: "offset"})
    limit: Optional[int] = field(default=None, metadata={WIRE: "limit"})

    def with_service(self, value: Optional[Division]) -> "ShipmentTrackingRequest":
        return self._with(service=value)

    def with_requester_country_code(self, value: Optional[CountryCode]) -> "ShipmentTrackingRequest":
        return self._with(requester_country_code=value)

    def with_origin_country_code(self, value: Optional[CountryCode]) -> "ShipmentTrackingRequest":
        return self._with(origin_country_code=value)

    def with_recipient_postal_code(self, value: Optional[str]) -> "ShipmentTrackingRequest":
        return self._with(recipient_postal_code=value)

    def with_language(self, value: Optional[LanguageCode]) -> "ShipmentTrackingRequest":
        return self._with(language=value)

    def with_offset(self, value: Optional[int]) -> "ShipmentTrackingRequest":
        return self._with(offset=value)

    def with_limit(self, value: Optional[int]) -> "ShipmentTrackingRequest":
        return self._with(limit=value)

class ShipmentTrackingApi(APIClient):
    """Client for the shipment tracking API family, authenticated with its own key"""

    def __init__(
        self,
        api_key: Optional[str],
        mode: ApiMode = ApiMode.PRODUCTION,
        **options: Any
    ):
        super().__init__(APIConfig(shipment_tracking_api_key=api_key, mode=mode, **options))

    async def track(self, tracking_number: str, **options: Any) -> ShipmentTrackingResponse:
        """
        Track one shipment

        Args:
            tracking_number: Shipment or piece number
            **options: Optional ShipmentTrackingRequest fields (service, language, ...)
        """
        return await self.send(ShipmentTrackingRequest(tracking_number, **options))
