# dhl_wrapper/api/enums.py
# Author: dhl-wrapper

"""
Controlled vocabularies of the DHL location finder and shipment tracking APIs.

Each enum's value is the canonical literal sent on the wire. DHL is not
consistent about spellings across endpoints, so decoding also accepts the
documented aliases listed in the module level tables below; any other literal
raises ValueError.
"""

from enum import Enum
from typing import Dict

SCHEMA_ORG = "http://schema.org/"

class Weekday(Enum):
    """Day of week used by opening hours and capacity forecasts"""
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return _WEEKDAY_ALIASES.get(value)
        return None

class ServiceType(Enum):
    """Services offered at a service point"""
    PARCEL_PICK_UP = "parcel:pick-up"
    PARCEL_DROP_OFF = "parcel:drop-off"
    EXPRESS_PICK_UP = "express:pick-up"
    EXPRESS_DROP_OFF = "express:drop-off"
    EXPRESS_DROP_OFF_ACCOUNT = "express:drop-off-account"
    EXPRESS_DROP_OFF_EASY = "express:drop-off-easy"
    EXPRESS_DROP_OFF_PRELABELED = "express:drop-off-prelabeled"
    PARCEL_PICK_UP_REGISTERED = "parcel:pick-up-registered"
    PARCEL_PICK_UP_UNREGISTERED = "parcel:pick-up-unregistered"
    PARCEL_DROP_OFF_UNREGISTERED = "parcel:drop-off-unregistered"
    LETTER_SERVICE = "letter-service"
    POSTBANK = "postbank"
    CASH_ON_DELIVERY = "cash-on-delivery"
    FRANKING = "franking"
    CASH_SERVICE = "cash-service"
    PACKAGING_MATERIAL = "packaging-material"
    POSTIDENT = "postident"
    AGE_VERIFICATION = "age-verification"
    HANDICAPPED_ACCESS = "handicapped-access"
    PARKING = "parking"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return _SERVICE_TYPE_ALIASES.get(value)
        return None

class Division(Enum):
    """DHL business unit owning a shipment (tracking `service` parameter)"""
    EXPRESS = "express"
    PARCEL_DE = "parcel-de"
    PARCEL_NL = "parcel-nl"
    PARCEL_PL = "parcel-pl"
    PARCEL_UK = "parcel-uk"
    POST_DE = "post-de"
    POST_INTERNATIONAL = "post-international"
    ECOMMERCE = "ecommerce"
    ECOMMERCE_EUROPE = "ecommerce-europe"
    ECOMMERCE_APAC = "ecommerce-apac"
    DGF = "dgf"
    DSC = "dsc"
    FREIGHT = "freight"
    SAMEDAY = "sameday"
    SVB = "svb"

class ProviderType(Enum):
    PARCEL = "parcel"
    EXPRESS = "express"

class LocationType(Enum):
    SERVICEPOINT = "servicepoint"
    LOCKER = "locker"
    POSTOFFICE = "postoffice"
    POSTBANK = "postbank"

class Capacity(Enum):
    """Expected utilisation of a service point"""
    VERY_LOW = "very-low"
    LOW = "low"
    HIGH = "high"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return _CAPACITY_ALIASES.get(value)
        return None

class ShipmentStatusCode(Enum):
    PRE_TRANSIT = "pre-transit"
    TRANSIT = "transit"
    DELIVERED = "delivered"
    FAILURE = "failure"
    UNKNOWN = "unknown"

class ShipmentDetailReferenceType(Enum):
    """Kind of identifier attached to a shipment"""
    CUSTOMER_REFERENCE = "customer-reference"
    CUSTOMER_CONFIRMATION_NUMBER = "customer-confirmation-number"
    LOCAL_TRACKING_NUMBER = "local-tracking-number"
    ECOMMERCE_NUMBER = "ecommerce-number"
    HOUSEBILL = "housebill"
    MASTERBILL = "masterbill"
    CONTAINER_NUMBER = "container-number"
    SHIPMENT_ID = "shipment-id"
    DOMESTIC_CONSIGNMENT_ID = "domestic-consignment-id"
    REFERENCE = "reference"

_WEEKDAY_ALIASES: Dict[str, Weekday] = {}
for _day in Weekday:
    _WEEKDAY_ALIASES[SCHEMA_ORG + _day.value] = _day
    _WEEKDAY_ALIASES[_day.value[:3]] = _day
del _day

# Spellings observed on some endpoints next to the documented ones
_SERVICE_TYPE_ALIASES: Dict[str, ServiceType] = {
    "xpress:pick-up": ServiceType.EXPRESS_PICK_UP,
    "parcel:pick-up-registere": ServiceType.PARCEL_PICK_UP_REGISTERED,
}

# Variant names accepted next to the kebab-case literals
_CAPACITY_ALIASES: Dict[str, Capacity] = {
    "VeryLow": Capacity.VERY_LOW,
    "Low": Capacity.LOW,
    "High": Capacity.HIGH,
}
