import pytest

from dhl_wrapper.api.codes import CountryCode, LanguageCode
from dhl_wrapper.api.enums import (
    Capacity,
    Division,
    ServiceType,
    ShipmentDetailReferenceType,
    ShipmentStatusCode,
    Weekday
)

@pytest.mark.parametrize("literal", ["Monday", "http://schema.org/Monday", "Mon"])
def test_weekday_aliases(literal):
    assert Weekday(literal) is Weekday.MONDAY

def test_every_weekday_accepts_schema_org_uri():
    for day in Weekday:
        assert Weekday("http://schema.org/" + day.value) is day

@pytest.mark.parametrize("literal", ["monday", "https://schema.org/Monday", "", "Funday"])
def test_weekday_rejects_unknown(literal):
    with pytest.raises(ValueError):
        Weekday(literal)

def test_weekday_rejects_non_strings():
    with pytest.raises(ValueError):
        Weekday(1)

@pytest.mark.parametrize("literal,expected", [
    ("express:pick-up", ServiceType.EXPRESS_PICK_UP),
    ("xpress:pick-up", ServiceType.EXPRESS_PICK_UP),
    ("parcel:pick-up-registered", ServiceType.PARCEL_PICK_UP_REGISTERED),
    ("parcel:pick-up-registere", ServiceType.PARCEL_PICK_UP_REGISTERED),
    ("parcel:pick-up", ServiceType.PARCEL_PICK_UP),
    ("handicapped-access", ServiceType.HANDICAPPED_ACCESS),
])
def test_service_type_aliases(literal, expected):
    assert ServiceType(literal) is expected

def test_service_type_rejects_unknown():
    with pytest.raises(ValueError):
        ServiceType("parcel:teleport")

def test_service_type_canonical_value():
    """Aliases decode but the canonical spelling is what gets sent"""
    assert ServiceType("xpress:pick-up").value == "express:pick-up"

def test_country_codes():
    assert CountryCode("DE") is CountryCode.DE
    assert CountryCode("IN").value == "IN"
    assert len(CountryCode) == 249
    with pytest.raises(ValueError):
        CountryCode("XX")

def test_language_codes():
    assert LanguageCode("de") is LanguageCode.DE
    with pytest.raises(ValueError):
        LanguageCode("DE")

def test_kebab_case_vocabularies():
    assert ShipmentStatusCode("pre-transit") is ShipmentStatusCode.PRE_TRANSIT
    assert Capacity("very-low") is Capacity.VERY_LOW
    assert Division("parcel-de") is Division.PARCEL_DE
    assert ShipmentDetailReferenceType("domestic-consignment-id") is ShipmentDetailReferenceType.DOMESTIC_CONSIGNMENT_ID

def test_capacity_variant_names():
    assert Capacity("VeryLow") is Capacity.VERY_LOW
    assert Capacity("Low") is Capacity.LOW
    assert Capacity("High") is Capacity.HIGH
    with pytest.raises(ValueError):
        Capacity("medium")
