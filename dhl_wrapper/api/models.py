# dhl_wrapper/api/models.py
# Author: dhl-wrapper

"""
Response building blocks shared by the location finder and shipment tracking APIs.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

class DhlModel(BaseModel):
    """Base for all response models: immutable, tolerant of unknown keys"""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

class ResponseNotOk(DhlModel):
    """Error body returned by every DHL endpoint"""
    status: int
    title: str
    detail: str

class Address(DhlModel):
    country_code: Optional[str] = Field(None, alias="countryCode")
    postal_code: Optional[str] = Field(None, alias="postalCode")
    address_locality: Optional[str] = Field(None, alias="addressLocality")
    street_address: Optional[str] = Field(None, alias="streetAddress")

class Geo(DhlModel):
    latitude: float
    longitude: float
