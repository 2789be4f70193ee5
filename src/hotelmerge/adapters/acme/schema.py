"""Pydantic models describing the Acme hotel feed."""

from __future__ import annotations

from pydantic import Field, field_validator

from hotelmerge.adapters.supplier import SupplierPayloadModel, blank_to_none, none_to_empty_list


class AcmeHotelPayload(SupplierPayloadModel):
    id: str = Field(alias="Id")
    destination_id: int = Field(alias="DestinationId")
    name: str = Field(default="", alias="Name")
    latitude: float | None = Field(default=None, alias="Latitude")
    longitude: float | None = Field(default=None, alias="Longitude")
    address: str = Field(default="", alias="Address")
    city: str = Field(default="", alias="City")
    country: str = Field(default="", alias="Country")
    postal_code: str = Field(default="", alias="PostalCode")
    description: str = Field(default="", alias="Description")
    facilities: list[str] = Field(default_factory=list, alias="Facilities")

    # coordinates arrive as numbers, quoted numbers, empty strings or null
    _normalize_coordinates = field_validator("latitude", "longitude", mode="before")(blank_to_none)
    _normalize_facilities = field_validator("facilities", mode="before")(none_to_empty_list)

    @field_validator("name", "address", "city", "country", "postal_code", "description", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return "" if value is None else value
