"""Pydantic models describing the Patagonia hotel feed."""

from __future__ import annotations

from pydantic import Field, field_validator

from hotelmerge.adapters.supplier import SupplierPayloadModel, none_to_empty_list


class PatagoniaImagePayload(SupplierPayloadModel):
    url: str
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return "" if value is None else value


class PatagoniaImagesPayload(SupplierPayloadModel):
    rooms: list[PatagoniaImagePayload] = Field(default_factory=list)
    site: list[PatagoniaImagePayload] = Field(default_factory=list)
    amenities: list[PatagoniaImagePayload] = Field(default_factory=list)

    _normalize_lists = field_validator("rooms", "site", "amenities", mode="before")(
        none_to_empty_list
    )


class PatagoniaHotelPayload(SupplierPayloadModel):
    id: str
    destination: int
    name: str = ""
    lat: float | None = None
    lng: float | None = None
    address: str | None = None
    info: str | None = None
    amenities: list[str] = Field(default_factory=list)
    images: PatagoniaImagesPayload = Field(default_factory=PatagoniaImagesPayload)

    _normalize_amenities = field_validator("amenities", mode="before")(none_to_empty_list)

    @field_validator("images", mode="before")
    @classmethod
    def _null_images(cls, value: object) -> object:
        return {} if value is None else value
