"""Pydantic models describing the Paperflies hotel feed."""

from __future__ import annotations

from pydantic import Field, field_validator

from hotelmerge.adapters.supplier import SupplierPayloadModel, none_to_empty_list


def _null_to_empty(value: object) -> object:
    return "" if value is None else value


class PaperfliesLocationPayload(SupplierPayloadModel):
    address: str = ""
    country: str = ""

    _normalize_text = field_validator("address", "country", mode="before")(_null_to_empty)


class PaperfliesAmenitiesPayload(SupplierPayloadModel):
    general: list[str] = Field(default_factory=list)
    room: list[str] = Field(default_factory=list)

    _normalize_lists = field_validator("general", "room", mode="before")(none_to_empty_list)


class PaperfliesImagePayload(SupplierPayloadModel):
    link: str
    caption: str = ""

    _normalize_caption = field_validator("caption", mode="before")(_null_to_empty)


class PaperfliesImagesPayload(SupplierPayloadModel):
    rooms: list[PaperfliesImagePayload] = Field(default_factory=list)
    site: list[PaperfliesImagePayload] = Field(default_factory=list)

    _normalize_lists = field_validator("rooms", "site", mode="before")(none_to_empty_list)


class PaperfliesHotelPayload(SupplierPayloadModel):
    hotel_id: str
    destination_id: int
    hotel_name: str = ""
    location: PaperfliesLocationPayload = Field(default_factory=PaperfliesLocationPayload)
    details: str = ""
    amenities: PaperfliesAmenitiesPayload = Field(default_factory=PaperfliesAmenitiesPayload)
    images: PaperfliesImagesPayload = Field(default_factory=PaperfliesImagesPayload)
    booking_conditions: list[str] = Field(default_factory=list)

    _normalize_text = field_validator("hotel_name", "details", mode="before")(_null_to_empty)
    _normalize_conditions = field_validator("booking_conditions", mode="before")(
        none_to_empty_list
    )

    @field_validator("location", "amenities", "images", mode="before")
    @classmethod
    def _null_section(cls, value: object) -> object:
        return {} if value is None else value
