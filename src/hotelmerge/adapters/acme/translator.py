"""Translate Acme payloads into canonical hotels."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotelmerge.domain.model import Amenities, Hotel, Location

if TYPE_CHECKING:
    from .schema import AcmeHotelPayload


def translate_hotel(payload: AcmeHotelPayload) -> Hotel:
    """Acme has no images or booking conditions and does not categorise facilities.

    Every facility is treated as a general amenity; missing coordinates become ``0.0``.
    """

    return Hotel(
        id=payload.id,
        destination_id=payload.destination_id,
        name=payload.name,
        location=Location(
            latitude=payload.latitude or 0.0,
            longitude=payload.longitude or 0.0,
            address=payload.address,
            city=payload.city,
            country=payload.country,
        ),
        description=payload.description,
        amenities=Amenities(general=tuple(payload.facilities)),
    )
