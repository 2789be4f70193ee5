"""Translate Paperflies payloads into canonical hotels."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotelmerge.domain.model import Amenities, Hotel, Image, Images, Location

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import PaperfliesHotelPayload, PaperfliesImagePayload


def translate_hotel(payload: PaperfliesHotelPayload) -> Hotel:
    return Hotel(
        id=payload.hotel_id,
        destination_id=payload.destination_id,
        name=payload.hotel_name,
        location=Location(
            address=payload.location.address,
            country=payload.location.country,
        ),
        description=payload.details,
        amenities=Amenities(
            general=tuple(payload.amenities.general),
            room=tuple(payload.amenities.room),
        ),
        images=Images(
            rooms=_translate_images(payload.images.rooms),
            site=_translate_images(payload.images.site),
        ),
        booking_conditions=tuple(payload.booking_conditions),
    )


def _translate_images(images: Iterable[PaperfliesImagePayload]) -> tuple[Image, ...]:
    return tuple(Image(link=image.link, description=image.caption) for image in images)
