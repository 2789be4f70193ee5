"""Translate Patagonia payloads into canonical hotels."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotelmerge.domain.model import Amenities, Hotel, Image, Images, Location

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import PatagoniaHotelPayload, PatagoniaImagePayload


def translate_hotel(payload: PatagoniaHotelPayload) -> Hotel:
    """Patagonia amenities are room amenities; the feed has no city, country or policies."""

    return Hotel(
        id=payload.id,
        destination_id=payload.destination,
        name=payload.name,
        location=Location(
            latitude=payload.lat or 0.0,
            longitude=payload.lng or 0.0,
            address=payload.address or "",
        ),
        description=payload.info or "",
        amenities=Amenities(room=tuple(payload.amenities)),
        images=Images(
            rooms=_translate_images(payload.images.rooms),
            site=_translate_images(payload.images.site),
            amenities=_translate_images(payload.images.amenities),
        ),
    )


def _translate_images(images: Iterable[PatagoniaImagePayload]) -> tuple[Image, ...]:
    return tuple(Image(link=image.url, description=image.description) for image in images)
