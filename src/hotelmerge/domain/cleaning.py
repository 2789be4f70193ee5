"""Post-fetch normalisation applied to supplier records before they are merged."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from .model import Amenities, Hotel, Image, Location

if TYPE_CHECKING:
    from collections.abc import Iterable


def clean_hotel(hotel: Hotel) -> Hotel:
    """Return a copy of ``hotel`` with trimmed text fields and lower-cased amenities.

    Lower-casing is a comparison aid for the merge step, so consumers receive
    amenities in lower case.
    """

    location = hotel.location
    return replace(
        hotel,
        name=hotel.name.strip(),
        description=hotel.description.strip(),
        location=Location(
            latitude=location.latitude,
            longitude=location.longitude,
            address=location.address.strip(),
            city=location.city.strip(),
            country=location.country.strip(),
        ),
        amenities=Amenities(
            general=_clean_amenities(hotel.amenities.general),
            room=_clean_amenities(hotel.amenities.room),
        ),
        images=replace(
            hotel.images,
            rooms=_clean_images(hotel.images.rooms),
            site=_clean_images(hotel.images.site),
            amenities=_clean_images(hotel.images.amenities),
        ),
        booking_conditions=tuple(condition.strip() for condition in hotel.booking_conditions),
    )


def clean_hotels(hotels: Iterable[Hotel]) -> list[Hotel]:
    return [clean_hotel(hotel) for hotel in hotels]


def _clean_amenities(amenities: Iterable[str]) -> tuple[str, ...]:
    return tuple(amenity.strip().lower() for amenity in amenities)


def _clean_images(images: Iterable[Image]) -> tuple[Image, ...]:
    return tuple(replace(image, description=image.description.strip()) for image in images)


__all__ = ["clean_hotel", "clean_hotels"]
