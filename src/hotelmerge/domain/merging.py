"""Field-level reconciliation of hotel records that share an id.

Merging is not commutative: several rules keep the existing value on a tie. To make
results reproducible, ``merge_hotels`` folds supplier batches in lexicographic order of
the supplier name, and records of one supplier in the order the supplier returned them.
"""

from __future__ import annotations

import math
from decimal import Decimal
from logging import getLogger
from typing import TYPE_CHECKING

from .model import Amenities, Hotel, Image, Images, Location

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .ports.suppliers import SupplierBatch

log = getLogger(__name__)


def merge_hotels(batches: Iterable[SupplierBatch]) -> list[Hotel]:
    """Group hotels by id across batches and fold each group into one record."""

    ordered = sorted(batches, key=lambda batch: batch.supplier)
    merged: dict[str, Hotel] = {}
    for batch in ordered:
        for hotel in batch.hotels:
            existing = merged.get(hotel.id)
            merged[hotel.id] = hotel if existing is None else merge_hotel_data(existing, hotel)
    log.debug(
        "Merged %d hotels from suppliers: %s",
        len(merged),
        ", ".join(batch.supplier for batch in ordered),
    )
    return list(merged.values())


def merge_hotel_data(existing: Hotel, incoming: Hotel) -> Hotel:
    """Merge ``incoming`` into ``existing`` and return the combined record.

    ``existing.id`` and ``existing.destination_id`` are always kept.
    """

    general = merge_amenities(existing.amenities.general, incoming.amenities.general)
    room = merge_amenities(existing.amenities.room, incoming.amenities.room)

    return Hotel(
        id=existing.id,
        destination_id=existing.destination_id,
        name=_longer(existing.name, incoming.name),
        location=Location(
            latitude=_more_precise(existing.location.latitude, incoming.location.latitude),
            longitude=_more_precise(existing.location.longitude, incoming.location.longitude),
            address=_longer(existing.location.address, incoming.location.address),
            city=_longer(existing.location.city, incoming.location.city),
            # a longer value is usually a full country name rather than an ISO code
            country=_longer(existing.location.country, incoming.location.country),
        ),
        description=f"{existing.description} {incoming.description}",
        amenities=Amenities(general=remove_room_amenities(room, general), room=room),
        images=Images(
            rooms=merge_images(existing.images.rooms, incoming.images.rooms),
            site=merge_images(existing.images.site, incoming.images.site),
            amenities=merge_images(existing.images.amenities, incoming.images.amenities),
        ),
        booking_conditions=(*existing.booking_conditions, *incoming.booking_conditions),
    )


def count_decimal_places(value: float) -> int:
    """Number of digits after the decimal point in the shortest positional form."""

    if not math.isfinite(value):
        return 0
    exponent = Decimal(repr(value)).normalize().as_tuple().exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


def amenity_key(amenity: str) -> str:
    return amenity.replace(" ", "").lower()


def merge_amenities(existing: Sequence[str], incoming: Sequence[str]) -> tuple[str, ...]:
    """Union two amenity lists by normalised key.

    Suppliers spell the same amenity as ``"DryCleaning"`` or ``"dry cleaning"``; when
    two spellings collide the one containing a space wins, otherwise the first seen.
    """

    by_key: dict[str, str] = {}
    for amenity in (*existing, *incoming):
        key = amenity_key(amenity)
        current = by_key.get(key)
        if current is None or (" " in amenity and " " not in current):
            by_key[key] = amenity
    return tuple(by_key.values())


def remove_room_amenities(room: Sequence[str], general: Sequence[str]) -> tuple[str, ...]:
    """Drop general amenities that are already listed as room amenities."""

    room_keys = {amenity_key(amenity) for amenity in room}
    return tuple(amenity for amenity in general if amenity_key(amenity) not in room_keys)


def merge_images(existing: Sequence[Image], incoming: Sequence[Image]) -> tuple[Image, ...]:
    """Union images by link; an existing image is never replaced."""

    by_link: dict[str, Image] = {}
    for image in (*existing, *incoming):
        by_link.setdefault(image.link, image)
    return tuple(by_link.values())


def _longer(existing: str, incoming: str) -> str:
    return incoming if len(incoming) > len(existing) else existing


def _more_precise(existing: float, incoming: float) -> float:
    if count_decimal_places(incoming) > count_decimal_places(existing):
        return incoming
    return existing


__all__ = [
    "amenity_key",
    "count_decimal_places",
    "merge_amenities",
    "merge_hotel_data",
    "merge_hotels",
    "merge_images",
    "remove_room_amenities",
]
