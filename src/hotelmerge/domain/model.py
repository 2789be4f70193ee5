"""Canonical hotel model shared by suppliers, the merge engine and the cache.

Instances are frozen. Cleaning and merging always build new values through
``dataclasses.replace`` so a record handed to a caller never changes underneath it.
Amenities are stored as tuples for hashability; they carry set semantics and their
order is not part of the contract.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class Location:
    latitude: float = 0.0
    longitude: float = 0.0
    address: str = ""
    city: str = ""
    country: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class Amenities:
    general: tuple[str, ...] = ()
    room: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class Image:
    link: str
    description: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class Images:
    """Images split into categories; ``link`` is unique within each category."""

    rooms: tuple[Image, ...] = ()
    site: tuple[Image, ...] = ()
    amenities: tuple[Image, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class Hotel:
    """Reconciled representation of one hotel across suppliers."""

    id: str
    destination_id: int
    name: str = ""
    location: Location = field(default_factory=Location)
    description: str = ""
    amenities: Amenities = field(default_factory=Amenities)
    images: Images = field(default_factory=Images)
    booking_conditions: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the public API representation of the hotel."""

        return {
            "id": self.id,
            "destination_id": self.destination_id,
            "name": self.name,
            "location": {
                "lat": self.location.latitude,
                "lng": self.location.longitude,
                "address": self.location.address,
                "city": self.location.city,
                "country": self.location.country,
            },
            "description": self.description,
            "amenities": {
                "general": list(self.amenities.general),
                "room": list(self.amenities.room),
            },
            "images": {
                "rooms": [_image_dict(image) for image in self.images.rooms],
                "site": [_image_dict(image) for image in self.images.site],
                "amenities": [_image_dict(image) for image in self.images.amenities],
            },
            "booking_conditions": list(self.booking_conditions),
        }


def _image_dict(image: Image) -> dict[str, str]:
    return {"link": image.link, "description": image.description}


__all__ = ["Amenities", "Hotel", "Image", "Images", "Location"]
