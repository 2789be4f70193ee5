"""Hotel id / destination filters shared by suppliers, cache and boundary layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .model import Hotel

NO_DESTINATION = -1


class InvalidFilterError(ValueError):
    """Raised when caller supplied filter values cannot be interpreted."""


@dataclass(frozen=True, slots=True)
class HotelFilter:
    """Intersection of an optional hotel id set and an optional destination.

    A record passes when it matches the destination (or no destination was asked for)
    *and* its id is requested (or no ids were asked for). The destination never
    overrides the id list.
    """

    hotel_ids: frozenset[str] = frozenset()
    destination_id: int = NO_DESTINATION

    @classmethod
    def build(cls, hotel_ids: Iterable[str] = (), destination_id: int = NO_DESTINATION) -> HotelFilter:
        return cls(hotel_ids=frozenset(hotel_ids), destination_id=destination_id)

    @property
    def has_destination(self) -> bool:
        return self.destination_id >= 0

    @property
    def has_hotel_ids(self) -> bool:
        return bool(self.hotel_ids)

    def accepts(self, hotel_id: str, destination_id: int) -> bool:
        destination_ok = not self.has_destination or destination_id == self.destination_id
        hotel_ok = not self.has_hotel_ids or hotel_id in self.hotel_ids
        return destination_ok and hotel_ok

    def matches(self, hotel: Hotel) -> bool:
        return self.accepts(hotel.id, hotel.destination_id)

    def apply(self, hotels: Iterable[Hotel]) -> list[Hotel]:
        return [hotel for hotel in hotels if self.matches(hotel)]


def parse_hotel_ids(raw: str | None) -> list[str]:
    """Split a comma separated id list, dropping blank entries."""

    if raw is None or not raw.strip():
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def parse_destination_id(raw: str | None) -> int:
    """Parse an optional destination id; absent means no destination constraint."""

    if raw is None or raw == "":
        return NO_DESTINATION
    try:
        value = int(raw)
    except ValueError as exc:
        raise InvalidFilterError(f"Invalid destination id: {raw!r}") from exc
    if value < 0:
        raise InvalidFilterError(f"Destination id must be non-negative: {value}")
    return value


def parse_filter_params(hotels: str | None, destination: str | None) -> tuple[list[str], int]:
    return parse_hotel_ids(hotels), parse_destination_id(destination)


def dedupe_ids(hotel_ids: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(hotel_ids))


__all__ = [
    "NO_DESTINATION",
    "HotelFilter",
    "InvalidFilterError",
    "dedupe_ids",
    "parse_destination_id",
    "parse_filter_params",
    "parse_hotel_ids",
]
