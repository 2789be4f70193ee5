"""Port for the reconciled-hotel result cache."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import timedelta

    from hotelmerge.domain.model import Hotel


@dataclass(frozen=True, slots=True)
class CacheHit:
    hotel: Hotel


@dataclass(frozen=True, slots=True)
class CacheMiss:
    pass


@dataclass(frozen=True, slots=True)
class CacheAnomaly:
    """A value was stored under the key but it could not be read back as a hotel."""

    reason: str


type CacheLookup = CacheHit | CacheMiss | CacheAnomaly


@runtime_checkable
class HotelCache(Protocol):
    def get(self, key: str) -> CacheLookup: ...

    def set(self, key: str, hotel: Hotel, ttl: timedelta) -> None: ...


__all__ = ["CacheAnomaly", "CacheHit", "CacheLookup", "CacheMiss", "HotelCache"]
