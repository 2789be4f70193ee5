"""In-memory TTL cache for reconciled hotels."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from hotelmerge.domain.model import Hotel
from hotelmerge.domain.ports.cache import CacheAnomaly, CacheHit, CacheLookup, CacheMiss, HotelCache

if TYPE_CHECKING:
    from datetime import timedelta

log = getLogger(__name__)

Clock = Callable[[], float]

_HOTEL_ADAPTER: TypeAdapter[Hotel] = TypeAdapter(Hotel)


@dataclass(frozen=True, slots=True)
class _Entry:
    value: object
    expires_at: float


class TTLStore:
    """Opaque key-value store whose entries expire after a per-entry TTL.

    Expired entries are dropped lazily on access and by ``purge_expired``.
    """

    def __init__(self, *, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> tuple[object | None, bool]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None, False
            if entry.expires_at <= self._clock():
                del self._entries[key]
                return None, False
            return entry.value, True

    def set(self, key: str, value: object, ttl: timedelta) -> None:
        with self._lock:
            self._entries[key] = _Entry(value=value, expires_at=self._clock() + ttl.total_seconds())

    def purge_expired(self) -> int:
        with self._lock:
            now = self._clock()
            expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
            for key in expired:
                del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class InMemoryHotelCache:
    """Typed hotel cache on top of a ``TTLStore``.

    Hotels are stored in their plain-python form and validated on the way out, so a
    foreign or stale value under a hotel key surfaces as ``CacheAnomaly``.
    """

    def __init__(self, store: TTLStore | None = None) -> None:
        self.store = store if store is not None else TTLStore()

    def get(self, key: str) -> CacheLookup:
        value, found = self.store.get(key)
        if not found:
            return CacheMiss()
        try:
            hotel = _HOTEL_ADAPTER.validate_python(value)
        except ValidationError as exc:
            log.debug("Cache entry %s failed validation: %s", key, exc)
            return CacheAnomaly(reason=f"{exc.error_count()} validation errors")
        if hotel.id != key:
            return CacheAnomaly(reason=f"entry holds hotel {hotel.id!r}")
        return CacheHit(hotel=hotel)

    def set(self, key: str, hotel: Hotel, ttl: timedelta) -> None:
        self.store.set(key, _HOTEL_ADAPTER.dump_python(hotel), ttl)


if TYPE_CHECKING:
    _cache_check: HotelCache = InMemoryHotelCache()


__all__ = ["InMemoryHotelCache", "TTLStore"]
