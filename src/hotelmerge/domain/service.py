"""Cache-assisted hotel query resolution.

Flow of one query:

1) when ids are requested without a destination, serve what the cache can
2) fetch the remaining ids from every supplier concurrently
3) clean each supplier batch, then merge across suppliers
4) write every merged hotel back to the cache
5) return merged hotels followed by the cache hits

Cache hits are appended, not merged against the live results. Cache hits are
only reused for ids that were not fetched, so the combination normally holds
unique ids. A hotel could still show up twice if a cache entry is written
by a concurrent query between steps 1 and 4. That case is accepted and left as is.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import timedelta
from logging import getLogger
from typing import TYPE_CHECKING

from .cleaning import clean_hotels
from .filtering import NO_DESTINATION, HotelFilter, dedupe_ids
from .merging import merge_hotels
from .orchestrator import fetch_all
from .ports.cache import CacheAnomaly, CacheHit

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Sequence

    from .model import Hotel
    from .ports.cache import HotelCache
    from .ports.suppliers import HotelSupplier, SupplierBatch

log = getLogger(__name__)

DEFAULT_CACHE_TTL = timedelta(minutes=1)


class HotelServiceError(RuntimeError):
    """Raised when a query fails for reasons other than supplier outages."""


@dataclass(frozen=True, slots=True)
class CacheSplit:
    hits: tuple[Hotel, ...] = ()
    remaining: tuple[str, ...] = ()


@dataclass(slots=True, kw_only=True)
class HotelQueryService:
    """Resolve hotel queries from the cache and the registered suppliers."""

    suppliers: Sequence[HotelSupplier]
    cache: HotelCache
    cache_ttl: timedelta = DEFAULT_CACHE_TTL
    _suppliers: tuple[HotelSupplier, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._suppliers = tuple(self.suppliers)

    @property
    def supplier_names(self) -> tuple[str, ...]:
        return tuple(supplier.name for supplier in self._suppliers)

    async def get_hotels(
        self,
        hotel_ids: Sequence[str] = (),
        destination_id: int = NO_DESTINATION,
        *,
        cancel: asyncio.Event | None = None,
    ) -> list[Hotel]:
        requested = dedupe_ids(hotel_ids)
        split = CacheSplit(remaining=tuple(requested))
        if requested and destination_id < 0:
            split = self._split_cached(requested)
            if not split.remaining:
                log.info("Served %d hotels from cache", len(split.hits))
                return list(split.hits)

        hotel_filter = HotelFilter.build(split.remaining, destination_id)
        try:
            batches = await fetch_all(self._suppliers, hotel_filter, cancel=cancel)
            merged = self._reconcile(batches)
        except Exception as exc:
            log.exception("Failed to reconcile hotels from %s", ", ".join(self.supplier_names))
            raise HotelServiceError("Failed to reconcile supplier hotels") from exc

        for hotel in merged:
            self.cache.set(hotel.id, hotel, self.cache_ttl)

        log.info(
            "Resolved %d hotels (%d live, %d cached)",
            len(merged) + len(split.hits),
            len(merged),
            len(split.hits),
        )
        return [*merged, *split.hits]

    async def aclose(self) -> None:
        """Close every registered supplier."""

        for supplier in self._suppliers:
            await supplier.aclose()
        log.debug("Closed suppliers: %s", ", ".join(self.supplier_names))

    def _split_cached(self, hotel_ids: Sequence[str]) -> CacheSplit:
        hits: list[Hotel] = []
        remaining: list[str] = []
        for hotel_id in hotel_ids:
            lookup = self.cache.get(hotel_id)
            if isinstance(lookup, CacheHit):
                hits.append(lookup.hotel)
                continue
            if isinstance(lookup, CacheAnomaly):
                log.warning("Ignoring unreadable cache entry for hotel %s: %s", hotel_id, lookup.reason)
            remaining.append(hotel_id)
        return CacheSplit(hits=tuple(hits), remaining=tuple(remaining))

    @staticmethod
    def _reconcile(batches: Sequence[SupplierBatch]) -> list[Hotel]:
        cleaned = [replace(batch, hotels=tuple(clean_hotels(batch.hotels))) for batch in batches]
        return merge_hotels(cleaned)


__all__ = ["DEFAULT_CACHE_TTL", "CacheSplit", "HotelQueryService", "HotelServiceError"]
