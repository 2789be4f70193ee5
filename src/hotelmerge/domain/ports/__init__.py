"""Domain port definitions for adapters."""

from __future__ import annotations

from .cache import CacheAnomaly, CacheHit, CacheLookup, CacheMiss, HotelCache
from .suppliers import HotelSupplier, SupplierBatch

__all__ = [
    "CacheAnomaly",
    "CacheHit",
    "CacheLookup",
    "CacheMiss",
    "HotelCache",
    "HotelSupplier",
    "SupplierBatch",
]
