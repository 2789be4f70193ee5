"""Supplier and cache adapters."""

from __future__ import annotations

from .acme import AcmeSupplier
from .cache import InMemoryHotelCache, TTLStore
from .paperflies import PaperfliesSupplier
from .patagonia import PatagoniaSupplier
from .supplier import HttpHotelSupplier, SupplierAPIError, SupplierCancelledError

__all__ = [
    "AcmeSupplier",
    "HttpHotelSupplier",
    "InMemoryHotelCache",
    "PaperfliesSupplier",
    "PatagoniaSupplier",
    "SupplierAPIError",
    "SupplierCancelledError",
    "TTLStore",
]
