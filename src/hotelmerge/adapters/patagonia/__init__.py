"""Patagonia supplier adapter."""

from __future__ import annotations

from .client import PatagoniaSupplier
from .schema import PatagoniaHotelPayload, PatagoniaImagePayload, PatagoniaImagesPayload
from .translator import translate_hotel

__all__ = [
    "PatagoniaHotelPayload",
    "PatagoniaImagePayload",
    "PatagoniaImagesPayload",
    "PatagoniaSupplier",
    "translate_hotel",
]
