"""Paperflies supplier adapter."""

from __future__ import annotations

from .client import PaperfliesSupplier
from .schema import (
    PaperfliesAmenitiesPayload,
    PaperfliesHotelPayload,
    PaperfliesImagePayload,
    PaperfliesImagesPayload,
    PaperfliesLocationPayload,
)
from .translator import translate_hotel

__all__ = [
    "PaperfliesAmenitiesPayload",
    "PaperfliesHotelPayload",
    "PaperfliesImagePayload",
    "PaperfliesImagesPayload",
    "PaperfliesLocationPayload",
    "PaperfliesSupplier",
    "translate_hotel",
]
