"""Acme supplier adapter."""

from __future__ import annotations

from .client import AcmeSupplier
from .schema import AcmeHotelPayload
from .translator import translate_hotel

__all__ = ["AcmeHotelPayload", "AcmeSupplier", "translate_hotel"]
