"""HTTP supplier for the Patagonia hotel feed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotelmerge.adapters.supplier import HttpHotelSupplier
from hotelmerge.config.suppliers import SupplierName

from .schema import PatagoniaHotelPayload
from .translator import translate_hotel

if TYPE_CHECKING:
    from hotelmerge.domain.model import Hotel


class PatagoniaSupplier(HttpHotelSupplier[PatagoniaHotelPayload]):
    name = SupplierName.PATAGONIA.value
    payload_type = PatagoniaHotelPayload

    def identify(self, payload: PatagoniaHotelPayload) -> tuple[str, int]:
        return payload.id, payload.destination

    def translate(self, payload: PatagoniaHotelPayload) -> Hotel:
        return translate_hotel(payload)
