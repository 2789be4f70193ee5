"""HTTP supplier for the Paperflies hotel feed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotelmerge.adapters.supplier import HttpHotelSupplier
from hotelmerge.config.suppliers import SupplierName

from .schema import PaperfliesHotelPayload
from .translator import translate_hotel

if TYPE_CHECKING:
    from hotelmerge.domain.model import Hotel


class PaperfliesSupplier(HttpHotelSupplier[PaperfliesHotelPayload]):
    name = SupplierName.PAPERFLIES.value
    payload_type = PaperfliesHotelPayload

    def identify(self, payload: PaperfliesHotelPayload) -> tuple[str, int]:
        return payload.hotel_id, payload.destination_id

    def translate(self, payload: PaperfliesHotelPayload) -> Hotel:
        return translate_hotel(payload)
