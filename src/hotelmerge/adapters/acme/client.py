"""HTTP supplier for the Acme hotel feed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotelmerge.adapters.supplier import HttpHotelSupplier
from hotelmerge.config.suppliers import SupplierName

from .schema import AcmeHotelPayload
from .translator import translate_hotel

if TYPE_CHECKING:
    from hotelmerge.domain.model import Hotel
    from hotelmerge.domain.ports.suppliers import HotelSupplier


class AcmeSupplier(HttpHotelSupplier[AcmeHotelPayload]):
    name = SupplierName.ACME.value
    payload_type = AcmeHotelPayload

    def identify(self, payload: AcmeHotelPayload) -> tuple[str, int]:
        return payload.id, payload.destination_id

    def translate(self, payload: AcmeHotelPayload) -> Hotel:
        return translate_hotel(payload)


if TYPE_CHECKING:
    from hotelmerge.config.http_resilience import ResilienceConfig

    _supplier_check: HotelSupplier = AcmeSupplier(resilience=ResilienceConfig(name="acme"))
