"""Application wiring: build suppliers, cache and the query service from config."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from hotelmerge.adapters.acme import AcmeSupplier
from hotelmerge.adapters.cache import InMemoryHotelCache
from hotelmerge.adapters.paperflies import PaperfliesSupplier
from hotelmerge.adapters.patagonia import PatagoniaSupplier
from hotelmerge.config import ServiceConfig, SupplierName, get_service_config
from hotelmerge.domain.service import HotelQueryService

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hotelmerge.adapters.supplier import ClientFactory, HttpHotelSupplier
    from hotelmerge.config import SupplierConfig
    from hotelmerge.domain.ports.cache import HotelCache

log = getLogger(__name__)

SUPPLIER_TYPES: dict[SupplierName, type[HttpHotelSupplier]] = {
    SupplierName.ACME: AcmeSupplier,
    SupplierName.PATAGONIA: PatagoniaSupplier,
    SupplierName.PAPERFLIES: PaperfliesSupplier,
}


def build_suppliers(
    configs: Iterable[SupplierConfig],
    *,
    client_factory: ClientFactory | None = None,
) -> list[HttpHotelSupplier]:
    suppliers: list[HttpHotelSupplier] = []
    for config in configs:
        supplier_type = SUPPLIER_TYPES[config.name]
        suppliers.append(
            supplier_type(resilience=config.resilience, client_factory=client_factory)
        )
    return suppliers


def build_hotel_service(
    config: ServiceConfig | None = None,
    *,
    cache: HotelCache | None = None,
    client_factory: ClientFactory | None = None,
) -> HotelQueryService:
    """Build the query service from ``config`` (or the environment) with an in-memory cache."""

    effective_config = config or get_service_config()
    suppliers = build_suppliers(effective_config.suppliers, client_factory=client_factory)
    log.info(
        "Hotel service ready: suppliers=%s, cache_ttl=%ss",
        ", ".join(supplier.name for supplier in suppliers),
        effective_config.cache_ttl.total_seconds(),
    )
    return HotelQueryService(
        suppliers=suppliers,
        cache=cache or InMemoryHotelCache(),
        cache_ttl=effective_config.cache_ttl,
    )
