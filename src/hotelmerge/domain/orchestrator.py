"""Concurrent fan-out of hotel fetches across every registered supplier."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from .ports.suppliers import SupplierBatch

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .filtering import HotelFilter
    from .ports.suppliers import HotelSupplier

log = getLogger(__name__)


async def fetch_all(
    suppliers: Sequence[HotelSupplier],
    hotel_filter: HotelFilter,
    *,
    cancel: asyncio.Event | None = None,
) -> list[SupplierBatch]:
    """Fetch from all suppliers concurrently and wait for every one of them.

    A failing supplier is logged and contributes an empty, ``failed`` batch; the
    failure never reaches the caller. Batches come back in registration order and
    every batch is narrowed to ``hotel_filter``.
    """

    hotel_ids = sorted(hotel_filter.hotel_ids)
    async with asyncio.TaskGroup() as group:
        tasks = [
            group.create_task(
                _fetch_one(supplier, hotel_ids, hotel_filter, cancel=cancel),
                name=f"fetch-{supplier.name}",
            )
            for supplier in suppliers
        ]
    batches = [task.result() for task in tasks]
    log.info(
        "Fetched hotels from %d suppliers (%d failed)",
        len(batches),
        sum(batch.failed for batch in batches),
    )
    return batches


async def _fetch_one(
    supplier: HotelSupplier,
    hotel_ids: Sequence[str],
    hotel_filter: HotelFilter,
    *,
    cancel: asyncio.Event | None,
) -> SupplierBatch:
    name = supplier.name
    try:
        hotels = await supplier.fetch_hotels(hotel_ids, hotel_filter.destination_id, cancel=cancel)
    except Exception as exc:  # noqa: BLE001
        log.warning("Supplier %s failed to fetch hotels: %s", name, exc)
        return SupplierBatch(supplier=name, failed=True)
    log.debug("Supplier %s returned %d hotels", name, len(hotels))
    return SupplierBatch(supplier=name, hotels=tuple(hotel_filter.apply(hotels)))


__all__ = ["fetch_all"]
