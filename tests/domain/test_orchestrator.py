from __future__ import annotations

import asyncio

from hotelmerge.domain.filtering import HotelFilter
from hotelmerge.domain.orchestrator import fetch_all
from tests.helpers.hotels import FakeSupplier, make_hotel


def test_fetch_all_returns_one_batch_per_supplier() -> None:
    acme = FakeSupplier("Acme", hotels=[make_hotel("a")])
    paperflies = FakeSupplier("Paperflies", hotels=[make_hotel("b")])

    batches = asyncio.run(fetch_all([acme, paperflies], HotelFilter.build()))

    assert [batch.supplier for batch in batches] == ["Acme", "Paperflies"]
    assert [hotel.id for batch in batches for hotel in batch.hotels] == ["a", "b"]
    assert not any(batch.failed for batch in batches)


def test_failing_supplier_contributes_empty_batch() -> None:
    healthy = FakeSupplier("Acme", hotels=[make_hotel("a")])
    broken = FakeSupplier("Patagonia", error=RuntimeError("timeout"))

    batches = asyncio.run(fetch_all([healthy, broken], HotelFilter.build()))

    assert batches[0].hotels == (make_hotel("a"),)
    assert batches[1].failed
    assert batches[1].hotels == ()


def test_all_suppliers_failing_is_not_an_error() -> None:
    suppliers = [FakeSupplier(name, error=ValueError("bad payload")) for name in ("a", "b")]

    batches = asyncio.run(fetch_all(suppliers, HotelFilter.build()))

    assert all(batch.failed for batch in batches)


def test_fetch_all_passes_filter_and_narrows_results() -> None:
    supplier = FakeSupplier(
        "Acme",
        hotels=[make_hotel("a", 1), make_hotel("b", 1), make_hotel("a", 2)],
    )

    batches = asyncio.run(fetch_all([supplier], HotelFilter.build(["b", "a"], 1)))

    assert supplier.calls == [(("a", "b"), 1)]
    assert [(hotel.id, hotel.destination_id) for hotel in batches[0].hotels] == [
        ("a", 1),
        ("b", 1),
    ]


def test_cancellation_is_reported_as_supplier_failure() -> None:
    async def run() -> list[bool]:
        cancel = asyncio.Event()
        blocked = FakeSupplier("Acme", block_until_cancelled=True)
        fast = FakeSupplier("Paperflies", hotels=[make_hotel("a")])
        fetching = asyncio.create_task(fetch_all([blocked, fast], HotelFilter.build(), cancel=cancel))
        await asyncio.sleep(0)
        cancel.set()
        batches = await fetching
        return [batch.failed for batch in batches]

    assert asyncio.run(run()) == [True, False]


def test_fetch_all_without_suppliers() -> None:
    assert asyncio.run(fetch_all([], HotelFilter.build())) == []
