from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest
from pydantic import ValidationError

from hotelmerge.adapters.acme import AcmeHotelPayload, AcmeSupplier, translate_hotel
from hotelmerge.adapters.http_resilience import ResilientClient
from hotelmerge.adapters.supplier import SupplierAPIError
from hotelmerge.config import SupplierName, supplier_resilience
from hotelmerge.config.http_resilience import ResilienceConfig
from tests.helpers.http import json_factory, make_client_factory, resilience

if TYPE_CHECKING:
    from hotelmerge.domain.model import Hotel


@pytest.fixture
def acme_payload() -> list[dict[str, object]]:
    return [
        {
            "Id": "iJhz",
            "DestinationId": 5432,
            "Name": "Beach Villas Singapore",
            "Latitude": 1.264751,
            "Longitude": 103.824006,
            "Address": " 8 Sentosa Gateway, Beach Villas ",
            "City": "Singapore",
            "Country": "SG",
            "PostalCode": "098269",
            "Description": "  This 5 star hotel is located on the coastline of Singapore.",
            "Facilities": ["Pool", "BusinessCenter", "WiFi ", "DryCleaning", " Breakfast"],
        },
        {
            "Id": "SjyX",
            "DestinationId": 5432,
            "Name": "InterContinental Singapore Robertson Quay",
            "Latitude": None,
            "Longitude": "",
            "Address": "1 Nanson Road",
            "City": "Singapore",
            "Country": "SG",
            "PostalCode": "238909",
            "Description": "Enjoy sophisticated waterfront living.",
            "Facilities": ["Pool", "WiFi ", "Aircon", "BusinessCenter"],
        },
        {
            "Id": "f8c9",
            "DestinationId": 1122,
            "Name": "Hilton Shinjuku Tokyo",
            "Latitude": "35.6926",
            "Longitude": "139.690965",
            "Address": "160-0023, SHINJUKU-KU, 6-6-2 NISHI-SHINJUKU, JAPAN",
            "City": "Tokyo",
            "Country": "JP",
            "PostalCode": "160-0023",
            "Description": "Hilton Tokyo is located in Shinjuku.",
            "Facilities": None,
        },
    ]


def test_translate_hotel_maps_facilities_to_general_amenities(
    acme_payload: list[dict[str, object]],
) -> None:
    hotel = translate_hotel(AcmeHotelPayload.model_validate(acme_payload[0]))

    assert hotel.id == "iJhz"
    assert hotel.destination_id == 5432
    assert hotel.location.latitude == 1.264751
    assert hotel.location.city == "Singapore"
    assert hotel.location.country == "SG"
    assert "Pool" in hotel.amenities.general
    assert hotel.amenities.room == ()
    assert hotel.images.rooms == ()
    assert hotel.booking_conditions == ()


def test_schema_accepts_quoted_blank_and_null_coordinates(
    acme_payload: list[dict[str, object]],
) -> None:
    blank = translate_hotel(AcmeHotelPayload.model_validate(acme_payload[1]))
    quoted = translate_hotel(AcmeHotelPayload.model_validate(acme_payload[2]))

    assert (blank.location.latitude, blank.location.longitude) == (0.0, 0.0)
    assert quoted.location.latitude == 35.6926
    assert quoted.location.longitude == 139.690965
    assert quoted.amenities.general == ()


def test_schema_rejects_non_numeric_coordinates() -> None:
    with pytest.raises(ValidationError):
        AcmeHotelPayload.model_validate({"Id": "x", "DestinationId": 1, "Latitude": "north"})


def test_fetch_hotels_filters_by_destination(acme_payload: list[dict[str, object]]) -> None:
    requests: list[httpx.Request] = []
    supplier = AcmeSupplier(
        resilience=resilience("acme"),
        client_factory=json_factory(acme_payload, requests),
    )

    hotels = asyncio.run(supplier.fetch_hotels([], 5432))

    assert [hotel.id for hotel in hotels] == ["iJhz", "SjyX"]
    assert str(requests[0].url) == "https://suppliers.test/hotels"


def test_fetch_hotels_intersects_ids_and_destination(
    acme_payload: list[dict[str, object]],
) -> None:
    supplier = AcmeSupplier(resilience=resilience("acme"), client_factory=json_factory(acme_payload))

    hotels = asyncio.run(supplier.fetch_hotels(["SjyX", "f8c9"], 5432))

    assert [hotel.id for hotel in hotels] == ["SjyX"]


def test_fetch_hotels_raises_on_http_error() -> None:
    supplier = AcmeSupplier(
        resilience=resilience("acme"),
        client_factory=make_client_factory(lambda _request: httpx.Response(404)),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(supplier.fetch_hotels([], -1))


def test_fetch_hotels_rejects_non_list_payload() -> None:
    supplier = AcmeSupplier(
        resilience=resilience("acme"),
        client_factory=json_factory({"hotels": []}),
    )

    with pytest.raises(SupplierAPIError):
        asyncio.run(supplier.fetch_hotels([], -1))


def test_supplier_requires_base_url() -> None:
    with pytest.raises(SupplierAPIError):
        AcmeSupplier(resilience=ResilienceConfig(name="acme"))


def test_supplier_http_cache_serves_second_fetch(
    acme_payload: list[dict[str, object]],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("HOTELMERGE_SUPPLIER_HTTP_CACHE_SECONDS", "60")
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=acme_payload)

    def factory(config: ResilienceConfig) -> ResilientClient:
        return ResilientClient(config, transport=httpx.MockTransport(handler))

    supplier = AcmeSupplier(
        resilience=supplier_resilience(SupplierName.ACME, "https://suppliers.test/acme"),
        client_factory=factory,
    )

    async def run() -> tuple[list[Hotel], list[Hotel]]:
        try:
            first = await supplier.fetch_hotels([], -1)
            second = await supplier.fetch_hotels([], -1)
        finally:
            await supplier.aclose()
        return first, second

    first, second = asyncio.run(run())

    assert len(requests) == 1
    assert first == second


def test_supplier_reuses_client_until_closed(acme_payload: list[dict[str, object]]) -> None:
    created: list[ResilientClient] = []
    build = json_factory(acme_payload)

    def factory(config: ResilienceConfig) -> ResilientClient:
        client = build(config)
        created.append(client)
        return client

    supplier = AcmeSupplier(resilience=resilience("acme"), client_factory=factory)

    async def run() -> None:
        await supplier.fetch_hotels([], -1)
        await supplier.fetch_hotels(["iJhz"], -1)
        await supplier.aclose()
        await supplier.fetch_hotels([], -1)
        await supplier.aclose()

    asyncio.run(run())

    assert len(created) == 2
