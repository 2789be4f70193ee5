from __future__ import annotations

import asyncio

import pytest

from hotelmerge.adapters.patagonia import PatagoniaHotelPayload, PatagoniaSupplier, translate_hotel
from hotelmerge.domain.model import Image
from tests.helpers.http import json_factory, resilience


@pytest.fixture
def patagonia_payload() -> list[dict[str, object]]:
    return [
        {
            "id": "iJhz",
            "destination": 5432,
            "name": "Beach Villas Singapore",
            "lat": 1.264751,
            "lng": 103.824006,
            "address": "8 Sentosa Gateway, Beach Villas, 098269",
            "info": "Located at the western tip of Resorts World Sentosa.",
            "amenities": ["Aircon", "Tv", "Coffee machine", "Kettle", "Hair dryer", "Iron", "Tub"],
            "images": {
                "rooms": [
                    {"url": "https://img/2.jpg", "description": "Double room"},
                    {"url": "https://img/4.jpg", "description": "Bathroom"},
                ],
                "amenities": [{"url": "https://img/0.jpg", "description": "RWS"}],
            },
        },
        {
            "id": "f8c9",
            "destination": 1122,
            "name": "Hilton Tokyo Shinjuku",
            "lat": 35.6926,
            "lng": 139.690965,
            "address": None,
            "info": None,
            "amenities": None,
            "images": {"rooms": [], "amenities": []},
            "rating": 4.5,
        },
    ]


def test_translate_hotel_maps_amenities_to_room(patagonia_payload: list[dict[str, object]]) -> None:
    hotel = translate_hotel(PatagoniaHotelPayload.model_validate(patagonia_payload[0]))

    assert hotel.destination_id == 5432
    assert hotel.description.startswith("Located at the western tip")
    assert hotel.amenities.general == ()
    assert "Hair dryer" in hotel.amenities.room
    assert hotel.images.rooms[0] == Image(link="https://img/2.jpg", description="Double room")
    assert hotel.images.amenities == (Image(link="https://img/0.jpg", description="RWS"),)
    assert hotel.images.site == ()
    assert hotel.location.city == ""
    assert hotel.booking_conditions == ()


def test_translate_hotel_handles_nulls(patagonia_payload: list[dict[str, object]]) -> None:
    hotel = translate_hotel(PatagoniaHotelPayload.model_validate(patagonia_payload[1]))

    assert hotel.location.address == ""
    assert hotel.description == ""
    assert hotel.amenities.room == ()


def test_unmodelled_keys_are_kept_as_extras(patagonia_payload: list[dict[str, object]]) -> None:
    payload = PatagoniaHotelPayload.model_validate(patagonia_payload[1])

    assert payload.model_extra == {"rating": 4.5}


def test_fetch_hotels_filters_by_id(patagonia_payload: list[dict[str, object]]) -> None:
    supplier = PatagoniaSupplier(
        resilience=resilience("patagonia"),
        client_factory=json_factory(patagonia_payload),
    )

    hotels = asyncio.run(supplier.fetch_hotels(["f8c9"], -1))

    assert [hotel.id for hotel in hotels] == ["f8c9"]
    assert supplier.name == "Patagonia"
