from __future__ import annotations

from hotelmerge.domain.cleaning import clean_hotel, clean_hotels
from tests.helpers.hotels import make_hotel


def test_clean_hotel_trims_text_and_lowercases_amenities() -> None:
    hotel = make_hotel(
        name="  Beach Villas ",
        address=" 8 Sentosa Gateway ",
        city=" Singapore",
        country="SG ",
        description="\tGreat views. \n",
        general=[" Pool", "BusinessCenter "],
        room=[" Aircon "],
        rooms=[("https://img/1.jpg", " Double room ")],
        booking_conditions=[" No pets. "],
    )

    cleaned = clean_hotel(hotel)

    assert cleaned.name == "Beach Villas"
    assert cleaned.location.address == "8 Sentosa Gateway"
    assert cleaned.location.city == "Singapore"
    assert cleaned.location.country == "SG"
    assert cleaned.description == "Great views."
    assert cleaned.amenities.general == ("pool", "businesscenter")
    assert cleaned.amenities.room == ("aircon",)
    assert cleaned.images.rooms[0].description == "Double room"
    assert cleaned.images.rooms[0].link == "https://img/1.jpg"
    assert cleaned.booking_conditions == ("No pets.",)


def test_clean_hotel_leaves_original_untouched() -> None:
    hotel = make_hotel(name=" spaced ")

    clean_hotel(hotel)

    assert hotel.name == " spaced "


def test_clean_hotel_keeps_identity_and_coordinates() -> None:
    hotel = make_hotel("abc", 7, latitude=1.264751, longitude=103.824006)

    cleaned = clean_hotel(hotel)

    assert (cleaned.id, cleaned.destination_id) == ("abc", 7)
    assert (cleaned.location.latitude, cleaned.location.longitude) == (1.264751, 103.824006)


def test_clean_hotels_preserves_order() -> None:
    hotels = [make_hotel("a"), make_hotel("b")]

    assert [hotel.id for hotel in clean_hotels(hotels)] == ["a", "b"]
