"""Hotel reconciliation domain: model, cleaning, merging and query resolution."""

from __future__ import annotations

from .cleaning import clean_hotel, clean_hotels
from .filtering import NO_DESTINATION, HotelFilter, InvalidFilterError, parse_filter_params
from .merging import merge_hotel_data, merge_hotels
from .model import Amenities, Hotel, Image, Images, Location
from .orchestrator import fetch_all
from .service import HotelQueryService, HotelServiceError

__all__ = [
    "NO_DESTINATION",
    "Amenities",
    "Hotel",
    "HotelFilter",
    "HotelQueryService",
    "HotelServiceError",
    "Image",
    "Images",
    "InvalidFilterError",
    "Location",
    "clean_hotel",
    "clean_hotels",
    "fetch_all",
    "merge_hotel_data",
    "merge_hotels",
    "parse_filter_params",
]
