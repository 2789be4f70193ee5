"""FastAPI boundary exposing hotel queries over HTTP."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from logging import getLogger
from typing import TYPE_CHECKING, Any, Protocol

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hotelmerge import __version__
from hotelmerge.domain.filtering import InvalidFilterError, parse_filter_params
from hotelmerge.domain.service import HotelServiceError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from hotelmerge.domain.service import HotelQueryService

log = getLogger(__name__)

INVALID_DESTINATION_MESSAGE = (
    "Invalid destination ID. Destination ID must be a non-negative integer."
)
INTERNAL_ERROR_MESSAGE = "Internal server error. Please try again later or contact support."
NOT_FOUND_MESSAGE = "No hotels found."
DISCONNECT_POLL_SECONDS = 0.1


class Disconnectable(Protocol):
    async def is_disconnected(self) -> bool: ...


async def watch_disconnect(
    request: Disconnectable,
    cancel: asyncio.Event,
    *,
    interval: float = DISCONNECT_POLL_SECONDS,
) -> None:
    """Set ``cancel`` once the client has gone away; returns early if it is already set."""

    while not cancel.is_set():
        if await request.is_disconnected():
            log.info("Client disconnected, cancelling supplier fetches")
            cancel.set()
            return
        await asyncio.sleep(interval)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(service: HotelQueryService) -> FastAPI:
    """Create the API application around an already wired query service."""

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        log.info("Hotel API starting with suppliers: %s", ", ".join(service.supplier_names))
        yield
        log.info("Hotel API shutting down")
        await service.aclose()

    app = FastAPI(title="hotelmerge", version=__version__, lifespan=lifespan)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"message": "success"}

    @app.get("/hotels", response_model=None)
    async def get_hotels(
        request: Request,
        hotels: str | None = None,
        destination: str | None = None,
    ) -> list[dict[str, Any]] | JSONResponse:
        try:
            hotel_ids, destination_id = parse_filter_params(hotels, destination)
        except InvalidFilterError as exc:
            log.info("Rejected hotel query: %s", exc)
            return _error(400, INVALID_DESTINATION_MESSAGE)

        cancel = asyncio.Event()
        watcher = asyncio.create_task(watch_disconnect(request, cancel))
        try:
            result = await service.get_hotels(hotel_ids, destination_id, cancel=cancel)
        except HotelServiceError:
            return _error(500, INTERNAL_ERROR_MESSAGE)
        finally:
            watcher.cancel()

        if not result:
            return _error(404, NOT_FOUND_MESSAGE)
        return [hotel.to_dict() for hotel in result]

    return app


__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "INVALID_DESTINATION_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "create_app",
    "watch_disconnect",
]
