"""Shared plumbing for HTTP hotel suppliers.

Each supplier publishes its whole catalogue as one JSON array. A supplier adapter
downloads it, validates it against its pydantic schema, narrows it to the requested
hotel ids / destination and translates the remaining payloads into ``Hotel``.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from contextlib import suppress
from logging import getLogger
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, TypeAdapter

from hotelmerge.domain.filtering import HotelFilter

from .http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from hotelmerge.config.http_resilience import ResilienceConfig
    from hotelmerge.domain.model import Hotel

log = getLogger(__name__)

type ClientFactory = Callable[[ResilienceConfig], ResilientClient]


class SupplierAPIError(RuntimeError):
    """Raised when a supplier responds with an unexpected payload."""


class SupplierCancelledError(RuntimeError):
    """Raised when a fetch is abandoned because the caller signalled cancellation."""


class SupplierPayloadModel(BaseModel):
    """Base for supplier payload schemas; unmodelled keys are logged once per key."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = {f"{type(self).__name__}.{key}" for key in extras}.difference(
            SupplierPayloadModel._logged_extra_keys
        )
        if not new_keys:
            return
        SupplierPayloadModel._logged_extra_keys.update(new_keys)
        log.warning("Supplier payload has unmodeled keys: %s", ", ".join(sorted(new_keys)))


def blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def none_to_empty_list(value: object) -> object:
    return [] if value is None else value


class HttpHotelSupplier[PayloadT: SupplierPayloadModel](ABC):
    """Hotel supplier backed by a single JSON endpoint."""

    name: ClassVar[str]
    payload_type: ClassVar[type[SupplierPayloadModel]]

    def __init__(
        self,
        *,
        resilience: ResilienceConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        if resilience.base_url is None:
            raise SupplierAPIError(f"Missing {self.name} base_url in resilience configuration")
        self._resilience = resilience
        self._url = resilience.base_url
        self._client_factory = client_factory or ResilientClient
        self._client: ResilientClient | None = None
        self._payload_adapter: TypeAdapter[list[Any]] = TypeAdapter(list[self.payload_type])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self._url!r})"

    async def fetch_hotels(
        self,
        hotel_ids: Sequence[str],
        destination_id: int,
        *,
        cancel: asyncio.Event | None = None,
    ) -> list[Hotel]:
        request = self._fetch_payloads()
        payloads = await (request if cancel is None else self._until_cancelled(request, cancel))

        hotel_filter = HotelFilter.build(hotel_ids, destination_id)
        hotels = [
            self.translate(payload)
            for payload in payloads
            if hotel_filter.accepts(*self.identify(payload))
        ]
        log.debug("%s: %d of %d hotels matched the filter", self.name, len(hotels), len(payloads))
        return hotels

    @abstractmethod
    def identify(self, payload: PayloadT) -> tuple[str, int]:
        """Return the ``(hotel_id, destination_id)`` pair of a raw payload."""

    @abstractmethod
    def translate(self, payload: PayloadT) -> Hotel: ...

    async def aclose(self) -> None:
        """Close the HTTP client; the next fetch opens a fresh one."""

        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    def _get_client(self) -> ResilientClient:
        # reused across fetches; it owns the response cache and the rate limiter
        if self._client is None:
            self._client = self._client_factory(self._resilience)
        return self._client

    async def _fetch_payloads(self) -> list[PayloadT]:
        response = await self._get_client().get(self._url)
        response.raise_for_status()
        payload = response.json()

        if not isinstance(payload, list):
            raise SupplierAPIError(f"Unexpected {self.name} response payload")
        return self._payload_adapter.validate_python(payload)

    async def _until_cancelled(
        self,
        request: Awaitable[list[PayloadT]],
        cancel: asyncio.Event,
    ) -> list[PayloadT]:
        if cancel.is_set():
            if asyncio.iscoroutine(request):
                request.close()
            raise SupplierCancelledError(f"{self.name} fetch cancelled before start")

        fetch = asyncio.ensure_future(request)
        waiter = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait({fetch, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()
            if not fetch.done():
                fetch.cancel()
                with suppress(asyncio.CancelledError):
                    await fetch

        if fetch.cancelled():
            raise SupplierCancelledError(f"{self.name} fetch cancelled")
        return fetch.result()


__all__ = [
    "ClientFactory",
    "HttpHotelSupplier",
    "SupplierAPIError",
    "SupplierCancelledError",
    "SupplierPayloadModel",
    "blank_to_none",
    "none_to_empty_list",
]
