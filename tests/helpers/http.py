"""Mock transport helpers for supplier adapter tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from hotelmerge.adapters.http_resilience import ResilientClient
from hotelmerge.config.http_resilience import ResilienceConfig

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


def make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    return make_async_client_factory(async_handler)


def make_async_client_factory(
    async_handler: Callable[[httpx.Request], Awaitable[httpx.Response]],
) -> Callable[[ResilienceConfig], ResilientClient]:
    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(async_handler))  # noqa: SLF001  # type: ignore[reportPrivateUsage]
        return client

    return factory


def json_factory(
    payload: object,
    requests: list[httpx.Request] | None = None,
) -> Callable[[ResilienceConfig], ResilientClient]:
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(200, json=payload)

    return make_client_factory(handler)


def resilience(name: str, url: str = "https://suppliers.test/hotels") -> ResilienceConfig:
    return ResilienceConfig(name=name, base_url=url)
