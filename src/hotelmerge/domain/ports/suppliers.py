"""Port for fetching hotel records from an upstream supplier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Sequence

    from hotelmerge.domain.model import Hotel


@dataclass(frozen=True, slots=True)
class SupplierBatch:
    """Records returned by one supplier during a single orchestration round."""

    supplier: str
    hotels: tuple[Hotel, ...] = field(default_factory=tuple)
    failed: bool = False


@runtime_checkable
class HotelSupplier(Protocol):
    """Fetch hotels from one supplier and map them into the canonical shape.

    ``destination_id < 0`` means no destination constraint and an empty
    ``hotel_ids`` means no id constraint. When ``cancel`` is set the call should
    abort promptly by raising.
    """

    @property
    def name(self) -> str: ...

    async def fetch_hotels(
        self,
        hotel_ids: Sequence[str],
        destination_id: int,
        *,
        cancel: asyncio.Event | None = None,
    ) -> list[Hotel]: ...

    async def aclose(self) -> None:
        """Release connections and cached responses held by the supplier."""
        ...


__all__ = ["HotelSupplier", "SupplierBatch"]
