from __future__ import annotations

from typing import Any, Protocol

from .models import DateRange, StoreSettings


class OrderSource(Protocol):
    """
    Backend-agnostic contract for fetching the raw records the statistics
    engine reduces.

    Implementations return raw mappings (camelCase keys as stored by the POS);
    normalisation happens in the engine. Implementations MUST NOT cache
    results: each call reads the underlying source again, and any caching or
    retry policy belongs to the caller.
    """

    def fetch_orders(self) -> list[dict[str, Any]]:
        """All orders known to the store."""
        ...

    def fetch_order_items(self) -> list[dict[str, Any]]:
        """All order items known to the store."""
        ...

    def fetch_orders_in_range(self, date_range: DateRange) -> list[dict[str, Any]]:
        """Orders whose orderedAt falls inside the inclusive date range."""
        ...

    def fetch_store_settings(self) -> StoreSettings:
        """Store settings of the tenant (business type)."""
        ...
