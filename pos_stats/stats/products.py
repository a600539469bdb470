from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..data.models import ItemAllocation, ProductStat
from ..data.models.fields import ZERO, round_half_up

DEFAULT_TOP_N = 5


@dataclass
class _ProductAccumulator:
    quantity: int = 0
    revenue: Decimal = ZERO
    unit_price: Decimal = ZERO


def share_percentage(revenue: Decimal, total: Decimal) -> int:
    """Whole-percent share of `total`; 0 when there is nothing to share."""
    if total == ZERO:
        return 0
    return int(round_half_up(revenue / total * 100))


def rank_products(allocations: Iterable[ItemAllocation], limit: int = DEFAULT_TOP_N) -> list[ProductStat]:
    """Top products by net revenue.

    Allocations are grouped by product name in first-seen order. Ties keep that
    order since the sort is stable. Percentages are shares of the revenue of
    the returned products only.
    """
    groups: dict[str, _ProductAccumulator] = {}
    for allocation in allocations:
        acc = groups.setdefault(allocation.product_name, _ProductAccumulator())
        acc.quantity += allocation.quantity
        acc.revenue += allocation.revenue
        acc.unit_price = allocation.unit_price

    ranked = sorted(groups.items(), key=lambda entry: entry[1].revenue, reverse=True)[: max(0, limit)]
    ranked_total = sum((acc.revenue for _, acc in ranked), ZERO)
    return [
        ProductStat(
            name=name,
            quantity=acc.quantity,
            revenue=acc.revenue,
            unit_price=acc.unit_price,
            percentage=share_percentage(acc.revenue, ranked_total),
        )
        for name, acc in ranked
    ]
