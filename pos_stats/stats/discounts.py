"""Proportional distribution of order-level discounts across line items.

Every item except the last receives its pro-rata share rounded half-up to the
currency minor unit; the last item receives whatever is left so that the
shares always add up to the order discount exactly. The last item therefore
absorbs all rounding drift.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..data.models import ItemAllocation, Order, OrderItem
from ..data.models.fields import ZERO, round_half_up
from ..logging import get_logger

logger = get_logger(__name__)


def _allocation(item: OrderItem, discount: Decimal) -> ItemAllocation:
    return ItemAllocation(
        item_id=item.id,
        order_id=item.order_id,
        product_name=item.product_name,
        unit_price=item.unit_price,
        quantity=item.quantity,
        line_total=item.line_total,
        discount=discount,
    )


def allocate_order_discount(
    discount: Decimal,
    items: Sequence[OrderItem],
    currency_decimals: int = 0,
) -> list[ItemAllocation]:
    """Split `discount` over `items` in proportion to their line totals.

    Args:
        discount: Order-level discount to distribute.
        items: The order's line items in creation order. The last one takes
            the rounding remainder.
        currency_decimals: Digits of the currency minor unit (0 for whole units).

    Returns:
        One allocation per item, in the order given. When the discount is not
        positive or the items have no value at all, every share is zero.
    """
    if not items:
        return []
    line_totals = [item.line_total for item in items]
    subtotal = sum(line_totals, ZERO)
    if discount <= ZERO or subtotal == ZERO:
        return [_allocation(item, ZERO) for item in items]

    allocations: list[ItemAllocation] = []
    allocated = ZERO
    for item, line_total in zip(items[:-1], line_totals[:-1]):
        share = round_half_up(discount * line_total / subtotal, currency_decimals)
        allocated += share
        allocations.append(_allocation(item, share))
    allocations.append(_allocation(items[-1], discount - allocated))
    return allocations


def allocate_discounts(
    orders: Iterable[Order],
    items: Iterable[OrderItem],
    currency_decimals: int = 0,
) -> list[ItemAllocation]:
    """Allocate each order's discount over its items.

    Items whose order is not among `orders` are dropped. The result follows the
    input order of `items`.
    """
    orders_by_id: dict[str, Order] = {}
    for order in orders:
        orders_by_id.setdefault(order.id, order)

    items = list(items)
    positions: dict[str, list[int]] = {}
    for position, item in enumerate(items):
        if item.order_id in orders_by_id:
            positions.setdefault(item.order_id, []).append(position)

    slots: list[Optional[ItemAllocation]] = [None] * len(items)
    for order_id, indexes in positions.items():
        order_items = [items[i] for i in indexes]
        shares = allocate_order_discount(orders_by_id[order_id].discount, order_items, currency_decimals)
        for i, share in zip(indexes, shares):
            slots[i] = share

    allocations = [share for share in slots if share is not None]
    logger.debug(f"Allocated discounts for {len(allocations)} of {len(items)} items across {len(positions)} orders")
    return allocations
