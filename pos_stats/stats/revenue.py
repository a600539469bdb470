from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ..data.models import Order
from ..data.models.fields import ZERO


def order_revenue(order: Order) -> Decimal:
    """Recognised net revenue of an order.

    A tax-inclusive total carries the tax inside it, so it is subtracted;
    otherwise the total is already net of tax.
    """
    if order.price_include_tax:
        return order.total - order.tax
    return order.total


def customer_payment(order: Order) -> Decimal:
    """Amount actually collected from the customer (revenue + tax)."""
    return order_revenue(order) + order.tax


def total_revenue(orders: Iterable[Order]) -> Decimal:
    return sum((order_revenue(order) for order in orders), ZERO)
