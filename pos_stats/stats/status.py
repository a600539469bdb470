from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from ..data.models import Order, OrderStatus

COMPLETED_STATUSES = frozenset({OrderStatus.COMPLETED.value, OrderStatus.PAID.value})
SERVING_STATUSES = frozenset({OrderStatus.SERVED.value, OrderStatus.PREPARING.value, OrderStatus.PENDING.value})
CANCELLED_STATUSES = frozenset({OrderStatus.CANCELLED.value})
# overlaps SERVING_STATUSES: "still in the kitchen" and "not yet paid" are separate questions
UNPAID_STATUSES = frozenset({
    OrderStatus.PENDING.value,
    OrderStatus.UNPAID.value,
    OrderStatus.SERVED.value,
    OrderStatus.PREPARING.value,
})


class StatusPartition(BaseModel):
    """Category views over one set of orders. Views are not mutually exclusive."""
    model_config = ConfigDict(frozen=True)

    completed: tuple[Order, ...] = ()
    serving: tuple[Order, ...] = ()
    cancelled: tuple[Order, ...] = ()
    unpaid: tuple[Order, ...] = ()


def classify_orders(orders: Iterable[Order]) -> StatusPartition:
    completed: list[Order] = []
    serving: list[Order] = []
    cancelled: list[Order] = []
    unpaid: list[Order] = []
    for order in orders:
        if order.status in COMPLETED_STATUSES:
            completed.append(order)
        if order.status in SERVING_STATUSES:
            serving.append(order)
        if order.status in CANCELLED_STATUSES:
            cancelled.append(order)
        if order.status in UNPAID_STATUSES:
            unpaid.append(order)
    return StatusPartition(completed=completed, serving=serving, cancelled=cancelled, unpaid=unpaid)
