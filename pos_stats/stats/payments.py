from __future__ import annotations

from typing import Iterable, Optional

from ..data.models import PAYMENT_METHOD_LABELS, Order, PaymentMethod, PaymentMethodTotal
from .revenue import customer_payment

_METHODS_BY_CODE = {method.value: method for method in PaymentMethod}


def resolve_payment_method(code: Optional[str]) -> PaymentMethod:
    """Map a raw payment code to its canonical method; unknown or empty codes count as cash."""
    if not code:
        return PaymentMethod.CASH
    return _METHODS_BY_CODE.get(code.strip(), PaymentMethod.CASH)


def payment_method_label(method: PaymentMethod) -> str:
    return PAYMENT_METHOD_LABELS[method]


def aggregate_payments(orders: Iterable[Order]) -> dict[PaymentMethod, PaymentMethodTotal]:
    """Order count and customer payments per payment method.

    The caller passes completed orders. Keys appear in the order each method
    was first seen.
    """
    totals: dict[PaymentMethod, PaymentMethodTotal] = {}
    for order in orders:
        method = resolve_payment_method(order.payment_method)
        current = totals.get(method) or PaymentMethodTotal(method=method, label=payment_method_label(method))
        totals[method] = current.model_copy(
            update={"count": current.count + 1, "total": current.total + customer_payment(order)}
        )
    return totals
