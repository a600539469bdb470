from decimal import Decimal

import pytest

from pos_stats.data.models import Order
from pos_stats.stats.revenue import customer_payment, order_revenue, total_revenue


def test_tax_inclusive_total_has_tax_removed(make_order):
    order = Order.model_validate(make_order(id=1, total=1000, tax=100, include_tax=True))
    assert order_revenue(order) == Decimal("900")
    assert customer_payment(order) == Decimal("1000")


def test_tax_exclusive_total_is_revenue(make_order):
    order = Order.model_validate(make_order(id=1, total=1000, tax=100, include_tax=False))
    assert order_revenue(order) == Decimal("1000")
    assert customer_payment(order) == Decimal("1100")


@pytest.mark.parametrize("total,tax", [(0, 0), (1000, 100), ("250.5", "20.04"), (75, 0)])
def test_payment_is_revenue_plus_tax(make_order, total, tax):
    for include_tax in (True, False):
        order = Order.model_validate(make_order(id=1, total=total, tax=tax, include_tax=include_tax))
        assert order_revenue(order) + order.tax == customer_payment(order)


def test_toggling_tax_flag_moves_revenue_by_tax(make_order):
    inclusive = Order.model_validate(make_order(id=1, total=500, tax=40, include_tax=True))
    exclusive = inclusive.model_copy(update={"price_include_tax": False})
    assert order_revenue(exclusive) - order_revenue(inclusive) == inclusive.tax


def test_malformed_amounts_count_as_zero(make_order):
    order = Order.model_validate(make_order(id=1, total="abc", tax=None))
    assert order_revenue(order) == 0


def test_total_revenue(make_order):
    orders = [
        Order.model_validate(make_order(id=1, total=1000, tax=100, include_tax=True)),
        Order.model_validate(make_order(id=2, total=300)),
    ]
    assert total_revenue(orders) == Decimal("1200")
    assert total_revenue([]) == 0
