from decimal import Decimal

import pytest

from pos_stats.data.models import Order, OrderItem
from pos_stats.stats.discounts import allocate_discounts, allocate_order_discount


def _items(make_item, *line_totals, order_id="1"):
    return [
        OrderItem.model_validate(make_item(id=f"{order_id}-{n}", order_id=order_id, name=f"P{n}", unit_price=price))
        for n, price in enumerate(line_totals)
    ]


def test_proportional_split(make_item):
    """90 over lines of 300 and 700 splits 27 / 63."""
    shares = allocate_order_discount(Decimal("90"), _items(make_item, 300, 700))
    assert [s.discount for s in shares] == [Decimal("27"), Decimal("63")]
    assert [s.revenue for s in shares] == [Decimal("273"), Decimal("637")]


def test_single_item_takes_whole_discount(make_item):
    shares = allocate_order_discount(Decimal("45"), _items(make_item, 120))
    assert len(shares) == 1
    assert shares[0].discount == Decimal("45")


def test_last_item_absorbs_rounding(make_item):
    shares = allocate_order_discount(Decimal("50"), _items(make_item, 100, 100, 100))
    assert [s.discount for s in shares] == [Decimal("17"), Decimal("17"), Decimal("16")]


@pytest.mark.parametrize("discount", ["1", "7", "10", "99", "1000", "12345"])
def test_shares_sum_to_discount(make_item, discount):
    shares = allocate_order_discount(Decimal(discount), _items(make_item, 333, 333, 334, 17))
    assert sum(s.discount for s in shares) == Decimal(discount)


def test_minor_units(make_item):
    shares = allocate_order_discount(Decimal("10"), _items(make_item, 1, 1, 1), currency_decimals=2)
    assert [s.discount for s in shares] == [Decimal("3.33"), Decimal("3.33"), Decimal("3.34")]


def test_zero_subtotal_allocates_nothing(make_item):
    shares = allocate_order_discount(Decimal("50"), _items(make_item, 0, 0))
    assert [s.discount for s in shares] == [Decimal("0"), Decimal("0")]


def test_no_discount(make_item):
    shares = allocate_order_discount(Decimal("0"), _items(make_item, 100, 200))
    assert all(s.discount == 0 for s in shares)


def test_no_items():
    assert allocate_order_discount(Decimal("10"), []) == []


def test_allocate_discounts_skips_orphans_and_keeps_order(make_order, make_item):
    orders = [
        Order.model_validate(make_order(id=1, discount=10)),
        Order.model_validate(make_order(id=2, discount=0)),
    ]
    items = [
        OrderItem.model_validate(make_item(id="a", order_id=2, unit_price=50)),
        OrderItem.model_validate(make_item(id="b", order_id=1, unit_price=100)),
        OrderItem.model_validate(make_item(id="c", order_id=99, unit_price=500)),
        OrderItem.model_validate(make_item(id="d", order_id=1, unit_price=100)),
    ]
    allocations = allocate_discounts(orders, items)
    assert [a.item_id for a in allocations] == ["a", "b", "d"]
    assert [a.discount for a in allocations] == [Decimal("0"), Decimal("5"), Decimal("5")]
