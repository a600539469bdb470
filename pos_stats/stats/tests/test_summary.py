from datetime import date, datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

import pandas as pd
import pytest
from pydantic import ValidationError

from pos_stats.config import set_config_for_test
from pos_stats.data.models import DatePreset, DateRange, PaymentMethod
from pos_stats.stats.summary import compose_statistics

TODAY = date(2026, 10, 18)


def test_tax_inclusive_order_with_discount(make_order, make_item):
    orders = [make_order(id=1, total=1000, tax=100, include_tax=True, discount=90)]
    items = [
        make_item(id=1, order_id=1, name="Trà đào cam sả", unit_price=300),
        make_item(id=2, order_id=1, name="Phở bò", unit_price=700),
    ]

    snapshot = compose_statistics(orders, items, orders, DateRange.single_day(TODAY), today=TODAY)

    assert snapshot.completed_revenue == Decimal("900")
    assert [(p.name, p.revenue) for p in snapshot.top_products] == [
        ("Phở bò", Decimal("637")),
        ("Trà đào cam sả", Decimal("273")),
    ]
    assert sum(p.revenue for p in snapshot.top_products) == Decimal("910")
    assert snapshot.payment_methods[PaymentMethod.CASH].total == Decimal("1000")


def test_statuses_and_revenues(make_order, make_item):
    orders = [
        make_order(id=1, status="completed", total=1000, customers=2),
        make_order(id=2, status="paid", total=500, payment="momo"),
        make_order(id=3, status="served", total=200),
        make_order(id=4, status="pending", total=100),
        make_order(id=5, status="cancelled", total=400),
        make_order(id=6, status="unpaid", total=50, customers=0),
    ]
    snapshot = compose_statistics(orders, [], orders, DateRange.single_day(TODAY), today=TODAY)

    assert snapshot.completed_revenue == Decimal("1500")
    assert snapshot.serving_revenue == Decimal("300")
    assert snapshot.cancelled_revenue == Decimal("400")
    assert snapshot.estimated_revenue == Decimal("1800")
    assert snapshot.total_orders_in_range == 6
    assert snapshot.completed_orders_count == 2
    assert snapshot.serving_orders_count == 2
    assert snapshot.cancelled_orders_count == 1
    assert snapshot.unpaid_orders_count == 3
    assert snapshot.period_customer_count == 7
    assert list(snapshot.payment_methods) == [PaymentMethod.CASH, PaymentMethod.MOMO]


def test_only_completed_orders_feed_products(make_order, make_item):
    orders = [make_order(id=1, status="completed", total=100), make_order(id=2, status="served", total=100)]
    items = [
        make_item(id=1, order_id=1, name="Bạc xỉu", unit_price=100),
        make_item(id=2, order_id=2, name="Bánh flan", unit_price=100),
        make_item(id=3, order_id=42, name="Sinh tố bơ", unit_price=999),
    ]
    snapshot = compose_statistics(orders, items, orders, DateRange.single_day(TODAY), today=TODAY)
    assert [p.name for p in snapshot.top_products] == ["Bạc xỉu"]


def test_daily_average_and_label(make_order):
    orders = [make_order(id=1, total=700, ordered_at="2026-10-13T09:00:00")]
    last_week = DateRange(start=date(2026, 10, 12), end=date(2026, 10, 18))

    snapshot = compose_statistics(orders, [], orders, last_week, today=TODAY)

    assert snapshot.day_count == 7
    assert snapshot.daily_average_revenue == Decimal("100")
    assert snapshot.date_range_label == "Last week"
    assert snapshot.date_preset is DatePreset.LAST_WEEK


def test_single_day_average_equals_revenue(make_order):
    orders = [make_order(id=1, total=1234), make_order(id=2, total=66, include_tax=True, tax=6)]
    snapshot = compose_statistics(orders, [], orders, DateRange.single_day(TODAY), today=TODAY)
    assert snapshot.daily_average_revenue == snapshot.completed_revenue


def test_empty_range(make_order):
    date_range = DateRange(start=date(2026, 10, 1), end=date(2026, 10, 3))
    snapshot = compose_statistics([make_order(id=1, total=100)], [], [], date_range, today=TODAY)

    assert snapshot.completed_revenue == 0
    assert snapshot.estimated_revenue == 0
    assert snapshot.daily_average_revenue == 0
    assert snapshot.total_orders_in_range == 0
    assert snapshot.top_products == ()
    assert snapshot.payment_methods == {}
    assert snapshot.date_range_label == "01/10/2026 – 03/10/2026"
    assert snapshot.date_preset is None


def test_no_inputs_at_all():
    snapshot = compose_statistics(None, None, None, DateRange.single_day(TODAY), today=TODAY)
    assert snapshot.completed_revenue == 0
    assert snapshot.top_products == ()


def test_same_inputs_same_snapshot(make_order, make_item):
    orders = [make_order(id=n, total=100 * n, discount=n) for n in range(1, 6)]
    items = [make_item(id=n, order_id=n, name=f"P{n % 3}", unit_price=100 * n) for n in range(1, 6)]
    date_range = DateRange.single_day(TODAY)

    first = compose_statistics(orders, items, orders, date_range, today=TODAY)
    second = compose_statistics(orders, items, orders, date_range, today=TODAY)

    assert first == second


def test_dataframe_inputs(make_order, make_item):
    orders = pd.DataFrame([make_order(id=1, total=300), make_order(id=2, total=200, status="cancelled")])
    items = pd.DataFrame([make_item(id=1, order_id=1, unit_price=300)])
    snapshot = compose_statistics(orders, items, orders, DateRange.single_day(TODAY), today=TODAY)
    assert snapshot.completed_revenue == Decimal("300")
    assert snapshot.cancelled_revenue == Decimal("200")
    assert snapshot.top_products[0].revenue == Decimal("300")


def test_snapshot_serializes_camel_case(make_order):
    orders = [make_order(id=1, total=100)]
    snapshot = compose_statistics(orders, [], orders, DateRange.single_day(TODAY), today=TODAY)
    dumped = snapshot.model_dump(mode="json")
    assert dumped["completedRevenue"] == "100"
    assert dumped["dateRangeLabel"] == "Today"
    assert dumped["paymentMethods"]["cash"]["count"] == 1


def test_snapshot_cannot_be_changed(make_order, make_item):
    orders = [make_order(id=1, total=300)]
    items = [make_item(id=1, order_id=1, unit_price=300)]
    snapshot = compose_statistics(orders, items, orders, DateRange.single_day(TODAY), today=TODAY)

    with pytest.raises(AttributeError):
        snapshot.top_products.clear()
    with pytest.raises(TypeError):
        snapshot.payment_methods[PaymentMethod.MOMO] = snapshot.payment_methods[PaymentMethod.CASH]
    with pytest.raises(AttributeError):
        snapshot.payment_methods.clear()
    with pytest.raises(ValidationError):
        snapshot.completed_revenue = Decimal("1")

    assert len(snapshot.top_products) == 1
    assert list(snapshot.payment_methods) == [PaymentMethod.CASH]


def test_label_defaults_to_store_today(make_order):
    set_config_for_test(timezone="Pacific/Kiritimati")
    today = datetime.now(ZoneInfo("Pacific/Kiritimati")).date()
    orders = [make_order(id=1, total=100)]

    snapshot = compose_statistics(orders, [], orders, DateRange.single_day(today))

    assert snapshot.date_preset is DatePreset.TODAY
