"""Compose the statistics snapshot for one date window.

Pure reduction over already-fetched records: no I/O, no shared state. The
same inputs always produce an equal snapshot.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from ..data.models import DateRange, StatisticsSnapshot
from ..logging import get_logger
from .date_ranges import describe_date_range, match_preset, store_today
from .discounts import allocate_discounts
from .normalizer import RecordsLike, index_orders, normalize_order_items, normalize_orders
from .payments import aggregate_payments
from .products import DEFAULT_TOP_N, rank_products
from .revenue import total_revenue
from .status import classify_orders

logger = get_logger(__name__)


def compose_statistics(
    orders: RecordsLike,
    order_items: RecordsLike,
    date_range_orders: RecordsLike,
    date_range: DateRange,
    today: Optional[date] = None,
    top_n: int = DEFAULT_TOP_N,
    currency_decimals: int = 0,
) -> StatisticsSnapshot:
    """Reduce orders and items of a date window into a StatisticsSnapshot.

    Args:
        orders: Every order known to the store, used to tell orphan items apart.
        order_items: Line items; only those of completed orders in range count.
        date_range_orders: Orders whose orderedAt falls inside `date_range`,
            already filtered by the caller.
        date_range: The window, also the denominator of the daily average.
        today: Anchor for preset labels. Defaults to the current date in the
            configured store timezone.
        top_n: Number of products to rank.
        currency_decimals: Minor-unit digits used when rounding discount shares.

    Returns:
        StatisticsSnapshot: Zero-valued when there are no orders in range.
    """
    today = today or store_today()
    all_orders = normalize_orders(orders)
    range_orders = normalize_orders(date_range_orders)
    items = normalize_order_items(order_items)

    known_ids = index_orders(all_orders).keys() | index_orders(range_orders).keys()
    orphans = sum(1 for item in items if item.order_id not in known_ids)
    if orphans:
        logger.debug(f"Ignoring {orphans} order items that reference unknown orders")

    partition = classify_orders(range_orders)
    completed_revenue = total_revenue(partition.completed)
    serving_revenue = total_revenue(partition.serving)
    cancelled_revenue = total_revenue(partition.cancelled)

    allocations = allocate_discounts(partition.completed, items, currency_decimals)
    top_products = rank_products(allocations, limit=top_n)
    payment_methods = aggregate_payments(partition.completed)

    day_count = date_range.day_count
    snapshot = StatisticsSnapshot(
        completed_revenue=completed_revenue,
        serving_revenue=serving_revenue,
        cancelled_revenue=cancelled_revenue,
        estimated_revenue=completed_revenue + serving_revenue,
        daily_average_revenue=completed_revenue / day_count,
        day_count=day_count,
        total_orders_in_range=len(range_orders),
        completed_orders_count=len(partition.completed),
        serving_orders_count=len(partition.serving),
        cancelled_orders_count=len(partition.cancelled),
        unpaid_orders_count=len(partition.unpaid),
        period_customer_count=sum(order.customer_count for order in range_orders),
        top_products=top_products,
        payment_methods=payment_methods,
        date_range=date_range,
        date_range_label=describe_date_range(date_range, today),
        date_preset=match_preset(date_range, today),
    )
    logger.debug(
        f"Composed statistics for {snapshot.date_range_label}: "
        f"{snapshot.total_orders_in_range} orders, {snapshot.completed_orders_count} completed"
    )
    return snapshot
