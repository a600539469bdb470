#!/usr/bin/env python3
"""
app.py

Command-line dashboard report: fetches orders through an order source,
composes the statistics snapshot for the requested window and prints it.

Run:
  pos-stats --preset this_month --source csv --data-dir sample_data
  pos-stats --start 2026-10-01 --end 2026-10-18 --json
"""
from __future__ import annotations

import argparse
import sys
from datetime import date
from decimal import Decimal
from typing import List, Optional

from .config import get_config
from .data.interface import OrderSource
from .data.models import DatePreset, DateRange, StatisticsSnapshot, StoreSettings, TenantContext
from .data.util import get_order_source
from .errors import DataSourceError, InvalidRangeError
from .logging import get_logger
from .stats.date_ranges import preset_range, store_today
from .stats.summary import compose_statistics

logger = get_logger(__name__)


def load_statistics(source: OrderSource, date_range: DateRange, today: Optional[date] = None) -> StatisticsSnapshot:
    """Fetch the three record sets for `date_range` and compose the snapshot."""
    config = get_config()
    orders = source.fetch_orders()
    order_items = source.fetch_order_items()
    range_orders = source.fetch_orders_in_range(date_range)
    return compose_statistics(
        orders,
        order_items,
        range_orders,
        date_range,
        today=today,
        top_n=config.top_products_limit,
        currency_decimals=config.currency_decimals,
    )


def resolve_requested_range(
    start: Optional[str],
    end: Optional[str],
    preset: Optional[str],
    today: date,
) -> DateRange:
    """Explicit bounds win over a preset; with neither, the window is today."""
    if start or end:
        return DateRange.from_values(start or end, end or start)
    if preset:
        return preset_range(DatePreset(preset), today)
    return DateRange.single_day(today)


def format_currency(amount: Decimal, currency_code: str, decimals: int = 0) -> str:
    return f"{amount:,.{decimals}f} {currency_code}"


def render_report(snapshot: StatisticsSnapshot, settings: StoreSettings, currency_code: str, decimals: int = 0) -> str:
    """Plain-text report.

    Laundry stores care about money still to collect, so they also get the
    serving revenue labelled "Unpaid"; everyone else only sees the number of
    orders being processed.
    """
    def money(amount: Decimal) -> str:
        return format_currency(amount, currency_code, decimals)

    serving_label = "Unpaid orders" if settings.is_laundry else "Processing"
    lines = [
        f"Period: {snapshot.date_range_label}",
        "",
        f"Revenue:            {money(snapshot.completed_revenue)}",
        f"Estimated revenue:  {money(snapshot.estimated_revenue)}",
    ]
    if settings.is_laundry:
        lines.append(f"Unpaid:             {money(snapshot.serving_revenue)}")
    lines += [
        f"Cancelled:          {money(snapshot.cancelled_revenue)}",
        f"Daily average:      {money(snapshot.daily_average_revenue)}",
        "",
        f"Orders:             {snapshot.total_orders_in_range}",
        f"  Completed:        {snapshot.completed_orders_count}",
        f"  {serving_label + ':':<18}{snapshot.serving_orders_count}",
        f"  Cancelled:        {snapshot.cancelled_orders_count}",
        f"Customers:          {snapshot.period_customer_count}",
        "",
        "Top selling products:",
    ]
    if snapshot.top_products:
        for rank, product in enumerate(snapshot.top_products, start=1):
            lines.append(
                f"  {rank}. {product.name}: {money(product.revenue)} "
                f"({product.quantity} sold, {product.percentage}%)"
            )
    else:
        lines.append("  No data available")
    lines += ["", "Payment methods:"]
    if snapshot.payment_methods:
        for total in snapshot.payment_methods.values():
            lines.append(f"  {total.label}: {total.count} orders, {money(total.total)} collected")
    else:
        lines.append("  No payment data")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()

    parser = argparse.ArgumentParser(description="Summarise POS orders for a date window.")
    parser.add_argument("--start", type=str, default=None, help="YYYY-MM-DD (inclusive)")
    parser.add_argument("--end", type=str, default=None, help="YYYY-MM-DD (inclusive)")
    parser.add_argument("--preset", choices=[p.value for p in DatePreset], default=None)
    parser.add_argument("--source", choices=["csv", "http"], default="csv")
    parser.add_argument("--data-dir", type=str, default=config.data_dir)
    parser.add_argument("--tenant", type=str, default=config.tenant_domain, help="Tenant domain for the HTTP source")
    parser.add_argument("--json", action="store_true", help="Print the snapshot as JSON.")
    args = parser.parse_args(argv)

    today = store_today(config.timezone)
    try:
        date_range = resolve_requested_range(args.start, args.end, args.preset, today)
    except InvalidRangeError as e:
        print(f"Invalid date range: {e}", file=sys.stderr)
        return 2

    tenant = TenantContext(domain=args.tenant, origin=config.tenant_origin)
    try:
        source = get_order_source(args.source, tenant=tenant, data_dir=args.data_dir)
        snapshot = load_statistics(source, date_range, today=today)
        settings = source.fetch_store_settings()
    except (DataSourceError, FileNotFoundError) as e:
        logger.error(f"Could not load orders: {e}")
        print(str(e), file=sys.stderr)
        return 1

    if args.json:
        print(snapshot.model_dump_json(indent=2))
    else:
        print(render_report(snapshot, settings, config.currency_code, config.currency_decimals))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
