#!/usr/bin/env python3
"""
seed_data.py

Generates realistic fake POS data to CSVs under a local folder (default: sample_data).
Modelled on a small Vietnamese cafe/restaurant: prices in VND, e-wallet payments,
tax-inclusive and tax-exclusive orders, order-level discounts.

Files:
- orders.csv, order_items.csv, store_settings.json

A handful of rows are deliberately dirty (malformed numbers, blank product
names, items pointing at orders that do not exist) so the report has something
to be robust against.

Run:
  pos-stats-seed --days 14 --orders-per-day 60 --output-dir sample_data
"""

from __future__ import annotations
import argparse
import csv
import json
import os
import random
import sys
from datetime import datetime, timedelta, date, time
from math import sin, pi
from typing import Dict, List, Optional, Tuple

from ..config import get_config
from ..data.models import PaymentMethod
from ..data.models.store_settings import LAUNDRY

# -----------------------------
# Config & helper structures
# -----------------------------

MENU: List[Tuple[str, int]] = [
    ("Cà phê sữa đá", 29_000),
    ("Bạc xỉu", 32_000),
    ("Trà đào cam sả", 45_000),
    ("Cà phê đen", 25_000),
    ("Sinh tố bơ", 55_000),
    ("Bánh mì thịt", 30_000),
    ("Trà sữa trân châu", 42_000),
    ("Nước cam ép", 40_000),
    ("Bánh flan", 20_000),
    ("Phở bò", 65_000),
    ("Cơm tấm sườn", 60_000),
    ("Bún chả", 55_000),
]

STATUS_WEIGHTS: Dict[str, float] = {
    "completed": 0.55,
    "paid": 0.15,
    "served": 0.06,
    "preparing": 0.05,
    "pending": 0.04,
    "unpaid": 0.05,
    "cancelled": 0.10,
}

PAYMENT_WEIGHTS: Dict[str, float] = {
    PaymentMethod.CASH.value: 0.45,
    PaymentMethod.MOMO.value: 0.15,
    PaymentMethod.ZALOPAY.value: 0.08,
    PaymentMethod.VNPAY.value: 0.07,
    PaymentMethod.QR_CODE.value: 0.10,
    PaymentMethod.CARD.value: 0.08,
    PaymentMethod.CREDIT_CARD.value: 0.04,
    PaymentMethod.SHOPEEPAY.value: 0.02,
    PaymentMethod.GRABPAY.value: 0.01,
}

TAX_RATES = [0.08, 0.10]

ORDER_HEADERS = [
    "id", "status", "total", "tax", "discount", "priceIncludeTax",
    "paymentMethod", "orderedAt", "customerCount",
]
ITEM_HEADERS = ["id", "orderId", "productName", "unitPrice", "quantity"]

DIRTY_RATE = 0.01
ORPHAN_ITEMS = 3


# -----------------------------
# Utility functions
# -----------------------------

def ensure_dir(path: str) -> None:
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)

def zipf_like_index(rnd: random.Random, n: int, s: float = 1.15) -> int:
    """
    Return a menu index [0, n-1] with a bias toward lower indices (best sellers).
    s ~1.0-1.3 controls skew.
    """
    r = rnd.random()
    idx = int((r ** (1.0 / (1.0 + s))) * n)
    if idx >= n:
        idx = n - 1
    return idx

def diurnal_multiplier(ts: datetime) -> float:
    """
    Smooth breakfast/lunch/evening peaks for a cafe: ~07:30, ~12:00 and ~19:00.
    Returns roughly 0.3 to 1.6.
    """
    hour = ts.hour + ts.minute / 60.0
    if hour < 6 or hour >= 22:
        return 0.0
    morning = max(0.0, sin((hour - 6) / 3 * pi)) if hour < 9 else 0.0
    lunch = 0.5 * (1 + sin((hour - 9) / 6 * 2 * pi))
    evening = 0.5 * (1 + sin((hour - 15.5) / 7 * 2 * pi))
    return 0.3 + 0.6 * morning + 0.4 * lunch + 0.3 * evening

def weekend_multiplier(ts: datetime) -> float:
    return 1.25 if ts.weekday() >= 5 else 1.0  # Sat/Sun uplift

def vnd_round(amount: float) -> int:
    """Round to the nearest 1,000 VND like a till would."""
    return int(round(max(amount, 0) / 1000.0)) * 1000


# -----------------------------
# Core generators
# -----------------------------

def gen_order_times(rnd: random.Random, start_d: date, days: int, orders_per_day: int) -> List[datetime]:
    """Spread about `orders_per_day` orders over each opening day."""
    times: List[datetime] = []
    for d in range(days):
        day = start_d + timedelta(days=d)
        opening = datetime.combine(day, time(6, 0))
        slots = [opening + timedelta(minutes=m) for m in range(0, 16 * 60, 5)]
        weights = [diurnal_multiplier(ts) * weekend_multiplier(ts) for ts in slots]
        count = max(0, int(rnd.gauss(orders_per_day, orders_per_day * 0.15)))
        for slot in sorted(rnd.choices(slots, weights=weights, k=count)):
            times.append(slot + timedelta(seconds=rnd.randint(0, 299)))
    return times

def gen_orders_and_items(
    rnd: random.Random,
    order_times: List[datetime],
) -> Tuple[List[Dict], List[Dict]]:
    orders: List[Dict] = []
    items: List[Dict] = []
    item_counter = 0

    for order_counter, ordered_at in enumerate(order_times, start=1):
        order_id = order_counter

        basket_size = 1 + int(abs(rnd.gauss(0.8, 1.0)))
        basket_size = min(max(1, basket_size), 6)

        subtotal = 0
        for _ in range(basket_size):
            name, price = MENU[zipf_like_index(rnd, len(MENU))]
            qty = 1 if rnd.random() < 0.7 else rnd.randint(2, 4)
            subtotal += price * qty
            item_counter += 1
            items.append({
                "id": item_counter,
                "orderId": order_id,
                "productName": name,
                "unitPrice": price,
                "quantity": qty,
            })

        discount = 0
        if rnd.random() < 0.2:
            discount = vnd_round(subtotal * rnd.choice([0.05, 0.1, 0.15]))
        net = subtotal - discount
        tax = vnd_round(net * rnd.choice(TAX_RATES))
        price_include_tax = rnd.random() < 0.5
        # Tax-inclusive totals carry the tax, exclusive totals are net of it.
        total = net + tax if price_include_tax else net

        orders.append({
            "id": order_id,
            "status": rnd.choices(list(STATUS_WEIGHTS), weights=list(STATUS_WEIGHTS.values()))[0],
            "total": total,
            "tax": tax,
            "discount": discount,
            "priceIncludeTax": "true" if price_include_tax else "false",
            "paymentMethod": rnd.choices(list(PAYMENT_WEIGHTS), weights=list(PAYMENT_WEIGHTS.values()))[0],
            "orderedAt": ordered_at.isoformat(timespec="seconds"),
            "customerCount": 1 if rnd.random() < 0.6 else rnd.randint(2, 6),
        })

    return orders, items

def add_dirty_rows(rnd: random.Random, orders: List[Dict], items: List[Dict]) -> int:
    """Corrupt a few values in place and append orphan items. Returns the number of edits."""
    edits = 0
    for order in orders:
        if rnd.random() < DIRTY_RATE:
            field = rnd.choice(["total", "tax", "customerCount", "paymentMethod"])
            order[field] = rnd.choice(["", "n/a", "-"]) if field != "paymentMethod" else "voucher"
            edits += 1
    for item in items:
        if rnd.random() < DIRTY_RATE:
            field = rnd.choice(["productName", "quantity", "unitPrice"])
            item[field] = "" if field == "productName" else "abc"
            edits += 1

    next_item_id = len(items) + 1
    missing_order = len(orders) + 1000
    for i in range(ORPHAN_ITEMS):
        name, price = rnd.choice(MENU)
        items.append({
            "id": next_item_id + i,
            "orderId": missing_order + i,
            "productName": name,
            "unitPrice": price,
            "quantity": 1,
        })
        edits += 1
    return edits


# -----------------------------
# Writers
# -----------------------------

def write_csv(path: str, rows: List[Dict], headers: List[str]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=headers)
        w.writeheader()
        for r in rows:
            w.writerow(r)

def write_store_settings(path: str, business_type: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"businessType": business_type}, f)


# -----------------------------
# Main
# -----------------------------

def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()

    parser = argparse.ArgumentParser(description="Generate fake POS orders to CSVs.")
    parser.add_argument("--days", type=int, default=config.default_seed_days, help="Number of days of order history.")
    parser.add_argument("--start-date", type=str, default=None, help="YYYY-MM-DD (defaults to today - days + 1)")
    parser.add_argument("--orders-per-day", type=int, default=config.default_seed_orders_per_day)
    parser.add_argument("--output-dir", type=str, default=config.data_dir)
    parser.add_argument("--business-type", type=str, default=config.business_type,
                        help=f"Written to store_settings.json (e.g. restaurant, {LAUNDRY}).")
    parser.add_argument("--seed", type=int, default=config.default_seed_value)
    parser.add_argument("--clean", action="store_true", help="Skip the malformed rows and orphan items.")
    parser.add_argument("--no-overwrite", action="store_true", help="Fail if output files already exist.")
    args = parser.parse_args(argv)

    if args.days < 1:
        print("--days must be at least 1", file=sys.stderr)
        return 2

    rnd = random.Random(args.seed)

    outdir = args.output_dir
    ensure_dir(outdir)

    # file paths
    files = {
        "orders": os.path.join(outdir, "orders.csv"),
        "order_items": os.path.join(outdir, "order_items.csv"),
        "store_settings": os.path.join(outdir, "store_settings.json"),
    }
    if args.no_overwrite:
        for p in files.values():
            if os.path.exists(p):
                print(f"Refusing to overwrite existing file: {p}", file=sys.stderr)
                return 2

    # time window
    if args.start_date:
        start_d = date.fromisoformat(args.start_date)
    else:
        start_d = date.today() - timedelta(days=args.days - 1)

    order_times = gen_order_times(rnd, start_d, args.days, args.orders_per_day)
    orders, items = gen_orders_and_items(rnd, order_times)
    dirty = 0 if args.clean else add_dirty_rows(rnd, orders, items)

    write_csv(files["orders"], orders, ORDER_HEADERS)
    write_csv(files["order_items"], items, ITEM_HEADERS)
    write_store_settings(files["store_settings"], args.business_type)

    # simple summary
    print(f"Generated data in {outdir}")
    print(f" orders: {len(orders)} | order_items: {len(items)} | dirty rows: {dirty}")
    print(f" window: {start_d.isoformat()} .. {(start_d + timedelta(days=args.days - 1)).isoformat()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
