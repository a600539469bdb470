"""Coercion helpers shared by the record models.

Raw records arrive from JSON APIs and CSV files, so numbers may be strings,
NaN, empty or plain garbage. Every helper here degrades to a neutral value
instead of raising.
"""
from __future__ import annotations

import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

import pandas as pd

ZERO = Decimal("0")


def is_missing(value: Any) -> bool:
    """True for None, NaN, NaT, pd.NA and blank strings."""
    if value is None or value is pd.NA or value is pd.NaT:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def to_decimal(value: Any) -> Decimal:
    """Parse a monetary value, treating anything non-numeric as zero."""
    if is_missing(value) or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, int):
        return Decimal(value)
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    return result if result.is_finite() else ZERO


def to_int(value: Any, default: int = 0) -> int:
    """Whole-number coercion; fractional values are truncated."""
    if is_missing(value) or isinstance(value, bool):
        return default
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return default
    if not number.is_finite():
        return default
    return int(number)


def to_key(value: Any) -> Optional[str]:
    """Stringify an identifier so 7, 7.0 and "7" all compare equal."""
    if is_missing(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def to_flag(value: Any) -> bool:
    """Strict boolean: only True, "true" and "1" count as set."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1")
    return False


def to_datetime(value: Any) -> Optional[datetime]:
    if is_missing(value):
        return None
    if isinstance(value, datetime):
        return value
    parsed = pd.to_datetime(value, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.to_pydatetime()


def to_text(value: Any, default: str = "") -> str:
    if is_missing(value):
        return default
    return str(value).strip()


def round_half_up(value: Decimal, decimals: int = 0) -> Decimal:
    """Round to the currency minor unit, halves away from zero."""
    unit = Decimal(1).scaleb(-decimals)
    return value.quantize(unit, rounding=ROUND_HALF_UP)
