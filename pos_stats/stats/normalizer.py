"""Turn raw order / order-item records into typed, validated models.

Accepts whatever the order sources hand over: a pandas DataFrame, an iterable
of mappings, or models that were already normalised. Records that cannot be
salvaged (no identifier) are dropped with a warning; every other defect is
coerced by the models themselves.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, TypeVar, Union

import pandas as pd
from pydantic import BaseModel, ValidationError

from ..data.models import Order, OrderItem
from ..logging import get_logger

logger = get_logger(__name__)

RecordsLike = Union[pd.DataFrame, Iterable[Union[Mapping[str, Any], BaseModel]], None]

_M = TypeVar("_M", bound=BaseModel)


def _iter_records(records: RecordsLike) -> Iterable[Any]:
    if records is None:
        return []
    if isinstance(records, pd.DataFrame):
        return records.to_dict(orient="records")
    return records


def _normalize(records: RecordsLike, model: type[_M]) -> list[_M]:
    normalized: list[_M] = []
    dropped = 0
    for raw in _iter_records(records):
        if isinstance(raw, model):
            normalized.append(raw)
            continue
        if isinstance(raw, BaseModel):
            raw = raw.model_dump(by_alias=True)
        try:
            normalized.append(model.model_validate(raw))
        except ValidationError as exc:
            dropped += 1
            logger.warning(f"Dropping malformed {model.__name__} record: {exc.errors()[0]['msg']}")
    if dropped:
        logger.debug(f"Normalized {len(normalized)} {model.__name__} records, dropped {dropped}")
    return normalized


def normalize_orders(records: RecordsLike) -> list[Order]:
    """Validate and coerce raw order records."""
    return _normalize(records, Order)


def normalize_order_items(records: RecordsLike) -> list[OrderItem]:
    """Validate and coerce raw order-item records."""
    return _normalize(records, OrderItem)


def index_orders(orders: Iterable[Order]) -> dict[str, Order]:
    """Map order id -> order, keeping the first occurrence of duplicated ids."""
    index: dict[str, Order] = {}
    for order in orders:
        index.setdefault(order.id, order)
    return index
