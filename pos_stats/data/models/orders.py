from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .fields import ZERO, to_datetime, to_decimal, to_flag, to_int, to_key, to_text


class OrderStatus(str, Enum):
    """Known order lifecycle statuses."""
    PENDING = "pending"
    PREPARING = "preparing"
    SERVED = "served"
    COMPLETED = "completed"
    PAID = "paid"
    CANCELLED = "cancelled"
    UNPAID = "unpaid"


class Order(BaseModel):
    """Point-in-time snapshot of an order as delivered by the order store."""
    model_config = ConfigDict(frozen=True, validate_by_name=True, validate_by_alias=True, extra="ignore")

    id: str = Field(description="Unique order identifier")
    status: str = Field(default="", description="Lifecycle status, lower-cased")
    total: Decimal = Field(default=ZERO, description="Gross amount charged to the customer")
    tax: Decimal = Field(default=ZERO, description="Tax component of the total")
    discount: Decimal = Field(default=ZERO, description="Order-level discount")
    price_include_tax: bool = Field(default=False, alias="priceIncludeTax", description="Whether total already contains tax")
    payment_method: str = Field(default="", alias="paymentMethod", description="Raw payment method code")
    ordered_at: Optional[datetime] = Field(default=None, alias="orderedAt", description="Order timestamp")
    customer_count: int = Field(default=1, alias="customerCount", description="Guests served by the order")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        key = to_key(value)
        if not key:
            raise ValueError("order id is required")
        return key

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value):
        return to_text(value).lower()

    @field_validator("total", "tax", "discount", mode="before")
    @classmethod
    def _coerce_amount(cls, value):
        return to_decimal(value)

    @field_validator("price_include_tax", mode="before")
    @classmethod
    def _coerce_flag(cls, value):
        return to_flag(value)

    @field_validator("payment_method", mode="before")
    @classmethod
    def _coerce_payment_method(cls, value):
        return to_text(value)

    @field_validator("ordered_at", mode="before")
    @classmethod
    def _coerce_ordered_at(cls, value):
        return to_datetime(value)

    @field_validator("customer_count", mode="before")
    @classmethod
    def _coerce_customer_count(cls, value):
        count = to_int(value, default=1)
        return count if count >= 1 else 1
