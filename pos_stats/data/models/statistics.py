from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from .date_range import DatePreset, DateRange
from .fields import ZERO
from .payment_methods import PaymentMethod

_SNAPSHOT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    validate_by_name=True,
    validate_by_alias=True,
    serialize_by_alias=True,
)


class ItemAllocation(BaseModel):
    """Share of an order-level discount assigned to one line item."""
    model_config = _SNAPSHOT_CONFIG

    item_id: str = Field(description="Order item identifier")
    order_id: str = Field(description="Owning order identifier")
    product_name: str = Field(description="Product grouping key")
    unit_price: Decimal = Field(description="Unit price at time of order")
    quantity: int = Field(description="Quantity ordered")
    line_total: Decimal = Field(description="unit_price * quantity")
    discount: Decimal = Field(default=ZERO, description="Allocated share of the order discount")

    @property
    def revenue(self) -> Decimal:
        """Line total net of the allocated discount."""
        return self.line_total - self.discount


class ProductStat(BaseModel):
    """Aggregated sales of one product across completed orders."""
    model_config = _SNAPSHOT_CONFIG

    name: str = Field(description="Product name")
    quantity: int = Field(description="Units sold")
    revenue: Decimal = Field(description="Revenue net of allocated discounts")
    unit_price: Decimal = Field(description="Most recently seen unit price")
    percentage: int = Field(default=0, description="Share of the ranked products' revenue, in percent")


class PaymentMethodTotal(BaseModel):
    """Orders and customer payments collected through one payment method."""
    model_config = _SNAPSHOT_CONFIG

    method: PaymentMethod = Field(description="Canonical payment method")
    label: str = Field(description="Display name")
    count: int = Field(default=0, description="Number of completed orders")
    total: Decimal = Field(default=ZERO, description="Sum of customer payments (revenue + tax)")


class StatisticsSnapshot(BaseModel):
    """Financial summary of a date window. Immutable once produced."""
    model_config = _SNAPSHOT_CONFIG

    completed_revenue: Decimal = Field(default=ZERO, description="Net revenue of completed/paid orders")
    serving_revenue: Decimal = Field(default=ZERO, description="Net revenue of orders still being served")
    cancelled_revenue: Decimal = Field(default=ZERO, description="Net revenue of cancelled orders")
    estimated_revenue: Decimal = Field(default=ZERO, description="completed_revenue + serving_revenue")
    daily_average_revenue: Decimal = Field(default=ZERO, description="completed_revenue / day_count")
    day_count: int = Field(default=1, description="Days covered by the date range")

    total_orders_in_range: int = Field(default=0, description="Orders placed within the date range")
    completed_orders_count: int = Field(default=0, description="Completed or paid orders")
    serving_orders_count: int = Field(default=0, description="Pending, preparing or served orders")
    cancelled_orders_count: int = Field(default=0, description="Cancelled orders")
    unpaid_orders_count: int = Field(default=0, description="Orders whose payment is still outstanding")
    period_customer_count: int = Field(default=0, description="Guests served across range orders")

    top_products: tuple[ProductStat, ...] = Field(default=(), description="Best sellers by revenue")
    payment_methods: Mapping[PaymentMethod, PaymentMethodTotal] = Field(
        default_factory=dict,
        validate_default=True,
        description="Completed-order payments per method, in first-seen order",
    )

    date_range: DateRange = Field(description="Window the snapshot covers")
    date_range_label: str = Field(description="Preset name or literal dd/mm/yyyy label")
    date_preset: Optional[DatePreset] = Field(default=None, description="Matched preset key, if any")

    @field_validator("payment_methods", mode="after")
    @classmethod
    def _freeze_payment_methods(cls, value):
        return MappingProxyType(dict(value))

    @field_serializer("payment_methods", mode="wrap")
    def _dump_payment_methods(self, value, handler):
        return handler(dict(value))
