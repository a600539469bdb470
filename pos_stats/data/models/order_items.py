from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .fields import ZERO, to_decimal, to_int, to_key, to_text

UNKNOWN_PRODUCT = "Unknown"


class OrderItem(BaseModel):
    """Line item of an order."""
    model_config = ConfigDict(frozen=True, validate_by_name=True, validate_by_alias=True, extra="ignore")

    id: str = Field(description="Unique order item identifier")
    order_id: str = Field(alias="orderId", description="Order identifier this item belongs to")
    product_name: str = Field(default=UNKNOWN_PRODUCT, alias="productName", description="Product name, used as grouping key")
    unit_price: Decimal = Field(default=ZERO, alias="unitPrice", description="Unit price at time of order")
    quantity: int = Field(default=0, description="Quantity ordered")

    @field_validator("id", "order_id", mode="before")
    @classmethod
    def _coerce_key(cls, value):
        key = to_key(value)
        if not key:
            raise ValueError("identifier is required")
        return key

    @field_validator("product_name", mode="before")
    @classmethod
    def _coerce_product_name(cls, value):
        return to_text(value, default=UNKNOWN_PRODUCT)

    @field_validator("unit_price", mode="before")
    @classmethod
    def _coerce_unit_price(cls, value):
        return to_decimal(value)

    @field_validator("quantity", mode="before")
    @classmethod
    def _coerce_quantity(cls, value):
        return max(0, to_int(value))

    @property
    def line_total(self) -> Decimal:
        """Pre-discount value of the line (unit_price * quantity)."""
        return self.unit_price * self.quantity
