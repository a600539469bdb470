from .orders import Order, OrderStatus
from .order_items import OrderItem, UNKNOWN_PRODUCT
from .date_range import DatePreset, DateRange
from .payment_methods import PaymentMethod, PAYMENT_METHOD_LABELS
from .store_settings import StoreSettings, TenantContext
from .statistics import (
    ItemAllocation,
    PaymentMethodTotal,
    ProductStat,
    StatisticsSnapshot,
)

__all__ = [
    # Records
    "Order",
    "OrderStatus",
    "OrderItem",
    "UNKNOWN_PRODUCT",
    # Date window
    "DatePreset",
    "DateRange",
    # Payment methods
    "PaymentMethod",
    "PAYMENT_METHOD_LABELS",
    # Tenant
    "StoreSettings",
    "TenantContext",
    # Results
    "ItemAllocation",
    "PaymentMethodTotal",
    "ProductStat",
    "StatisticsSnapshot",
]
