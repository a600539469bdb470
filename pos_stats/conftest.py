import pytest

from pos_stats.config import set_config_for_test

ENV_VARS = [
    "APP_ENV", "LOG_LEVEL", "DATA_DIR", "API_BASE_URL", "TENANT_DOMAIN", "TENANT_ORIGIN",
    "HTTP_TIMEOUT_SECONDS", "HTTP_RETRIES", "BUSINESS_TYPE", "TIMEZONE", "CURRENCY_CODE",
    "CURRENCY_DECIMALS", "TOP_PRODUCTS_LIMIT",
]


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    set_config_for_test()
    yield
    set_config_for_test()


@pytest.fixture
def make_order():
    """Raw order record as the order store delivers it (camelCase keys)."""
    def _make(
        id,
        status="completed",
        total=0,
        tax=0,
        discount=0,
        include_tax=False,
        payment="cash",
        ordered_at="2026-10-18T10:00:00",
        customers=1,
    ):
        return {
            "id": id,
            "status": status,
            "total": total,
            "tax": tax,
            "discount": discount,
            "priceIncludeTax": include_tax,
            "paymentMethod": payment,
            "orderedAt": ordered_at,
            "customerCount": customers,
        }
    return _make


@pytest.fixture
def make_item():
    def _make(id, order_id, name="Cà phê sữa đá", unit_price=0, quantity=1):
        return {
            "id": id,
            "orderId": order_id,
            "productName": name,
            "unitPrice": unit_price,
            "quantity": quantity,
        }
    return _make
