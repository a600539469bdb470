from __future__ import annotations

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ...config import get_config
from ...errors import DataSourceError
from ...logging import get_logger
from ..interface import OrderSource
from ..models import DateRange, StoreSettings, TenantContext

logger = get_logger(__name__)


class HttpOrderSource(OrderSource):
    """Order source backed by the POS REST API.

    The tenant is passed in explicitly and sent as request headers on every
    call. Connection failures are retried by the transport; anything else is
    raised to the caller as DataSourceError.
    """

    def __init__(
        self,
        tenant: TenantContext,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        retries: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        config = get_config()
        self.tenant = tenant
        self.base_url = (base_url or config.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.http_timeout_seconds
        self.retries = retries if retries is not None else config.http_retries
        self.transport = transport

    def _get(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        try:
            with httpx.Client(
                transport=self.transport or httpx.HTTPTransport(retries=self.retries),
                headers=self.tenant.headers(),
                timeout=self.timeout,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"GET {url} failed with status {e.response.status_code}")
            raise DataSourceError(f"GET {url} returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"GET {url} failed: {e}")
            raise DataSourceError(f"GET {url} failed: {e}") from e
        except ValueError as e:
            raise DataSourceError(f"GET {url} returned invalid JSON") from e
        logger.info(f"GET {url} -> {response.status_code}")
        return payload

    def _get_list(self, path: str) -> list[dict[str, Any]]:
        payload = self._get(path)
        if not isinstance(payload, list):
            raise DataSourceError(f"Expected a list from {path}, got {type(payload).__name__}")
        return payload

    def fetch_orders(self) -> list[dict[str, Any]]:
        return self._get_list("/orders")

    def fetch_order_items(self) -> list[dict[str, Any]]:
        return self._get_list("/order-items")

    def fetch_orders_in_range(self, date_range: DateRange) -> list[dict[str, Any]]:
        return self._get_list(f"/orders/date-range/{date_range.start.isoformat()}/{date_range.end.isoformat()}")

    def fetch_store_settings(self) -> StoreSettings:
        payload = self._get("/store-settings")
        if not isinstance(payload, dict):
            raise DataSourceError("Expected an object from /store-settings")
        try:
            return StoreSettings.model_validate(payload)
        except ValidationError as e:
            raise DataSourceError(f"Invalid store settings from /store-settings: {e}") from e
