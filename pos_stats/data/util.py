from __future__ import annotations

from typing import Literal, Optional

from ..config import get_config
from .backends.csv_backend import CsvOrderSource
from .backends.http_backend import HttpOrderSource
from .interface import OrderSource
from .models import TenantContext


def tenant_from_config() -> TenantContext:
    config = get_config()
    return TenantContext(domain=config.tenant_domain, origin=config.tenant_origin)


def get_order_source(
    kind: Literal["csv", "http"] = "csv",
    tenant: Optional[TenantContext] = None,
    data_dir: Optional[str] = None,
) -> OrderSource:
    if kind == "csv":
        # Reads from configured CSV folder
        return CsvOrderSource(data_dir=data_dir or get_config().data_dir)
    if kind == "http":
        return HttpOrderSource(tenant=tenant or tenant_from_config())
    raise ValueError(f"Unknown order source kind: {kind}")
