from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .fields import to_text

LAUNDRY = "laundry"
DEFAULT_BUSINESS_TYPE = "restaurant"


class StoreSettings(BaseModel):
    """Subset of the tenant's store settings consumed by the report."""
    model_config = ConfigDict(frozen=True, validate_by_name=True, validate_by_alias=True, extra="ignore")

    business_type: str = Field(
        default=DEFAULT_BUSINESS_TYPE, alias="businessType", description="Business type discriminator"
    )

    @field_validator("business_type", mode="before")
    @classmethod
    def _coerce_business_type(cls, value):
        return to_text(value, default=DEFAULT_BUSINESS_TYPE)

    @property
    def is_laundry(self) -> bool:
        return self.business_type.lower() == LAUNDRY


class TenantContext(BaseModel):
    """Tenant identity passed explicitly to the fetch layer."""
    model_config = ConfigDict(frozen=True)

    domain: Optional[str] = Field(default=None, description="Tenant domain sent as X-Tenant-Domain")
    origin: Optional[str] = Field(default=None, description="Origin header value")

    def headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.domain:
            headers["X-Tenant-Domain"] = self.domain
        if self.origin:
            headers["Origin"] = self.origin
        return headers
