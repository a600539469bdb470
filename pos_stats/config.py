from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Application
    app_env: str = "local"
    log_level: str = "INFO"

    # Data paths
    data_dir: str = "sample_data"

    # Order store API
    api_base_url: str = "https://api-pos-mobile.edpos.vn/api"
    tenant_domain: Optional[str] = None
    tenant_origin: Optional[str] = None
    http_timeout_seconds: float = 15.0
    http_retries: int = 2

    # Store settings
    business_type: str = "restaurant"
    timezone: str = "Asia/Ho_Chi_Minh"
    currency_code: str = "VND"
    currency_decimals: int = 0

    # Report settings
    top_products_limit: int = 5

    # Seed data settings
    default_seed_days: int = 14
    default_seed_orders_per_day: int = 60
    default_seed_value: int = 42

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
