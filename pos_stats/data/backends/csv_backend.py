from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
from zoneinfo import ZoneInfo

import pandas as pd
from pydantic import ValidationError

from ...config import get_config
from ...errors import DataSourceError
from ...logging import get_logger
from ..interface import OrderSource
from ..models import DateRange, StoreSettings
from ..models.fields import to_datetime

logger = get_logger(__name__)

REQUIRED_FILES = ["orders.csv", "order_items.csv"]
STORE_SETTINGS_FILE = "store_settings.json"


@dataclass
class _Tables:
    orders: pd.DataFrame
    order_items: pd.DataFrame


class CsvOrderSource(OrderSource):
    """
    CSV-backed implementation.
    - Reads orders.csv / order_items.csv from `data_dir` on every call, so
      each request sees the files as they are now (no result caching).
    - Columns are read as text; coercion of malformed values is left to the
      engine's normaliser.
    """

    def __init__(self, data_dir: str | Path = None, timezone: Optional[str] = None) -> None:
        config = get_config()
        if data_dir is None:
            data_dir = config.data_dir
        self.timezone = ZoneInfo(timezone or config.timezone)
        self.default_business_type = config.business_type

        self.data_dir = Path(data_dir)

        # If the path is relative, make it relative to the repository root
        if not self.data_dir.is_absolute():
            current = Path.cwd()
            repo_root = None

            # Look up the directory tree for pyproject.toml
            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            if repo_root:
                self.data_dir = repo_root / self.data_dir
            else:
                self.data_dir = current / self.data_dir

        self._check_files(self.data_dir)

    # ---------- loading helpers ----------

    @staticmethod
    def _check_files(data_dir: Path) -> None:
        if not data_dir.exists():
            raise FileNotFoundError(
                f"Data directory not found: {data_dir}\n"
                f"Please either:\n"
                f"  1. Generate sample data: pos-stats-seed --output-dir {data_dir}\n"
                f"  2. Set DATA_DIR environment variable to point to your data directory\n"
                f"  3. Create a .env file with DATA_DIR=/path/to/your/data"
            )

        missing_files = [f for f in REQUIRED_FILES if not (data_dir / f).exists()]
        if missing_files:
            raise FileNotFoundError(
                f"Required CSV files missing in {data_dir}:\n"
                f"  Missing: {', '.join(missing_files)}\n"
                f"  Expected files: {', '.join(REQUIRED_FILES)}"
            )

    def _load_tables(self) -> _Tables:
        try:
            orders = pd.read_csv(self.data_dir / "orders.csv", dtype=str, keep_default_na=False)
            order_items = pd.read_csv(self.data_dir / "order_items.csv", dtype=str, keep_default_na=False)
        except (OSError, ValueError, pd.errors.ParserError) as e:
            raise DataSourceError(
                f"Error reading CSV files from {self.data_dir}: {e}\n"
                f"Please check that the CSV files are valid and readable."
            ) from e
        return _Tables(orders=orders, order_items=order_items)

    @staticmethod
    def _records(df: pd.DataFrame) -> list[dict[str, Any]]:
        if df.empty:
            return []
        return df.to_dict(orient="records")

    # ---------- interface implementation ----------

    def fetch_orders(self) -> list[dict[str, Any]]:
        tables = self._load_tables()
        logger.info(f"Loaded {len(tables.orders)} orders from {self.data_dir}")
        return self._records(tables.orders)

    def fetch_order_items(self) -> list[dict[str, Any]]:
        tables = self._load_tables()
        logger.info(f"Loaded {len(tables.order_items)} order items from {self.data_dir}")
        return self._records(tables.order_items)

    def fetch_orders_in_range(self, date_range: DateRange) -> list[dict[str, Any]]:
        df = self._load_tables().orders
        if df.empty or "orderedAt" not in df.columns:
            return []
        mask = df["orderedAt"].map(lambda value: date_range.contains(to_datetime(value), self.timezone))
        in_range = df.loc[mask.astype(bool)]
        logger.info(
            f"Selected {len(in_range)} of {len(df)} orders between {date_range.start} and {date_range.end}"
        )
        return self._records(in_range)

    def fetch_store_settings(self) -> StoreSettings:
        path = self.data_dir / STORE_SETTINGS_FILE
        if not path.exists():
            return StoreSettings(business_type=self.default_business_type)
        try:
            return StoreSettings.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            raise DataSourceError(f"Error reading {path}: {e}") from e
