from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional
from zoneinfo import ZoneInfo

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...errors import InvalidRangeError


class DatePreset(str, Enum):
    """Named date windows offered by the report, in matching priority order."""
    TODAY = "today"
    YESTERDAY = "yesterday"
    DAY_BEFORE_YESTERDAY = "day_before_yesterday"
    LAST_WEEK = "last_week"
    THIS_MONTH = "this_month"
    LAST_MONTH = "last_month"
    THIS_YEAR = "this_year"


def _parse_date(value: Any, label: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        parsed = pd.to_datetime(value)
    except (ValueError, TypeError, OverflowError) as exc:
        raise InvalidRangeError(f"Unparseable {label} date: {value!r}") from exc
    if pd.isna(parsed):
        raise InvalidRangeError(f"Missing {label} date")
    return parsed.date()


class DateRange(BaseModel):
    """Inclusive calendar-date window."""
    model_config = ConfigDict(frozen=True)

    start: date = Field(description="First day of the window (inclusive)")
    end: date = Field(description="Last day of the window (inclusive)")

    @model_validator(mode="after")
    def _check_order(self):
        if self.start > self.end:
            raise InvalidRangeError(f"Start date {self.start} is after end date {self.end}")
        return self

    @classmethod
    def from_values(cls, start: Any, end: Any) -> DateRange:
        """Build a range from ISO strings, dates or datetimes.

        Raises:
            InvalidRangeError: If either bound is unparseable or start > end.
        """
        return cls(start=_parse_date(start, "start"), end=_parse_date(end, "end"))

    @classmethod
    def single_day(cls, day: date) -> DateRange:
        return cls(start=day, end=day)

    @property
    def day_count(self) -> int:
        """Number of calendar days covered, used as the daily-average denominator."""
        return max(1, (self.end - self.start).days + 1)

    def contains(self, moment: Optional[datetime], tz: Optional[ZoneInfo] = None) -> bool:
        """Whether the local calendar date of `moment` lies inside the window.

        Aware timestamps are converted to `tz` first; naive ones are taken as
        already being store-local.
        """
        if moment is None:
            return False
        if tz is not None and moment.tzinfo is not None:
            moment = moment.astimezone(tz)
        return self.start <= moment.date() <= self.end
