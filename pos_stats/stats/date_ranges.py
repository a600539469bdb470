"""Named date windows and the label shown for the active window.

Presets are evaluated in a fixed priority order against "today"; the first one
whose window equals the requested range names it. Ranges that match no preset
are labelled with their literal bounds.
"""
from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime, timedelta
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from ..config import get_config
from ..data.models import DatePreset, DateRange

PRESET_LABELS: dict[DatePreset, str] = {
    DatePreset.TODAY: "Today",
    DatePreset.YESTERDAY: "Yesterday",
    DatePreset.DAY_BEFORE_YESTERDAY: "Day before yesterday",
    DatePreset.LAST_WEEK: "Last week",
    DatePreset.THIS_MONTH: "This month",
    DatePreset.LAST_MONTH: "Last month",
    DatePreset.THIS_YEAR: "This year",
}

LABEL_DATE_FORMAT = "%d/%m/%Y"


def store_today(tz: Optional[str] = None) -> date:
    """Today's calendar date in `tz`, defaulting to the configured store timezone."""
    tz = tz or get_config().timezone
    return datetime.now(ZoneInfo(tz)).date()


def _today(today: date) -> DateRange:
    return DateRange.single_day(today)


def _yesterday(today: date) -> DateRange:
    return DateRange.single_day(today - timedelta(days=1))


def _day_before_yesterday(today: date) -> DateRange:
    return DateRange.single_day(today - timedelta(days=2))


def _last_week(today: date) -> DateRange:
    # on Sundays the week that is ending counts as last week
    days_back = 6 if today.weekday() == 6 else today.weekday() + 7
    monday = today - timedelta(days=days_back)
    return DateRange(start=monday, end=monday + timedelta(days=6))


def _this_month(today: date) -> DateRange:
    last_day = monthrange(today.year, today.month)[1]
    return DateRange(start=today.replace(day=1), end=today.replace(day=last_day))


def _last_month(today: date) -> DateRange:
    end = today.replace(day=1) - timedelta(days=1)
    return DateRange(start=end.replace(day=1), end=end)


def _this_year(today: date) -> DateRange:
    return DateRange(start=date(today.year, 1, 1), end=today)


_PRESET_BUILDERS: dict[DatePreset, Callable[[date], DateRange]] = {
    DatePreset.TODAY: _today,
    DatePreset.YESTERDAY: _yesterday,
    DatePreset.DAY_BEFORE_YESTERDAY: _day_before_yesterday,
    DatePreset.LAST_WEEK: _last_week,
    DatePreset.THIS_MONTH: _this_month,
    DatePreset.LAST_MONTH: _last_month,
    DatePreset.THIS_YEAR: _this_year,
}


def preset_range(preset: DatePreset, today: Optional[date] = None) -> DateRange:
    """Window a preset stands for, anchored to `today`."""
    return _PRESET_BUILDERS[DatePreset(preset)](today or store_today())


def match_preset(date_range: DateRange, today: Optional[date] = None) -> Optional[DatePreset]:
    """First preset (in priority order) whose window equals `date_range`."""
    today = today or store_today()
    for preset, build in _PRESET_BUILDERS.items():
        if build(today) == date_range:
            return preset
    return None


def format_date_range(date_range: DateRange) -> str:
    return f"{date_range.start.strftime(LABEL_DATE_FORMAT)} – {date_range.end.strftime(LABEL_DATE_FORMAT)}"


def describe_date_range(date_range: DateRange, today: Optional[date] = None) -> str:
    """Preset label for the range, or its literal dd/mm/yyyy bounds."""
    preset = match_preset(date_range, today)
    if preset is not None:
        return PRESET_LABELS[preset]
    return format_date_range(date_range)
