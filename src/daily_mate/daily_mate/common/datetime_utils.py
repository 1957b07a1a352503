from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.constants import MONTH_NAMES
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (optionally followed by a time part) into a date.

    Only the calendar day is kept, time-of-day is dropped.
    """
    if not value or not str(value).strip():
        raise ValidationError("Geçerli bir tarih giriniz")
    try:
        return datetime.strptime(str(value).strip()[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Geçerli bir tarih giriniz")


def normalize_day(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().date()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_range(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of the month (both inclusive)."""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def day_number(day: date) -> int:
    """Day of week with Sunday=1 ... Saturday=7."""
    return day.isoweekday() % 7 + 1
