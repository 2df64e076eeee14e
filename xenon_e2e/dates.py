"""Date values typed into date inputs (ISO ``YYYY-MM-DD``)."""

import calendar
from datetime import date, timedelta
from typing import Optional


def iso(value: date) -> str:
    return value.isoformat()


def today(base: Optional[date] = None) -> str:
    return iso(base or date.today())


def days_from_today(days: int, base: Optional[date] = None) -> str:
    """Tomorrow is ``days_from_today(1)``, next week ``days_from_today(7)``."""
    return iso((base or date.today()) + timedelta(days=days))


def shift_months(value: date, months: int) -> date:
    """Move by whole months, clamping the day to the target month's length."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def one_month_ago(base: Optional[date] = None) -> str:
    return iso(shift_months(base or date.today(), -1))


def one_year_ahead(base: Optional[date] = None) -> str:
    return iso(shift_months(base or date.today(), 12))
