"""Calendar helpers for year-month keys and budget windows."""

import calendar
from datetime import date, timedelta
import re

_YEAR_MONTH_PATTERN = re.compile(r"\d{4}-\d{2}", flags=re.ASCII)


def parse_year_month(year_month: str) -> tuple[int, int]:
    """Split a ``YYYY-MM`` key into year and month.

    Raises:
        ValueError: If the key is not a valid year-month.
    """
    if not isinstance(year_month, str) or not _YEAR_MONTH_PATTERN.fullmatch(
        year_month
    ):
        raise ValueError(f"Invalid year-month '{year_month}'. Expected YYYY-MM.")
    year, month = int(year_month[:4]), int(year_month[5:])
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month in '{year_month}'.")
    return year, month


def format_year_month(year: int, month: int) -> str:
    """Return the ``YYYY-MM`` key for a year and month."""
    return f"{year:04d}-{month:02d}"


def year_month_of(day: date) -> str:
    """Return the ``YYYY-MM`` key containing a date."""
    return format_year_month(day.year, day.month)


def shift_year_month(year_month: str, months: int) -> str:
    """Return the key ``months`` calendar months away from ``year_month``."""
    year, month = parse_year_month(year_month)
    index = year * 12 + (month - 1) + months
    return format_year_month(index // 12, index % 12 + 1)


def next_year_month(year_month: str) -> str:
    """Return the key of the following calendar month."""
    return shift_year_month(year_month, 1)


def month_window(year_month: str) -> tuple[date, date]:
    """Return the first and last day of a month."""
    year, month = parse_year_month(year_month)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def week_window(day: date) -> tuple[date, date]:
    """Return the Monday and Sunday of the week containing ``day``."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


__all__ = [
    "parse_year_month",
    "format_year_month",
    "year_month_of",
    "shift_year_month",
    "next_year_month",
    "month_window",
    "week_window",
]
