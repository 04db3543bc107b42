"""Calendar helpers: UTC coercion and month-granular date math."""

from __future__ import annotations

import re
from datetime import datetime, timezone

_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def ensure_utc(value: datetime) -> datetime:
    """Return an aware datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_year_month(value: str | None) -> datetime | None:
    """Parse a "YYYY-MM" knowledge-cutoff string.

    Returns the first day of that month at midnight UTC, or None when the
    input is empty or not in "YYYY-MM" form.
    """
    if not value:
        return None

    match = _YEAR_MONTH_RE.match(value.strip())
    if not match:
        return None

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        return None
    return datetime(year, month, 1, tzinfo=timezone.utc)


def month_index(value: datetime) -> int:
    """Absolute calendar month number (year * 12 + zero-based month)."""
    value = ensure_utc(value)
    return value.year * 12 + (value.month - 1)


def months_between(start: datetime, end: datetime) -> int:
    """Calendar-month difference ``start - end``.

    Positive when ``start`` falls in a later month than ``end``. Days within
    the month are ignored: 2024-06-30 and 2024-06-01 are 0 months apart.
    """
    return month_index(start) - month_index(end)


DAYS_PER_MONTH = 30


def elapsed_months(start: datetime, end: datetime) -> float:
    """Fractional 30-day months from ``end`` to ``start`` (positive when ``start`` is later)."""
    delta = ensure_utc(start) - ensure_utc(end)
    return delta.total_seconds() / (DAYS_PER_MONTH * 86400)
