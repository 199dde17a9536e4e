from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_clock(value: str) -> tuple[int, int]:
    """Parse a 24-hour "HH:MM" string into (hour, minute).

    Seconds are tolerated ("08:30:00") since TIME columns come back that way.
    """
    parts = (value or "").strip().split(":")
    if len(parts) not in (2, 3):
        raise ValidationError(f"Invalid clock time {value!r} (expected HH:MM)")
    try:
        hour = int(parts[0])
        minute = int(parts[1])
    except ValueError:
        raise ValidationError(f"Invalid clock time {value!r} (expected HH:MM)")

    if not 0 <= hour <= 23 or not 0 <= minute <= 59:
        raise ValidationError(f"Clock time out of range: {value!r}")
    return hour, minute


def parse_month(value: str) -> date:
    """Parse YYYY-MM into the first day of that month."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m").date()
    except ValueError:
        raise ValidationError(f"Invalid month {value!r} (expected YYYY-MM)")


def month_bounds(month: date) -> tuple[date, date]:
    start = month.replace(day=1)
    last_day = calendar.monthrange(start.year, start.month)[1]
    return start, start.replace(day=last_day)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()
