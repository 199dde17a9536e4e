from __future__ import annotations

from ..common.datetime_utils import parse_clock
from ..core.constants import MINUTES_PER_DAY


def minutes_since_midnight(value: str) -> int:
    hour, minute = parse_clock(value)
    return hour * 60 + minute


def elapsed_minutes(start_time: str, end_time: str) -> int:
    """Minutes from start to end, wrapping once past midnight when end < start."""
    diff = minutes_since_midnight(end_time) - minutes_since_midnight(start_time)
    if diff < 0:
        diff += MINUTES_PER_DAY
    return diff


def compute_hours(start_time: str, end_time: str) -> float:
    """OT hours between two HH:MM clock times, rounded half-up to 0.1 h.

    Spans are assumed to be shorter than 24 hours; "22:00" -> "06:00" is 8.0.
    Malformed clock strings raise ValidationError.
    """
    # tenths of an hour = minutes / 6, rounded half-up in integer arithmetic
    tenths = (elapsed_minutes(start_time, end_time) + 3) // 6
    return tenths / 10
