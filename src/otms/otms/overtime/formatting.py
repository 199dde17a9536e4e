"""Display formatting for money, hours and clock times.

Rounding follows the dashboard's number rendering: the exact binary value of
the float is rounded half away from zero, so 7.25 renders "7.3" while 0.35
(stored as 0.34999...) renders "0.3".
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from ..common.datetime_utils import parse_clock
from ..core.constants import CURRENCY_PREFIX

Number = Union[int, float, Decimal]


def _quantize(value: Number, exponent: str) -> Decimal:
    return Decimal(value).quantize(Decimal(exponent), rounding=ROUND_HALF_UP)


def format_currency(amount: Optional[Number]) -> str:
    if amount is None:
        return f"{CURRENCY_PREFIX} 0.00"
    return f"{CURRENCY_PREFIX} {_quantize(amount, '0.01'):,.2f}"


def format_hours(hours: Optional[Number]) -> str:
    if hours is None:
        return "0.0"
    return f"{_quantize(hours, '0.1'):.1f}"


def format_time_12hour(time_value: str) -> str:
    hour, minute = parse_clock(time_value)
    period = "PM" if hour >= 12 else "AM"
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {period}"


def format_time_range(start_time: str, end_time: str) -> str:
    return f"{format_time_12hour(start_time)} - {format_time_12hour(end_time)}"
