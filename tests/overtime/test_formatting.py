import pytest

from src.otms.otms.core.exceptions import ValidationError
from src.otms.otms.overtime.formatting import (
    format_currency,
    format_hours,
    format_time_12hour,
    format_time_range,
)


def test_format_currency():
    assert format_currency(1234.5) == "RM 1,234.50"
    assert format_currency(1234567.891) == "RM 1,234,567.89"
    assert format_currency(None) == "RM 0.00"
    assert format_currency(0) == "RM 0.00"


def test_format_currency_rounds_half_up():
    assert format_currency(0.125) == "RM 0.13"


def test_format_hours():
    assert format_hours(None) == "0.0"
    assert format_hours(8) == "8.0"
    assert format_hours(7.25) == "7.3"
    assert format_hours(2.04) == "2.0"


def test_format_time_12hour():
    assert format_time_12hour("00:00") == "12:00 AM"
    assert format_time_12hour("13:05") == "1:05 PM"
    assert format_time_12hour("12:00") == "12:00 PM"
    assert format_time_12hour("09:30:00") == "9:30 AM"


def test_format_time_range():
    assert format_time_range("18:00", "21:30") == "6:00 PM - 9:30 PM"


def test_format_time_rejects_garbage():
    with pytest.raises(ValidationError):
        format_time_12hour("noon")
