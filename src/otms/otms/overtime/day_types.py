from __future__ import annotations

from typing import Union

from ..core.enums import DayType

DAY_TYPE_COLORS: dict[DayType, str] = {
    DayType.WEEKDAY: "bg-blue-500/10 text-blue-700 dark:text-blue-300",
    DayType.SATURDAY: "bg-purple-500/10 text-purple-700 dark:text-purple-300",
    DayType.SUNDAY: "bg-orange-500/10 text-orange-700 dark:text-orange-300",
    DayType.PUBLIC_HOLIDAY: "bg-red-500/10 text-red-700 dark:text-red-300",
}

DAY_TYPE_LABELS: dict[DayType, str] = {
    DayType.WEEKDAY: "Weekday",
    DayType.SATURDAY: "Saturday",
    DayType.SUNDAY: "Sunday",
    DayType.PUBLIC_HOLIDAY: "Public Holiday",
}


def _coerce(day_type: Union[DayType, str, None]) -> DayType:
    try:
        return DayType(day_type)
    except ValueError:
        return DayType.WEEKDAY


def color_for(day_type: Union[DayType, str, None]) -> str:
    """Badge classes for a day type; unknown values render as weekday."""
    return DAY_TYPE_COLORS[_coerce(day_type)]


def label_for(day_type: Union[DayType, str, None]) -> str:
    return DAY_TYPE_LABELS[_coerce(day_type)]
