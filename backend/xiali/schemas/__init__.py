"""Pydantic Schema 模組"""

from xiali.schemas.calendar import (
    ApiResponse,
    GregorianDay,
    GregorianMonthResponse,
    HolidayResponse,
    LunarDay,
    LunarMonthResponse,
    NavigationResponse,
    OptionItem,
    TodayResponse,
    YearInfoResponse,
)

__all__ = [
    "ApiResponse",
    "GregorianDay",
    "GregorianMonthResponse",
    "HolidayResponse",
    "LunarDay",
    "LunarMonthResponse",
    "NavigationResponse",
    "OptionItem",
    "TodayResponse",
    "YearInfoResponse",
]
