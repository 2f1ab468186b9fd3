"""服務模組

包含曆法轉換器、夏曆服務與月曆導覽邏輯。
"""

from xiali.services.calendar import CalendarService, get_calendar_service, resolve_lunar_holiday
from xiali.services.provider import CalendarProvider, LunarPythonProvider

__all__ = [
    "CalendarProvider",
    "CalendarService",
    "LunarPythonProvider",
    "get_calendar_service",
    "resolve_lunar_holiday",
]
