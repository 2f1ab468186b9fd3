"""資料模型模組

包含曆法值物件定義。
"""

from xiali.models.calendar import (
    GregorianDate,
    GregorianDayRecord,
    LunarDate,
    LunarDayInfo,
    LunarDayRecord,
    MonthDescriptor,
)

__all__ = [
    "GregorianDate",
    "GregorianDayRecord",
    "LunarDate",
    "LunarDayInfo",
    "LunarDayRecord",
    "MonthDescriptor",
]
