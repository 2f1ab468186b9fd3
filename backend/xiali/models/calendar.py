"""曆法值物件

農曆/公曆日期、月份描述與月曆單日紀錄。
皆為不可變物件，每次查詢重新建立。
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LunarDate:
    """農曆日期"""
    year: int
    month: int                   # 1..12，閏月以 is_leap_month 標示
    day: int                     # 1..30
    is_leap_month: bool = False

    @property
    def signed_month(self) -> int:
        """轉換器使用的月份編碼（閏月為負數）"""
        return -self.month if self.is_leap_month else self.month


@dataclass(frozen=True)
class GregorianDate:
    """公曆日期"""
    year: int
    month: int                   # 1..12
    day: int                     # 1..31


@dataclass(frozen=True)
class MonthDescriptor:
    """農曆年中的一個月份"""
    month: int                   # 1..12
    is_leap_month: bool = False


@dataclass(frozen=True)
class LunarDayInfo:
    """轉換器對單一農曆日的描述"""
    gan_zhi_year: str            # 年干支，如「甲辰」
    zodiac: str                  # 生肖
    day_name: str                # 日名，如「初一」
    month_name: str              # 月名，如「正」、「闰二」
    jie_qi: Optional[str]        # 當日節氣，非節氣日為 None


@dataclass(frozen=True)
class LunarDayRecord:
    """農曆月曆中的一天"""
    lunar_day: int
    lunar_day_name: str
    gregorian_year: int
    gregorian_month: int
    gregorian_day: int
    jie_qi: Optional[str] = None
    holiday: Optional[str] = None

    @property
    def label(self) -> str:
        """格子副標：節日 > 節氣 > 農曆日名"""
        return self.holiday or self.jie_qi or self.lunar_day_name


@dataclass(frozen=True)
class GregorianDayRecord:
    """公曆月曆中的一格

    月初以 empty=True 的佔位格補齊至對應星期欄位。
    """
    empty: bool
    gregorian_day: Optional[int] = None
    lunar_day_name: Optional[str] = None
    lunar_month_name: Optional[str] = None
    lunar_day: Optional[int] = None
    is_first_day_of_lunar_month: bool = False
    jie_qi: Optional[str] = None
    holiday: Optional[str] = None
    lunar_year: Optional[int] = None
    lunar_month: Optional[int] = None
    is_leap_month: bool = False

    @classmethod
    def placeholder(cls) -> "GregorianDayRecord":
        """建立空白佔位格"""
        return cls(empty=True)

    @property
    def label(self) -> Optional[str]:
        """格子副標：節日 > 節氣 > 初一顯示月名 > 農曆日名"""
        if self.empty:
            return None
        if self.holiday:
            return self.holiday
        if self.jie_qi:
            return self.jie_qi
        if self.is_first_day_of_lunar_month:
            return self.lunar_month_name
        return self.lunar_day_name
