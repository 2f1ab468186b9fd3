"""夏曆服務

在曆法轉換器之上提供整月查詢：
- 農曆月 / 公曆月的逐日紀錄
- 農曆年的月份序列（含閏月）
- 節日與節氣標註
- 干支、生肖、黃帝紀年等年份名稱
"""

import calendar
from datetime import datetime
from typing import Callable, Optional

from xiali.config import settings
from xiali.constants import (
    HUANGDI_EPOCH_OFFSET,
    LEAP_MONTH_PREFIX,
    LUNAR_HOLIDAYS,
    MONTH_NAMES,
    NEW_YEARS_EVE,
)
from xiali.exceptions import InvalidDateError
from xiali.models.calendar import (
    GregorianDate,
    GregorianDayRecord,
    LunarDate,
    LunarDayRecord,
    MonthDescriptor,
)
from xiali.services.provider import CalendarProvider, LunarPythonProvider


# ============================================
# 節日規則
# ============================================

# 規則未命中時回傳，交由下一條規則判斷
_NEXT = object()


def _leap_month_rule(month: int, day: int, is_leap_month: bool, day_count: int):
    # 閏月沒有節日
    return None if is_leap_month else _NEXT


def _new_years_eve_rule(month: int, day: int, is_leap_month: bool, day_count: int):
    # 除夕是腊月最後一天，可能是廿九或三十
    if month == 12 and day == day_count:
        return NEW_YEARS_EVE
    return _NEXT


def _holiday_table_rule(month: int, day: int, is_leap_month: bool, day_count: int):
    return LUNAR_HOLIDAYS.get(f"{month}-{day}")


HOLIDAY_RULES = (_leap_month_rule, _new_years_eve_rule, _holiday_table_rule)


def resolve_lunar_holiday(
    month: int,
    day: int,
    is_leap_month: bool,
    day_count: int,
) -> Optional[str]:
    """依序套用節日規則，取第一條命中的結果

    Args:
        month: 農曆月 (1-12)
        day: 農曆日
        is_leap_month: 是否閏月
        day_count: 該月天數（判斷除夕用）

    Returns:
        節日名稱，無節日則返回 None
    """
    for rule in HOLIDAY_RULES:
        result = rule(month, day, is_leap_month, day_count)
        if result is not _NEXT:
            return result
    return None


# ============================================
# 服務
# ============================================

def _default_clock() -> datetime:
    return datetime.now(settings.tzinfo)


class CalendarService:
    """夏曆服務

    無狀態；所有曆法計算委由注入的轉換器處理，
    轉換器回報的 InvalidDateError 原樣向上傳遞。

    Attributes:
        provider: 曆法轉換器
        clock: 取得「現在」的函式
    """

    def __init__(
        self,
        provider: CalendarProvider,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """初始化夏曆服務

        Args:
            provider: 曆法轉換器
            clock: 取得目前時間的函式，預設為設定時區的現在時間
        """
        self.provider = provider
        self.clock = clock or _default_clock

    def get_current_lunar_date(self) -> LunarDate:
        """取得今天的農曆日期"""
        now = self.clock()
        return self.provider.solar_to_lunar(now.year, now.month, now.day)

    def get_current_gregorian_date(self) -> GregorianDate:
        """取得今天的公曆日期"""
        now = self.clock()
        return GregorianDate(year=now.year, month=now.month, day=now.day)

    def _annotate(
        self,
        lunar_year: int,
        lunar_month: int,
        lunar_day: int,
        is_leap_month: bool,
        day_count: int,
    ) -> tuple:
        """取得單日的轉換器資訊與節日

        兩種月曆都經由此處，月份一律以「絕對值 + 閏月旗標」判斷節日。
        """
        month = abs(lunar_month)
        signed = -month if is_leap_month else month
        info = self.provider.day_info(lunar_year, signed, lunar_day)
        holiday = self.get_lunar_holiday(month, lunar_day, is_leap_month, day_count)
        return info, holiday

    def get_lunar_month(
        self,
        lunar_year: int,
        lunar_month: int,
        is_leap_month: bool = False,
    ) -> list[LunarDayRecord]:
        """取得農曆月的逐日紀錄

        Args:
            lunar_year: 農曆年
            lunar_month: 農曆月 (1-12)
            is_leap_month: 是否為閏月

        Returns:
            該月每一天的紀錄（29 或 30 筆）

        Raises:
            InvalidDateError: 該年沒有指定的（閏）月
        """
        month = abs(lunar_month)
        signed = -month if is_leap_month else month
        day_count = self.provider.month_day_count(lunar_year, signed)

        days = []
        for day in range(1, day_count + 1):
            solar = self.provider.lunar_to_solar(lunar_year, signed, day)
            info, holiday = self._annotate(lunar_year, month, day, is_leap_month, day_count)
            days.append(LunarDayRecord(
                lunar_day=day,
                lunar_day_name=info.day_name,
                gregorian_year=solar.year,
                gregorian_month=solar.month,
                gregorian_day=solar.day,
                jie_qi=info.jie_qi,
                holiday=holiday,
            ))
        return days

    def get_lunar_holiday(
        self,
        month: int,
        day: int,
        is_leap_month: bool,
        day_count: int,
    ) -> Optional[str]:
        """取得農曆節日，見 resolve_lunar_holiday"""
        return resolve_lunar_holiday(month, day, is_leap_month, day_count)

    def get_chinese_year_name(self, lunar_year: int) -> str:
        """取得干支與生肖年名，如「甲辰年 (龙年)」"""
        info = self.provider.day_info(lunar_year, 1, 1)
        return f"{info.gan_zhi_year}年 ({info.zodiac}年)"

    def get_huangdi_year(self, lunar_year: int) -> str:
        """取得黃帝紀年文字"""
        return f"黄帝纪年{self.get_huangdi_year_number(lunar_year)}年"

    def get_huangdi_year_number(self, lunar_year: int) -> int:
        return lunar_year + HUANGDI_EPOCH_OFFSET

    def get_chinese_month_name(self, lunar_month: int, is_leap_month: bool = False) -> str:
        """取得農曆月名

        lunar_month 須為 1-12，超出範圍屬呼叫端錯誤，不做防護。
        """
        prefix = LEAP_MONTH_PREFIX if is_leap_month else ""
        return prefix + MONTH_NAMES[abs(lunar_month) - 1]

    def get_leap_month(self, lunar_year: int) -> int:
        """取得閏月月份，0 表示該年無閏月"""
        return self.provider.leap_month(lunar_year)

    def get_months_in_year(self, lunar_year: int) -> list[MonthDescriptor]:
        """取得農曆年的月份序列

        閏月緊接在同名的平月之後，共 12 或 13 個月。
        """
        leap_month = self.get_leap_month(lunar_year)
        months = []
        for m in range(1, 13):
            months.append(MonthDescriptor(month=m, is_leap_month=False))
            if m == leap_month:
                months.append(MonthDescriptor(month=m, is_leap_month=True))
        return months

    def get_gregorian_month(self, year: int, month: int) -> list[GregorianDayRecord]:
        """取得公曆月的逐日紀錄

        月初以空白格補齊至星期欄位（週日為第 0 欄）。

        Args:
            year: 公曆年
            month: 公曆月 (1-12)

        Returns:
            空白佔位格加上該月每一天的紀錄

        Raises:
            InvalidDateError: 年月不合法
        """
        if not 1 <= month <= 12:
            raise InvalidDateError(f"公曆月份必須介於 1-12: {month}")
        try:
            first_weekday, days_in_month = calendar.monthrange(year, month)
        except ValueError as e:
            raise InvalidDateError(f"無法處理公曆 {year} 年 {month} 月: {e}") from e

        # monthrange 以週一為 0，轉為週日為 0
        start_weekday = (first_weekday + 1) % 7
        days = [GregorianDayRecord.placeholder() for _ in range(start_weekday)]

        for day in range(1, days_in_month + 1):
            lunar = self.provider.solar_to_lunar(year, month, day)
            day_count = self.provider.month_day_count(lunar.year, lunar.signed_month)
            info, holiday = self._annotate(
                lunar.year, lunar.month, lunar.day, lunar.is_leap_month, day_count
            )
            days.append(GregorianDayRecord(
                empty=False,
                gregorian_day=day,
                lunar_day_name=info.day_name,
                lunar_month_name=info.month_name,
                lunar_day=lunar.day,
                is_first_day_of_lunar_month=lunar.day == 1,
                jie_qi=info.jie_qi,
                holiday=holiday,
                lunar_year=lunar.year,
                lunar_month=lunar.month,
                is_leap_month=lunar.is_leap_month,
            ))
        return days

    def get_gan_zhi_year(self, year: int) -> str:
        """取得年干支，年份選單用"""
        return self.provider.day_info(year, 1, 1).gan_zhi_year


def get_calendar_service() -> CalendarService:
    """建立使用 lunar_python 轉換器的夏曆服務（FastAPI 依賴注入用）"""
    return CalendarService(LunarPythonProvider())
