"""曆法轉換器

定義夏曆服務所需的轉換能力（CalendarProvider），
並以 lunar_python 庫提供預設實作：
- 公曆 / 農曆互轉
- 農曆月天數
- 閏月查詢
- 干支、生肖、中文日名與節氣
"""

from typing import Protocol

from lunar_python import Lunar, LunarMonth, LunarYear, Solar

from xiali.exceptions import InvalidDateError
from xiali.models.calendar import GregorianDate, LunarDate, LunarDayInfo


class CalendarProvider(Protocol):
    """曆法轉換能力

    月份參數採帶號編碼：負數代表該月的閏月。
    無法解析的日期一律以 InvalidDateError 回報。
    """

    def solar_to_lunar(self, year: int, month: int, day: int) -> LunarDate: ...

    def lunar_to_solar(self, year: int, month: int, day: int) -> GregorianDate: ...

    def month_day_count(self, year: int, month: int) -> int: ...

    def leap_month(self, year: int) -> int: ...

    def day_info(self, year: int, month: int, day: int) -> LunarDayInfo: ...


class LunarPythonProvider:
    """以 lunar_python 實作的曆法轉換器"""

    def _lunar_month(self, year: int, month: int) -> LunarMonth:
        try:
            lunar_month = LunarMonth.fromYm(year, month)
        except Exception as e:
            raise InvalidDateError(f"無法取得農曆 {year} 年 {month} 月: {e}") from e
        if lunar_month is None:
            kind = f"闰{abs(month)}" if month < 0 else str(month)
            raise InvalidDateError(f"農曆 {year} 年沒有 {kind} 月")
        return lunar_month

    def _lunar(self, year: int, month: int, day: int) -> Lunar:
        day_count = self._lunar_month(year, month).getDayCount()
        if day < 1 or day > day_count:
            raise InvalidDateError(
                f"農曆 {year} 年 {month} 月只有 {day_count} 天，無第 {day} 天"
            )
        try:
            return Lunar.fromYmd(year, month, day)
        except Exception as e:
            raise InvalidDateError(f"無法解析農曆日期 {year}-{month}-{day}: {e}") from e

    def solar_to_lunar(self, year: int, month: int, day: int) -> LunarDate:
        try:
            lunar = Solar.fromYmd(year, month, day).getLunar()
        except Exception as e:
            raise InvalidDateError(f"無法解析公曆日期 {year}-{month}-{day}: {e}") from e
        return LunarDate(
            year=lunar.getYear(),
            month=abs(lunar.getMonth()),
            day=lunar.getDay(),
            is_leap_month=lunar.getMonth() < 0,
        )

    def lunar_to_solar(self, year: int, month: int, day: int) -> GregorianDate:
        solar = self._lunar(year, month, day).getSolar()
        return GregorianDate(
            year=solar.getYear(),
            month=solar.getMonth(),
            day=solar.getDay(),
        )

    def month_day_count(self, year: int, month: int) -> int:
        return self._lunar_month(year, month).getDayCount()

    def leap_month(self, year: int) -> int:
        try:
            return LunarYear.fromYear(year).getLeapMonth()
        except Exception as e:
            raise InvalidDateError(f"無法取得農曆 {year} 年資料: {e}") from e

    def day_info(self, year: int, month: int, day: int) -> LunarDayInfo:
        lunar = self._lunar(year, month, day)
        # lunar_python 以空字串表示非節氣日
        jie_qi = lunar.getJieQi()
        return LunarDayInfo(
            gan_zhi_year=lunar.getYearInGanZhi(),
            zodiac=lunar.getYearShengXiao(),
            day_name=lunar.getDayInChinese(),
            month_name=lunar.getMonthInChinese(),
            jie_qi=jie_qi if jie_qi else None,
        )
