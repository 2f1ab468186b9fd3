"""測試共用 Fixtures"""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from xiali.exceptions import InvalidDateError
from xiali.models.calendar import GregorianDate, LunarDate, LunarDayInfo
from xiali.services.calendar import CalendarService
from xiali.services.provider import LunarPythonProvider


class FakeProvider:
    """測試用轉換器

    每個年份的月份天數由 months 指定（鍵為帶號月份），
    公曆日期以流水號對應，方便驗證規則而不依賴真實曆法。
    """

    def __init__(self, months: dict[int, dict[int, int]]):
        self.months = months

    def _day_count(self, year: int, month: int) -> int:
        try:
            return self.months[year][month]
        except KeyError:
            raise InvalidDateError(f"fake: no month {month} in {year}") from None

    def solar_to_lunar(self, year: int, month: int, day: int) -> LunarDate:
        return LunarDate(year=year, month=month, day=day)

    def lunar_to_solar(self, year: int, month: int, day: int) -> GregorianDate:
        self._day_count(year, month)
        return GregorianDate(year=year, month=abs(month), day=day)

    def month_day_count(self, year: int, month: int) -> int:
        return self._day_count(year, month)

    def leap_month(self, year: int) -> int:
        leaps = [-m for m in self.months.get(year, {}) if m < 0]
        return leaps[0] if leaps else 0

    def day_info(self, year: int, month: int, day: int) -> LunarDayInfo:
        self._day_count(year, month)
        return LunarDayInfo(
            gan_zhi_year="甲子",
            zodiac="鼠",
            day_name=f"D{day}",
            month_name=f"M{month}",
            jie_qi="立春" if (month, day) == (1, 3) else None,
        )


def _regular_year(last_month_days: int = 29, leap: int = 0) -> dict[int, int]:
    months = {m: 30 if m % 2 else 29 for m in range(1, 12)}
    months[12] = last_month_days
    if leap:
        months[-leap] = 29
    return months


@pytest.fixture
def fake_provider() -> FakeProvider:
    """2000 年腊月 29 天、2001 年閏腊月、2002 年腊月 30 天且閏五月"""
    return FakeProvider({
        2000: _regular_year(29),
        2001: _regular_year(30, leap=12),
        2002: _regular_year(30, leap=5),
    })


@pytest.fixture
def fake_service(fake_provider: FakeProvider) -> CalendarService:
    return CalendarService(fake_provider)


@pytest.fixture
def fixed_now() -> datetime:
    """2024 年春節當天中午"""
    return datetime(2024, 2, 10, 12, 0, tzinfo=ZoneInfo("Asia/Shanghai"))


@pytest.fixture
def service(fixed_now: datetime) -> CalendarService:
    """使用 lunar_python 的夏曆服務，時間固定於 fixed_now"""
    return CalendarService(LunarPythonProvider(), clock=lambda: fixed_now)
