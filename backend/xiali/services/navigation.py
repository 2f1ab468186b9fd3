"""月曆導覽

前端共用的換月、換年與選單邏輯：
- 農曆月前後切換（跨年、閏月）
- 公曆月前後切換
- 換年時修正不存在的閏月
- 年份 / 月份選單項目
- 是否正在顯示今天所在的月份
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from xiali.constants import GREGORIAN_MONTHS
from xiali.exceptions import InvalidDateError
from xiali.models.calendar import GregorianDate, LunarDate, MonthDescriptor
from xiali.services.calendar import CalendarService


class ViewMode(str, Enum):
    """月曆檢視模式"""
    LUNAR = "lunar"
    GREGORIAN = "gregorian"


@dataclass(frozen=True)
class YearOption:
    """年份選單項目"""
    year: int
    label: str


@dataclass(frozen=True)
class MonthOption:
    """月份選單項目"""
    value: str                   # 農曆 "6-false" / "6-true"，公曆 "6"
    label: str
    month: int
    is_leap_month: bool = False


def _lunar_step(
    service: CalendarService,
    year: int,
    current: MonthDescriptor,
    step: int,
) -> tuple[int, MonthDescriptor]:
    months = service.get_months_in_year(year)
    try:
        index = months.index(current)
    except ValueError:
        kind = "闰" if current.is_leap_month else ""
        raise InvalidDateError(f"農曆 {year} 年沒有{kind}{current.month}月") from None

    new_index = index + step
    if new_index < 0:
        # 上一年的最後一個月，可能是閏腊月
        return year - 1, service.get_months_in_year(year - 1)[-1]
    if new_index >= len(months):
        return year + 1, MonthDescriptor(month=1, is_leap_month=False)
    return year, months[new_index]


def step_lunar_month(
    service: CalendarService,
    year: int,
    month: int,
    is_leap_month: bool,
    direction: int,
) -> tuple[int, MonthDescriptor]:
    """農曆月前後切換

    Args:
        service: 夏曆服務
        year: 目前的農曆年
        month: 目前的農曆月 (1-12)
        is_leap_month: 目前是否為閏月
        direction: 移動的月數，負數往前

    Returns:
        (農曆年, 月份)

    Raises:
        InvalidDateError: 目前的月份不存在於該年
    """
    current = MonthDescriptor(month=month, is_leap_month=is_leap_month)
    step = 1 if direction > 0 else -1
    for _ in range(abs(direction)):
        year, current = _lunar_step(service, year, current, step)
    return year, current


def step_gregorian_month(year: int, month: int, direction: int) -> tuple[int, int]:
    """公曆月前後切換，跨年時調整年份"""
    index = year * 12 + (month - 1) + direction
    return index // 12, index % 12 + 1


def select_lunar_year(
    service: CalendarService,
    year: int,
    month: int,
    is_leap_month: bool,
) -> MonthDescriptor:
    """切換農曆年，若新年份沒有該閏月則改為同月份的平月"""
    current = MonthDescriptor(month=month, is_leap_month=is_leap_month)
    if current in service.get_months_in_year(year):
        return current
    return MonthDescriptor(month=month, is_leap_month=False)


def year_options(
    service: CalendarService,
    center_year: int,
    view_mode: ViewMode,
    span: int,
) -> list[YearOption]:
    """年份選單：以 center_year 為中心，前後各 span 年"""
    options = []
    for year in range(center_year - span, center_year + span + 1):
        gan_zhi = service.get_gan_zhi_year(year)
        huangdi = service.get_huangdi_year_number(year)
        if view_mode == ViewMode.LUNAR:
            label = f"{huangdi}年 (公历{year}, {gan_zhi})"
        else:
            label = f"{year}年 (黄帝{huangdi}, {gan_zhi})"
        options.append(YearOption(year=year, label=label))
    return options


def month_options(
    service: CalendarService,
    year: int,
    view_mode: ViewMode,
) -> list[MonthOption]:
    """月份選單：農曆依該年月份序列（含閏月），公曆固定 12 個月"""
    if view_mode == ViewMode.GREGORIAN:
        return [
            MonthOption(value=str(i), label=name, month=i)
            for i, name in enumerate(GREGORIAN_MONTHS, start=1)
        ]

    return [
        MonthOption(
            value=f"{m.month}-{'true' if m.is_leap_month else 'false'}",
            label=service.get_chinese_month_name(m.month, m.is_leap_month),
            month=m.month,
            is_leap_month=m.is_leap_month,
        )
        for m in service.get_months_in_year(year)
    ]


def parse_month_option(value: str) -> MonthDescriptor:
    """解析農曆月份選單的值，如 "6-true"

    Raises:
        ValueError: 格式錯誤
    """
    month, _, leap = value.partition("-")
    if leap not in ("true", "false"):
        raise ValueError(f"月份選項格式錯誤: {value}")
    return MonthDescriptor(month=int(month), is_leap_month=leap == "true")


def is_showing_today(
    view_mode: ViewMode,
    year: int,
    month: int,
    is_leap_month: bool = False,
    today_lunar: Optional[LunarDate] = None,
    today_gregorian: Optional[GregorianDate] = None,
) -> bool:
    """目前顯示的月份是否包含今天"""
    if view_mode == ViewMode.LUNAR:
        return (
            today_lunar is not None
            and year == today_lunar.year
            and month == today_lunar.month
            and is_leap_month == today_lunar.is_leap_month
        )
    return (
        today_gregorian is not None
        and year == today_gregorian.year
        and month == today_gregorian.month
    )
