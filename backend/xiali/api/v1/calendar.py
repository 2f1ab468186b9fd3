"""夏曆 API 路由"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from xiali.config import settings
from xiali.constants import GREGORIAN_MONTHS, WEEKDAYS
from xiali.exceptions import InvalidDateError
from xiali.schemas.calendar import (
    ApiResponse,
    GregorianDateInfo,
    GregorianDay,
    GregorianMonthResponse,
    HolidayResponse,
    LunarDateInfo,
    LunarDay,
    LunarMonthResponse,
    MonthInfo,
    NavigationResponse,
    OptionItem,
    TodayResponse,
    YearInfoResponse,
)
from xiali.services.calendar import CalendarService, get_calendar_service
from xiali.services.navigation import (
    ViewMode,
    month_options,
    step_gregorian_month,
    step_lunar_month,
    year_options,
)

router = APIRouter()


def _bad_date(e: InvalidDateError) -> HTTPException:
    """將 InvalidDateError 轉為 400 回應"""
    if settings.debug:
        print(f"日期無法解析: {e.message}")
    return HTTPException(status_code=400, detail=e.message)


@router.get(
    "/today",
    response_model=ApiResponse[TodayResponse],
    summary="取得今天的日期",
    description="取得今天的農曆與公曆日期"
)
async def get_today(
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[TodayResponse]:
    """取得今天的農曆與公曆日期"""
    lunar = service.get_current_lunar_date()
    gregorian = service.get_current_gregorian_date()

    return ApiResponse(
        success=True,
        data=TodayResponse(
            lunar=LunarDateInfo.model_validate(lunar),
            gregorian=GregorianDateInfo.model_validate(gregorian),
            lunar_month_name=service.get_chinese_month_name(lunar.month, lunar.is_leap_month),
            year_name=service.get_chinese_year_name(lunar.year),
        )
    )


@router.get(
    "/lunar/{year}/{month}",
    response_model=ApiResponse[LunarMonthResponse],
    summary="取得農曆月曆",
    description="取得指定農曆月的逐日紀錄，含公曆日期、節氣與節日"
)
async def get_lunar_month(
    year: int = Path(..., description="農曆年", example=2024),
    month: int = Path(..., ge=1, le=12, description="農曆月 (1-12)", example=8),
    leap: bool = Query(False, description="是否為閏月"),
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[LunarMonthResponse]:
    """取得農曆月曆

    Args:
        year: 農曆年
        month: 農曆月
        leap: 是否為閏月
    """
    try:
        days = service.get_lunar_month(year, month, leap)
        year_name = service.get_chinese_year_name(year)
    except InvalidDateError as e:
        raise _bad_date(e)

    return ApiResponse(
        success=True,
        data=LunarMonthResponse(
            year=year,
            month=month,
            is_leap_month=leap,
            year_name=year_name,
            huangdi_year=service.get_huangdi_year(year),
            month_name=service.get_chinese_month_name(month, leap),
            days=[LunarDay.model_validate(d) for d in days],
        )
    )


@router.get(
    "/gregorian/{year}/{month}",
    response_model=ApiResponse[GregorianMonthResponse],
    summary="取得公曆月曆",
    description="取得指定公曆月的逐日紀錄，月初以空白格對齊星期"
)
async def get_gregorian_month(
    year: int = Path(..., description="公曆年", example=2024),
    month: int = Path(..., ge=1, le=12, description="公曆月 (1-12)", example=2),
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[GregorianMonthResponse]:
    """取得公曆月曆"""
    try:
        days = service.get_gregorian_month(year, month)
    except InvalidDateError as e:
        raise _bad_date(e)

    return ApiResponse(
        success=True,
        data=GregorianMonthResponse(
            year=year,
            month=month,
            month_name=GREGORIAN_MONTHS[month - 1],
            weekdays=WEEKDAYS,
            days=[GregorianDay.model_validate(d) for d in days],
        )
    )


@router.get(
    "/years/{year}",
    response_model=ApiResponse[YearInfoResponse],
    summary="取得農曆年資訊",
    description="取得干支、生肖、黃帝紀年、閏月與月份序列"
)
async def get_year_info(
    year: int = Path(..., description="農曆年", example=2025),
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[YearInfoResponse]:
    """取得農曆年資訊"""
    try:
        months = service.get_months_in_year(year)
        year_name = service.get_chinese_year_name(year)
        gan_zhi = service.get_gan_zhi_year(year)
    except InvalidDateError as e:
        raise _bad_date(e)

    leap_month = next((m.month for m in months if m.is_leap_month), 0)
    return ApiResponse(
        success=True,
        data=YearInfoResponse(
            year=year,
            year_name=year_name,
            gan_zhi=gan_zhi,
            huangdi_year=service.get_huangdi_year_number(year),
            leap_month=leap_month,
            months=[
                MonthInfo(
                    month=m.month,
                    is_leap_month=m.is_leap_month,
                    name=service.get_chinese_month_name(m.month, m.is_leap_month),
                )
                for m in months
            ],
        )
    )


@router.get(
    "/holiday",
    response_model=ApiResponse[HolidayResponse],
    summary="查詢農曆節日",
    description="依農曆月、日與該月天數判斷節日（含除夕）"
)
async def get_holiday(
    month: int = Query(..., ge=1, le=12, description="農曆月"),
    day: int = Query(..., ge=1, le=30, description="農曆日"),
    day_count: int = Query(..., ge=29, le=30, description="該月天數"),
    leap: bool = Query(False, description="是否為閏月"),
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[HolidayResponse]:
    """查詢農曆節日"""
    return ApiResponse(
        success=True,
        data=HolidayResponse(
            month=month,
            day=day,
            is_leap_month=leap,
            holiday=service.get_lunar_holiday(month, day, leap, day_count),
        )
    )


@router.get(
    "/navigate/lunar",
    response_model=ApiResponse[NavigationResponse],
    summary="農曆換月",
    description="從指定農曆月前後移動，跨年與閏月自動處理"
)
async def navigate_lunar(
    year: int = Query(..., description="農曆年"),
    month: int = Query(..., ge=1, le=12, description="農曆月"),
    leap: bool = Query(False, description="是否為閏月"),
    direction: int = Query(1, description="移動月數，負數往前"),
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[NavigationResponse]:
    """農曆換月"""
    try:
        new_year, target = step_lunar_month(service, year, month, leap, direction)
    except InvalidDateError as e:
        raise _bad_date(e)

    return ApiResponse(
        success=True,
        data=NavigationResponse(
            year=new_year,
            month=target.month,
            is_leap_month=target.is_leap_month,
        )
    )


@router.get(
    "/navigate/gregorian",
    response_model=ApiResponse[NavigationResponse],
    summary="公曆換月"
)
async def navigate_gregorian(
    year: int = Query(..., description="公曆年"),
    month: int = Query(..., ge=1, le=12, description="公曆月"),
    direction: int = Query(1, description="移動月數，負數往前"),
) -> ApiResponse[NavigationResponse]:
    """公曆換月"""
    new_year, new_month = step_gregorian_month(year, month, direction)
    return ApiResponse(
        success=True,
        data=NavigationResponse(year=new_year, month=new_month)
    )


@router.get(
    "/options/years",
    response_model=ApiResponse[list[OptionItem]],
    summary="年份選單",
    description="以指定年份為中心的年份選單，附干支與黃帝紀年"
)
async def get_year_options(
    year: int = Query(..., description="中心年份"),
    mode: ViewMode = Query(ViewMode.LUNAR, description="檢視模式"),
    span: Optional[int] = Query(None, ge=0, le=200, description="前後年數，預設依設定"),
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[list[OptionItem]]:
    """年份選單"""
    if span is None:
        span = settings.year_select_span
    try:
        options = year_options(service, year, mode, span)
    except InvalidDateError as e:
        raise _bad_date(e)

    return ApiResponse(
        success=True,
        data=[OptionItem(value=str(o.year), label=o.label) for o in options]
    )


@router.get(
    "/options/months",
    response_model=ApiResponse[list[OptionItem]],
    summary="月份選單",
    description="農曆依該年月份序列（含閏月），公曆固定 12 個月"
)
async def get_month_options(
    year: int = Query(..., description="年份"),
    mode: ViewMode = Query(ViewMode.LUNAR, description="檢視模式"),
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[list[OptionItem]]:
    """月份選單"""
    try:
        options = month_options(service, year, mode)
    except InvalidDateError as e:
        raise _bad_date(e)

    return ApiResponse(
        success=True,
        data=[OptionItem(value=o.value, label=o.label) for o in options]
    )
