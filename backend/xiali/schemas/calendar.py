"""夏曆 API Pydantic Schema 定義"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """API 回應包裝"""

    success: bool = Field(True, description="請求是否成功")
    data: Optional[T] = Field(None, description="回應資料")
    error: Optional[str] = Field(None, description="錯誤訊息")

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "data": {},
                "error": None
            }
        }


class LunarDateInfo(BaseModel):
    """農曆日期"""

    year: int = Field(..., description="農曆年")
    month: int = Field(..., description="農曆月 (1-12)")
    day: int = Field(..., description="農曆日")
    is_leap_month: bool = Field(False, description="是否閏月")

    model_config = ConfigDict(from_attributes=True)


class GregorianDateInfo(BaseModel):
    """公曆日期"""

    year: int = Field(..., description="公曆年")
    month: int = Field(..., description="公曆月")
    day: int = Field(..., description="公曆日")

    model_config = ConfigDict(from_attributes=True)


class TodayResponse(BaseModel):
    """今天的農曆與公曆日期"""

    lunar: LunarDateInfo = Field(..., description="農曆日期")
    gregorian: GregorianDateInfo = Field(..., description="公曆日期")
    lunar_month_name: str = Field(..., description="農曆月名")
    year_name: str = Field(..., description="干支生肖年名")


class MonthInfo(BaseModel):
    """農曆年中的一個月份"""

    month: int = Field(..., description="農曆月 (1-12)")
    is_leap_month: bool = Field(False, description="是否閏月")
    name: Optional[str] = Field(None, description="月名")

    model_config = ConfigDict(from_attributes=True)


class LunarDay(BaseModel):
    """農曆月曆中的一天"""

    lunar_day: int = Field(..., description="農曆日")
    lunar_day_name: str = Field(..., description="農曆日名")
    gregorian_year: int = Field(..., description="公曆年")
    gregorian_month: int = Field(..., description="公曆月")
    gregorian_day: int = Field(..., description="公曆日")
    jie_qi: Optional[str] = Field(None, description="節氣（如有）")
    holiday: Optional[str] = Field(None, description="節日（如有）")
    label: str = Field(..., description="格子副標")

    model_config = ConfigDict(from_attributes=True)


class GregorianDay(BaseModel):
    """公曆月曆中的一格"""

    empty: bool = Field(..., description="是否為空白佔位格")
    gregorian_day: Optional[int] = Field(None, description="公曆日")
    lunar_day_name: Optional[str] = Field(None, description="農曆日名")
    lunar_month_name: Optional[str] = Field(None, description="農曆月名")
    lunar_day: Optional[int] = Field(None, description="農曆日")
    is_first_day_of_lunar_month: bool = Field(False, description="是否為農曆初一")
    jie_qi: Optional[str] = Field(None, description="節氣（如有）")
    holiday: Optional[str] = Field(None, description="節日（如有）")
    lunar_year: Optional[int] = Field(None, description="農曆年")
    lunar_month: Optional[int] = Field(None, description="農曆月")
    is_leap_month: bool = Field(False, description="是否閏月")
    label: Optional[str] = Field(None, description="格子副標")

    model_config = ConfigDict(from_attributes=True)


class LunarMonthResponse(BaseModel):
    """農曆月曆"""

    year: int = Field(..., description="農曆年")
    month: int = Field(..., description="農曆月")
    is_leap_month: bool = Field(False, description="是否閏月")
    year_name: str = Field(..., description="干支生肖年名")
    huangdi_year: str = Field(..., description="黃帝紀年")
    month_name: str = Field(..., description="月名")
    days: list[LunarDay] = Field(..., description="逐日紀錄")

    class Config:
        json_schema_extra = {
            "example": {
                "year": 2024,
                "month": 8,
                "is_leap_month": False,
                "year_name": "甲辰年 (龙年)",
                "huangdi_year": "黄帝纪年4721年",
                "month_name": "八月",
                "days": [
                    {
                        "lunar_day": 15,
                        "lunar_day_name": "十五",
                        "gregorian_year": 2024,
                        "gregorian_month": 9,
                        "gregorian_day": 17,
                        "jie_qi": None,
                        "holiday": "中秋节",
                        "label": "中秋节"
                    }
                ]
            }
        }


class GregorianMonthResponse(BaseModel):
    """公曆月曆"""

    year: int = Field(..., description="公曆年")
    month: int = Field(..., description="公曆月")
    month_name: str = Field(..., description="月名")
    weekdays: list[str] = Field(..., description="星期表頭（週日在前）")
    days: list[GregorianDay] = Field(..., description="含空白佔位的逐日紀錄")


class YearInfoResponse(BaseModel):
    """農曆年資訊"""

    year: int = Field(..., description="農曆年")
    year_name: str = Field(..., description="干支生肖年名")
    gan_zhi: str = Field(..., description="年干支")
    huangdi_year: int = Field(..., description="黃帝紀年")
    leap_month: int = Field(..., description="閏月，0 表示無閏月")
    months: list[MonthInfo] = Field(..., description="月份序列")


class HolidayResponse(BaseModel):
    """節日查詢結果"""

    month: int = Field(..., description="農曆月")
    day: int = Field(..., description="農曆日")
    is_leap_month: bool = Field(..., description="是否閏月")
    holiday: Optional[str] = Field(None, description="節日（如有）")


class NavigationResponse(BaseModel):
    """換月結果"""

    year: int = Field(..., description="年")
    month: int = Field(..., description="月")
    is_leap_month: bool = Field(False, description="是否閏月（僅農曆）")


class OptionItem(BaseModel):
    """選單項目"""

    value: str = Field(..., description="選項值")
    label: str = Field(..., description="顯示文字")
