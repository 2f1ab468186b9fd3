"""夏曆 API 測試"""

from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi.testclient import TestClient

from xiali.main import app
from xiali.services.calendar import CalendarService, get_calendar_service
from xiali.services.provider import LunarPythonProvider


FIXED_NOW = datetime(2024, 2, 10, 12, 0, tzinfo=ZoneInfo("Asia/Shanghai"))


def override_get_calendar_service() -> CalendarService:
    """覆蓋夏曆服務依賴，固定「今天」"""
    return CalendarService(LunarPythonProvider(), clock=lambda: FIXED_NOW)


app.dependency_overrides[get_calendar_service] = override_get_calendar_service
client = TestClient(app)


def test_health():
    """測試健康檢查"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_today():
    """測試取得今天的日期"""
    response = client.get("/api/v1/calendar/today")
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert data["data"]["lunar"] == {"year": 2024, "month": 1, "day": 1, "is_leap_month": False}
    assert data["data"]["gregorian"] == {"year": 2024, "month": 2, "day": 10}
    assert data["data"]["lunar_month_name"] == "正月"
    assert data["data"]["year_name"] == "甲辰年 (龙年)"


def test_get_lunar_month():
    """測試農曆月曆"""
    response = client.get("/api/v1/calendar/lunar/2024/8")
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["month_name"] == "八月"
    assert data["huangdi_year"] == "黄帝纪年4721年"
    assert data["year_name"] == "甲辰年 (龙年)"

    day = data["days"][14]
    assert day["lunar_day"] == 15
    assert day["holiday"] == "中秋节"
    assert day["label"] == "中秋节"
    assert (day["gregorian_month"], day["gregorian_day"]) == (9, 17)


def test_get_leap_lunar_month():
    """測試閏月月曆"""
    response = client.get("/api/v1/calendar/lunar/2025/6?leap=true")
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["is_leap_month"] is True
    assert data["month_name"] == "闰六月"
    assert all(d["holiday"] is None for d in data["days"])


def test_get_missing_leap_month():
    """不存在的閏月回傳 400"""
    response = client.get("/api/v1/calendar/lunar/2024/6?leap=true")
    assert response.status_code == 400
    assert "2024" in response.json()["detail"]


def test_get_lunar_month_out_of_range():
    """月份超出 1-12 由參數驗證擋下"""
    response = client.get("/api/v1/calendar/lunar/2024/13")
    assert response.status_code == 422


def test_get_gregorian_month():
    """測試公曆月曆"""
    response = client.get("/api/v1/calendar/gregorian/2024/2")
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["month_name"] == "二月"
    assert data["weekdays"] == ["日", "一", "二", "三", "四", "五", "六"]

    days = data["days"]
    assert len(days) == 4 + 29
    assert all(d["empty"] for d in days[:4])
    assert days[4]["gregorian_day"] == 1

    new_year = days[4 + 9]
    assert new_year["gregorian_day"] == 10
    assert new_year["holiday"] == "春节"
    assert new_year["is_first_day_of_lunar_month"] is True


def test_get_year_info():
    """測試農曆年資訊"""
    response = client.get("/api/v1/calendar/years/2025")
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["gan_zhi"] == "乙巳"
    assert data["huangdi_year"] == 4722
    assert data["leap_month"] == 6
    assert len(data["months"]) == 13
    assert data["months"][6] == {"month": 6, "is_leap_month": True, "name": "闰六月"}


def test_get_holiday():
    """測試節日查詢（除夕）"""
    response = client.get("/api/v1/calendar/holiday?month=12&day=29&day_count=29")
    assert response.status_code == 200
    assert response.json()["data"]["holiday"] == "除夕"

    response = client.get("/api/v1/calendar/holiday?month=12&day=29&day_count=30")
    assert response.json()["data"]["holiday"] is None

    response = client.get("/api/v1/calendar/holiday?month=1&day=1&day_count=30&leap=true")
    assert response.json()["data"]["holiday"] is None


def test_navigate_lunar():
    """測試農曆換月"""
    response = client.get("/api/v1/calendar/navigate/lunar?year=2025&month=6&direction=1")
    assert response.status_code == 200
    assert response.json()["data"] == {"year": 2025, "month": 6, "is_leap_month": True}

    response = client.get("/api/v1/calendar/navigate/lunar?year=2024&month=1&direction=-1")
    assert response.json()["data"] == {"year": 2023, "month": 12, "is_leap_month": False}


def test_navigate_lunar_missing_month():
    """從不存在的閏月換月回傳 400"""
    response = client.get("/api/v1/calendar/navigate/lunar?year=2024&month=6&leap=true")
    assert response.status_code == 400


def test_navigate_gregorian():
    """測試公曆換月"""
    response = client.get("/api/v1/calendar/navigate/gregorian?year=2024&month=12&direction=1")
    assert response.status_code == 200
    assert response.json()["data"] == {"year": 2025, "month": 1, "is_leap_month": False}


def test_year_options():
    """測試年份選單"""
    response = client.get("/api/v1/calendar/options/years?year=2024&mode=gregorian&span=1")
    assert response.status_code == 200

    data = response.json()["data"]
    assert [o["value"] for o in data] == ["2023", "2024", "2025"]
    assert data[1]["label"] == "2024年 (黄帝4721, 甲辰)"


def test_month_options():
    """測試月份選單"""
    response = client.get("/api/v1/calendar/options/months?year=2023&mode=lunar")
    assert response.status_code == 200

    data = response.json()["data"]
    assert len(data) == 13
    assert data[2] == {"value": "2-true", "label": "闰二月"}
