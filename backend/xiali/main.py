"""FastAPI 應用程式入口"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from xiali.api.v1 import calendar
from xiali.config import settings

app = FastAPI(
    title=settings.app_name,
    description="農曆 / 公曆雙曆月曆 API",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """健康檢查端點"""
    return {"status": "ok", "version": "0.1.0"}


# 註冊 API 路由
app.include_router(
    calendar.router,
    prefix="/api/v1/calendar",
    tags=["calendar"]
)
