"""應用程式設定模組

使用 pydantic-settings 管理應用程式配置，
支援從環境變數和 .env 檔案載入設定（前綴 XIALI_）。
"""

from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """應用程式設定類別

    Attributes:
        app_name: 應用程式名稱
        debug: 是否啟用除錯模式
        timezone: 判斷「今天」所用的時區
        year_select_span: 年份選單在當前年份前後各列出的年數
        cors_origins: 允許跨域的前端來源
    """

    app_name: str = "夏曆 API"
    debug: bool = False
    timezone: str = "Asia/Shanghai"
    year_select_span: int = 50
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    model_config = SettingsConfigDict(
        env_prefix="XIALI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def tzinfo(self) -> ZoneInfo:
        """設定時區的 ZoneInfo 物件"""
        return ZoneInfo(self.timezone)


# 全域設定實例
settings = Settings()
