from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CHART_BASE_URL = "http://chart.googleapis.com/chart"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GCHARTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_host: str = "127.0.0.1"
    api_port: int = 7910

    log_level: str = "INFO"

    # 图表服务入口（生成 URL 的固定前缀，不带查询串）
    chart_base_url: str = DEFAULT_CHART_BASE_URL


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings_for_tests() -> None:
    """仅用于测试：清空配置缓存，便于使用 monkeypatch 设置环境变量。"""
    global _settings
    _settings = None
