from __future__ import annotations

from fastapi import APIRouter

from gcharts.shared.config import get_settings


router = APIRouter()


@router.get("/health")
def health():
    settings = get_settings()
    return {
        "status": "ok",
        "version": "0.1.0",
        "components": {
            "chart_builder": True,
        },
        "info": {
            "chart_builder": {
                "base_url": settings.chart_base_url,
                "description": "图表 URL 构建（仅生成 URL，不请求图表服务）",
            },
        },
    }
