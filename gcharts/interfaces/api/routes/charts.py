"""图表 URL 构建 API 路由。"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gcharts.application.schemas.chart_url import ChartUrlRequest, ChartUrlResponse
from gcharts.application.services.chart_url_service import ChartUrlService
from gcharts.shared.config import get_settings

router = APIRouter()


def get_chart_url_service() -> ChartUrlService:
    return ChartUrlService(base_url=get_settings().chart_base_url)


@router.post(
    "/charts/url",
    response_model=ChartUrlResponse,
    summary="构建图表 URL",
    description="按扁平选项表校验并序列化图表配置，返回图表图片 URL（不请求图表服务）。",
)
def build_chart_url(
    payload: ChartUrlRequest,
    service: ChartUrlService = Depends(get_chart_url_service),
):
    return service.handle(payload)
