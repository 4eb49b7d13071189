"""图表 URL 服务层。

把扁平选项表（通常来自 API 请求体或配置文件）交给 ChartBuilder，
返回构建好的 URL 以及摘要信息；不发起任何 HTTP 请求。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gcharts.application.schemas.chart_url import ChartUrlRequest, ChartUrlResponse
from gcharts.application.services.gcharts.chart_builder import ChartBuilder
from gcharts.application.services.gcharts.presets import get_chart_class
from gcharts.shared.errors import AppError
from gcharts.shared.logging import get_logger, log_extra

log = get_logger(__name__)


class ChartUrlService:
    """图表 URL 服务类。"""

    def __init__(self, base_url: str | None = None):
        self.base_url = base_url

    def create_chart(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        preset: str | None = None,
        base_url: str | None = None,
    ) -> ChartBuilder:
        chart_class = get_chart_class(preset)
        chart = chart_class(base_url=base_url or self.base_url)
        if options:
            chart.set_options(options)
        return chart

    def build_url(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        preset: str | None = None,
        base_url: str | None = None,
    ) -> str:
        return self.create_chart(options, preset=preset, base_url=base_url).build()

    def handle(self, request: ChartUrlRequest) -> ChartUrlResponse:
        try:
            chart = self.create_chart(request.options, preset=request.preset, base_url=request.base_url)
            url = chart.build()
        except AppError as exc:
            log.warning(
                "chart_url.rejected",
                **log_extra(code=exc.code, preset=request.preset, details=exc.details),
            )
            raise

        log.info(
            "chart_url.built",
            **log_extra(preset=request.preset, chart_type=chart.get_type(), url_length=len(url)),
        )
        return ChartUrlResponse(
            url=url,
            type=chart.get_type() or "",
            width=chart.get_width() or 0,
            height=chart.get_height() or 0,
            series_count=len(chart.get_datas()),
        )
