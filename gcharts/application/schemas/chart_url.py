"""图表 URL 构建 Pydantic 模型。"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ChartUrlRequest(BaseModel):
    """图表 URL 构建请求。"""

    preset: str | None = Field(
        None,
        max_length=32,
        description="预置图表类型: line, sparkline, bar, horizontal_bar, pie, pie_3d（可选）",
    )
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="扁平选项表，键为 snake_case 选项名（type, width, height, datas, labels ...）",
    )
    base_url: str | None = Field(None, max_length=2048, description="覆盖默认的图表服务地址（可选）")


class ChartUrlResponse(BaseModel):
    """图表 URL 构建响应。"""

    url: str = Field(..., description="完整的图表图片 URL")
    type: str = Field(..., description="图表类型代码")
    width: int = Field(..., description="宽度")
    height: int = Field(..., description="高度")
    series_count: int = Field(..., description="数据序列数")
