"""常用图表类型的预置构建器。

每个预置类只覆盖 `get_default_options()`，构造时由 ChartBuilder 通过 set_options 应用；
之后调用方仍可用 setter 或 set_options 覆盖任意字段。
"""

from __future__ import annotations

from typing import Any

from .chart_builder import ChartBuilder
from .errors import UnknownOptionError


class LineChart(ChartBuilder):
    def get_default_options(self) -> dict[str, Any]:
        return {"type": "lc"}


class SparklineChart(ChartBuilder):
    def get_default_options(self) -> dict[str, Any]:
        return {"type": "ls"}


class BarChart(ChartBuilder):
    """竖向堆叠柱状图。"""

    def get_default_options(self) -> dict[str, Any]:
        return {"type": "bvs"}


class HorizontalBarChart(ChartBuilder):
    def get_default_options(self) -> dict[str, Any]:
        return {"type": "bhs"}


class PieChart(ChartBuilder):
    def get_default_options(self) -> dict[str, Any]:
        return {"type": "p"}


class Pie3DChart(ChartBuilder):
    def get_default_options(self) -> dict[str, Any]:
        return {"type": "p3"}


CHART_PRESETS: dict[str, type[ChartBuilder]] = {
    "line": LineChart,
    "sparkline": SparklineChart,
    "bar": BarChart,
    "horizontal_bar": HorizontalBarChart,
    "pie": PieChart,
    "pie_3d": Pie3DChart,
}


def get_chart_class(preset: str | None) -> type[ChartBuilder]:
    if preset is None or preset == "":
        return ChartBuilder
    chart_class = CHART_PRESETS.get(preset.strip().lower())
    if chart_class is None:
        raise UnknownOptionError(option=f"preset:{preset}", setter=f"{preset}_chart")
    return chart_class
