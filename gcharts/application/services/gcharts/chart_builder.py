"""图表 URL 构建器。

`ChartBuilder` 持有一组图表选项（每组一个 OptionStore），setter 在赋值时立即校验，
`build()` 只读取当前状态并拼出完整的 Image Charts URL，不产生任何副作用。

用法：
    url = (
        ChartBuilder()
        .set_type("lc")
        .set_width(300)
        .set_height(200)
        .set_datas([1, 2, 3])
        .build()
    )
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from gcharts.domain.option_store import OptionStore
from gcharts.shared.config import get_settings
from gcharts.shared.logging import get_logger

from .errors import IncompleteChartError, UnknownOptionError
from .query import (
    CompositeParam,
    QueryBuilder,
    format_value,
    is_set,
    multi_dimensional_to_string,
    to_float,
    urlencode,
)
from .validators import (
    as_collection,
    as_sequence,
    is_scalar,
    parse_bool,
    parse_int,
    validate_colors,
    validate_labels,
    validate_labels_options,
    validate_series,
    validate_title_options,
)

log = get_logger(__name__)


MARGIN_KEYS = ("top", "bottom", "left", "right", "legend-width", "legend-height")

# 透明背景：bg 纯色填充 + 00 alpha
TRANSPARENT_FILL = "bg,s,65432100"


class ChartBuilder:
    def __init__(self, *, base_url: str | None = None) -> None:
        self.base_url = base_url or get_settings().chart_base_url

        self._type: str | None = None
        self._width: int | None = None
        self._height: int | None = None
        self._datas = OptionStore()
        self._labels = OptionStore()
        self._labels_options = OptionStore()
        self._colors = OptionStore()
        self._title: str | None = None
        self._title_options = OptionStore()
        self._transparency = False
        self._margins = OptionStore(dict.fromkeys(MARGIN_KEYS))
        self._fill = OptionStore()
        self._line_fill: list[OptionStore] | None = None
        self._line_style: list[OptionStore] | None = None
        self._axis_tick_mark_style: list[OptionStore] | None = None
        self._custom_scaling: str | None = None
        self._visible_axis: str | None = None
        self._axis_label_styles: str | None = None
        self._chart_legend_position: str | None = None

        self.set_options(self.get_default_options())

    # ============== 批量选项 ==============

    def get_default_options(self) -> dict[str, Any]:
        """子类覆盖以预置选项（构造时通过 set_options 应用）。"""
        return {}

    def set_options(self, options: Mapping[str, Any]) -> ChartBuilder:
        for option, value in options.items():
            setter = OPTION_SETTERS.get(option)
            if setter is None:
                log.warning("chart.option_rejected", extra={"option": option})
                raise UnknownOptionError(option=option, setter=setter_name(option))
            setter(self, value)
        return self

    # ============== 构建 ==============

    def build(self) -> str:
        if not is_set(self._type):
            raise IncompleteChartError("type")
        if self._datas.is_empty():
            raise IncompleteChartError("datas")
        if not self._width:
            raise IncompleteChartError("width")
        if not self._height:
            raise IncompleteChartError("height")

        query = QueryBuilder(self.base_url)
        query.add("cht", self._type)
        query.add("chs", f"{self._width}x{self._height}")

        if self._line_style:
            query.add("chls", multi_dimensional_to_string(self._line_style))

        query.add("chd", "t:" + "|".join(",".join(format_value(v) for v in series) for series in self._datas))

        if not self._colors.is_empty():
            separator = "," if self._type == "lc" else "|"
            query.add("chco", separator.join(format_value(c) for c in self._colors))

        if self._transparency:
            query.add("chf", TRANSPARENT_FILL)
        elif not self._fill.is_empty():
            fill_type = "c" if self._fill.get("type") == "chart" else "bg"
            query.add("chf", f"{fill_type},s,{format_value(self._fill.get('color'))}")

        if self._line_fill:
            query.add("chm", multi_dimensional_to_string(self._line_fill))

        if not self._labels.is_empty():
            self._add_labels(query)

        if is_set(self._title):
            self._add_title(query)

        margins = [self._margins.get(key) for key in MARGIN_KEYS]
        if any(is_set(m) for m in margins):
            query.add("chma", ",".join(format_value(to_float(m)) for m in margins))

        if is_set(self._custom_scaling):
            query.add("chds", self._custom_scaling)
        if is_set(self._visible_axis):
            query.add("chxt", self._visible_axis)
        if is_set(self._axis_label_styles):
            query.add("chxs", self._axis_label_styles)
        # 与标签位置的 chdlp 可能重复，两者都保留，由接收方决定
        if is_set(self._chart_legend_position):
            query.add("chdlp", self._chart_legend_position)

        if self._axis_tick_mark_style:
            query.add("chxtc", multi_dimensional_to_string(self._axis_tick_mark_style))

        url = query.to_url()
        log.debug(
            "chart.build",
            extra={"chart_type": self._type, "fragments": len(query.fragments()), "url_length": len(url)},
        )
        return url

    def _add_labels(self, query: QueryBuilder) -> None:
        options = self._labels_options
        query.add("chl", "|".join(format_value(label) for label in self._labels))

        if is_set(options.get("position")):
            query.add("chdlp", options.get("position"))

        style = CompositeParam("chdls")
        if is_set(options.get("color")):
            style.add(0, options.get("color"))
        if is_set(options.get("font-size")):
            style.add(1, options.get("font-size"))
        query.add_composite(style)

    def _add_title(self, query: QueryBuilder) -> None:
        options = self._title_options
        query.add("chtt", urlencode(self._title or ""))

        style = CompositeParam("chts")
        if is_set(options.get("color")):
            style.add(0, options.get("color"))
        if is_set(options.get("font-size")):
            style.add(1, options.get("font-size"))
        if is_set(options.get("text-align")):
            style.add(2, options.get("text-align"))
        query.add_composite(style)

    # ============== 基本属性 ==============

    def get_type(self) -> str | None:
        return self._type

    def set_type(self, chart_type: Any) -> ChartBuilder:
        self._type = "" if chart_type is None else str(chart_type)
        return self

    def get_width(self) -> int | None:
        return self._width

    def set_width(self, width: Any) -> ChartBuilder:
        self._width = parse_int(width, field="width")
        return self

    def get_height(self) -> int | None:
        return self._height

    def set_height(self, height: Any) -> ChartBuilder:
        self._height = parse_int(height, field="height")
        return self

    # ============== 数据与标签 ==============

    def get_datas(self) -> OptionStore:
        return self._datas

    def set_datas(self, *series: Iterable[Any]) -> ChartBuilder:
        """注册一个或多个数据序列（整体替换已有数据）。"""
        validated = [validate_series(s) for s in series]
        self._datas = OptionStore(OptionStore(values) for values in validated)
        return self

    def get_labels(self) -> OptionStore:
        return self._labels

    def set_labels(self, labels: Iterable[Any]) -> ChartBuilder:
        labels = as_sequence(labels, field="labels")
        validate_labels(labels)
        self._labels = OptionStore(labels)
        return self

    def get_labels_options(self) -> OptionStore:
        return self._labels_options

    def set_labels_options(self, labels_options: Mapping[str, Any]) -> ChartBuilder:
        validate_labels_options(labels_options)
        self._labels_options = OptionStore(labels_options)
        return self

    def get_colors(self) -> OptionStore:
        return self._colors

    def set_colors(self, colors: Iterable[Any]) -> ChartBuilder:
        colors = as_sequence(colors, field="colors")
        validate_colors(colors)
        self._colors = OptionStore(colors)
        return self

    # ============== 标题 ==============

    def get_title(self) -> str | None:
        return self._title

    def set_title(self, title: Any) -> ChartBuilder:
        self._title = "" if title is None else str(title)
        return self

    def get_title_options(self) -> OptionStore:
        return self._title_options

    def set_title_options(self, title_options: Mapping[str, Any]) -> ChartBuilder:
        validate_title_options(title_options)
        self._title_options = OptionStore(title_options)
        return self

    # ============== 填充与边距 ==============

    def is_transparent(self) -> bool:
        return self._transparency

    def get_transparency(self) -> bool:
        return self._transparency

    def set_transparency(self, transparency: Any) -> ChartBuilder:
        self._transparency = parse_bool(transparency, field="transparency")
        return self

    def get_margins(self) -> OptionStore:
        return self._margins

    def set_margins(self, margins: Mapping[str, Any]) -> ChartBuilder:
        self._margins = OptionStore(as_collection(margins, field="margins"))
        return self

    def get_fill(self) -> OptionStore:
        return self._fill

    def set_fill(self, fill: Mapping[str, Any]) -> ChartBuilder:
        self._fill = OptionStore(as_collection(fill, field="fill"))
        return self

    # ============== 多维样式组 ==============

    def get_line_fill(self) -> list[OptionStore] | None:
        return self._line_fill

    def set_line_fill(self, line_fills: Iterable[Any]) -> ChartBuilder:
        self._line_fill = _to_groups(line_fills, field="line_fill")
        return self

    def get_line_style(self) -> list[OptionStore] | None:
        return self._line_style

    def set_line_style(self, line_styles: Iterable[Any]) -> ChartBuilder:
        self._line_style = _to_groups(line_styles, field="line_style")
        return self

    def get_axis_tick_mark_style(self) -> list[OptionStore] | None:
        return self._axis_tick_mark_style

    def set_axis_tick_mark_style(self, axis_tick_mark_styles: Iterable[Any]) -> ChartBuilder:
        self._axis_tick_mark_style = _to_groups(axis_tick_mark_styles, field="axis_tick_mark_style")
        return self

    # ============== 透传参数（不做校验） ==============

    def get_custom_scaling(self) -> str | None:
        return self._custom_scaling

    def set_custom_scaling(self, custom_scaling: str | None) -> ChartBuilder:
        self._custom_scaling = custom_scaling
        return self

    def get_visible_axis(self) -> str | None:
        return self._visible_axis

    def set_visible_axis(self, visible_axis: str | None) -> ChartBuilder:
        self._visible_axis = visible_axis
        return self

    def get_axis_label_styles(self) -> str | None:
        return self._axis_label_styles

    def set_axis_label_styles(self, axis_label_styles: str | None) -> ChartBuilder:
        self._axis_label_styles = axis_label_styles
        return self

    def get_chart_legend_position(self) -> str | None:
        return self._chart_legend_position

    def set_chart_legend_position(self, chart_legend_position: str | None) -> ChartBuilder:
        self._chart_legend_position = chart_legend_position
        return self


def _to_groups(groups: Iterable[Any], *, field: str) -> list[OptionStore]:
    # 标量 / 字符串组（如 "3,6,3"）视为只有一个值的组
    return [
        OptionStore([group] if is_scalar(group) else group)
        for group in as_sequence(groups, field=field)
    ]


def _apply_datas(chart: ChartBuilder, value: Any) -> ChartBuilder:
    """平铺的数字列表是一个序列；列表的列表按多个序列展开。"""

    series = as_sequence(value, field="datas")
    if series and all(is_scalar(v) for v in series):
        return chart.set_datas(series)
    return chart.set_datas(*series)


def setter_name(option: str) -> str:
    return "set_" + "_".join(part for part in str(option).split("_") if part)


OptionSetter = Callable[[ChartBuilder, Any], ChartBuilder]

# 选项名 -> setter 的静态映射；调用实例方法，子类覆盖的 setter 同样生效
OPTION_SETTERS: dict[str, OptionSetter] = {
    "type": lambda chart, value: chart.set_type(value),
    "width": lambda chart, value: chart.set_width(value),
    "height": lambda chart, value: chart.set_height(value),
    "datas": lambda chart, value: _apply_datas(chart, value),
    "labels": lambda chart, value: chart.set_labels(value),
    "labels_options": lambda chart, value: chart.set_labels_options(value),
    "colors": lambda chart, value: chart.set_colors(value),
    "title": lambda chart, value: chart.set_title(value),
    "title_options": lambda chart, value: chart.set_title_options(value),
    "transparency": lambda chart, value: chart.set_transparency(value),
    "margins": lambda chart, value: chart.set_margins(value),
    "fill": lambda chart, value: chart.set_fill(value),
    "line_fill": lambda chart, value: chart.set_line_fill(value),
    "line_style": lambda chart, value: chart.set_line_style(value),
    "axis_tick_mark_style": lambda chart, value: chart.set_axis_tick_mark_style(value),
    "custom_scaling": lambda chart, value: chart.set_custom_scaling(value),
    "visible_axis": lambda chart, value: chart.set_visible_axis(value),
    "axis_label_styles": lambda chart, value: chart.set_axis_label_styles(value),
    "chart_legend_position": lambda chart, value: chart.set_chart_legend_position(value),
}
