"""图表 URL 构建错误定义。

所有错误都是同步、不可恢复的调用方错误，统一以 500 上报。
"""

from __future__ import annotations

from typing import Any

from gcharts.shared.errors import AppError


ERROR_CHART_UNKNOWN_OPTION = "chart_unknown_option"
ERROR_CHART_VALIDATION = "chart_validation_error"
ERROR_CHART_INCOMPLETE = "chart_incomplete"


class UnknownOptionError(AppError):
    """批量选项中出现了没有对应 setter 的选项名。"""

    def __init__(
        self,
        option: str,
        setter: str,
        status_code: int = 500,
        code: str = ERROR_CHART_UNKNOWN_OPTION,
    ):
        super().__init__(
            message=f'Unknown chart option "{option}" or chart method "{setter}()"',
            status_code=status_code,
            code=code,
            details={"option": option, "setter": setter},
        )


class ChartValidationError(AppError):
    """setter 收到不符合格式 / 枚举 / 类型约束的值。"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: str = ERROR_CHART_VALIDATION,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            status_code=status_code,
            code=code,
            details=details,
        )


class IncompleteChartError(AppError):
    """build() 时缺少必填字段（type / datas / width / height）。"""

    def __init__(
        self,
        field: str,
        status_code: int = 500,
        code: str = ERROR_CHART_INCOMPLETE,
    ):
        super().__init__(
            message=f"A chart must have {_FIELD_PHRASES.get(field, field)}.",
            status_code=status_code,
            code=code,
            details={"field": field},
        )


_FIELD_PHRASES = {
    "type": "a type",
    "datas": "datas",
    "width": "a width",
    "height": "a height",
}
