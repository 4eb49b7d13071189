"""图表选项校验。

每个校验函数只检查、不修改；失败时抛出 ChartValidationError。
setter 必须先完整校验、再整体替换字段，保证失败时不会留下部分修改。
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from gcharts.domain.option_store import OptionStore

from .errors import ChartValidationError


LABEL_POSITIONS = ("b", "bv", "t", "tv", "r", "l")
TITLE_ALIGNMENTS = ("left", "center", "right")

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_COLOR_RE = re.compile(r"^[a-f0-9]{6}$", re.IGNORECASE)
_STYLE_COLOR_RE = re.compile(r"^[a-f0-9]{6,8}$", re.IGNORECASE)

_TRUE_TEXT = {"1", "true", "yes", "on"}
_FALSE_TEXT = {"", "0", "false", "no", "off"}


def type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, (float, Decimal)):
        return "double"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def is_numeric(value: Any) -> bool:
    """数字或可解析为数字的字符串（bool 不算数字）。"""

    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    if isinstance(value, str):
        return bool(_NUMERIC_RE.fullmatch(value))
    return False


def parse_int(value: Any, *, field: str) -> int:
    """把 int / 浮点 / 数字字符串解析为 int，无法解析时直接失败。"""

    if isinstance(value, bool):
        raise ChartValidationError(
            f"The chart {field} must be an integer (boolean given).",
            details={"field": field},
        )
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)) or (isinstance(value, str) and is_numeric(value)):
        try:
            return _to_int(value)
        except (ValueError, OverflowError):
            # inf / nan / 超出浮点范围的文本（如 "1e400"）
            raise ChartValidationError(
                f"The chart {field} must be a finite number ({value!r} given).",
                details={"field": field},
            ) from None
    raise ChartValidationError(
        f"The chart {field} must be an integer ({type_name(value)} given).",
        details={"field": field},
    )


def _to_int(value: float | Decimal | str) -> int:
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            value = float(text)
    return int(value)


def parse_bool(value: Any, *, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float, Decimal)):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().casefold()
        if normalized in _TRUE_TEXT:
            return True
        if normalized in _FALSE_TEXT:
            return False
    raise ChartValidationError(
        f"The chart {field} must be a boolean ({value!r} given).",
        details={"field": field},
    )


def as_sequence(value: Any, *, field: str) -> list[Any]:
    """把 list / tuple / Mapping（取 values）等展开为列表，字符串与标量直接失败。"""

    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ChartValidationError(
            f"The chart {field} must be an array ({type_name(value)} given).",
            details={"field": field},
        )
    if isinstance(value, Mapping):
        return list(value.values())
    return list(value)


def is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bytes)) or not isinstance(value, Iterable)


def as_mapping(value: Any, *, field: str) -> Mapping[Any, Any]:
    """Mapping 原样返回；OptionStore（getter 的返回值）转为 dict，其余直接失败。"""

    if isinstance(value, OptionStore):
        return value.to_dict()
    if not isinstance(value, Mapping):
        raise ChartValidationError(
            f"The chart {field} must be a key/value mapping ({type_name(value)} given).",
            details={"field": field},
        )
    return value


def as_collection(value: Any, *, field: str) -> Mapping[Any, Any] | list[Any]:
    """结构类选项：接受 Mapping / OptionStore / 非字符串序列。"""

    if isinstance(value, (OptionStore, Mapping)):
        return as_mapping(value, field=field)
    return as_sequence(value, field=field)


def validate_series(series: Any) -> list[Any]:
    values = as_sequence(series, field="datas")
    for value in values:
        if not is_numeric(value):
            raise ChartValidationError(
                f"Datas must be numbers ({type_name(value)} given)",
                details={"field": "datas"},
            )
    return values


def validate_labels(labels: Iterable[Any]) -> None:
    for label in labels:
        if not is_numeric(label) and not isinstance(label, str):
            raise ChartValidationError(
                f"Labels must be numbers or strings ({type_name(label)} given)",
                details={"field": "labels"},
            )


def validate_colors(colors: Iterable[Any]) -> None:
    for color in colors:
        if not isinstance(color, str):
            raise ChartValidationError(
                f"A color must be a string ({type_name(color)} given).",
                details={"field": "colors"},
            )
        if not _COLOR_RE.fullmatch(color):
            raise ChartValidationError(
                f'A color must be a hexadecimal string ("{color}" given).',
                details={"field": "colors", "value": color},
            )


def validate_labels_options(options: Mapping[str, Any]) -> None:
    for option, value in as_mapping(options, field="labels_options").items():
        if option == "position":
            if not isinstance(value, str):
                raise ChartValidationError(
                    f"The label position must be a string ({type_name(value)} given)",
                    details={"field": "labels_options", "option": option},
                )
            if value not in LABEL_POSITIONS:
                raise ChartValidationError(
                    f'Unknown label position "{value}". Valid positions are : {", ".join(LABEL_POSITIONS)}.',
                    details={"field": "labels_options", "option": option},
                )
        elif option == "color":
            _check_style_color(value, subject="label")
        elif option == "font-size":
            _check_font_size(value, subject="label")
        else:
            raise ChartValidationError(
                f'Unknown label option "{option}". Valid options are : position, color, font-size.',
                details={"field": "labels_options", "option": option},
            )


def validate_title_options(options: Mapping[str, Any]) -> None:
    for option, value in as_mapping(options, field="title_options").items():
        if option == "text-align":
            if not isinstance(value, str):
                raise ChartValidationError(
                    f"The title position must be a string ({type_name(value)} given)",
                    details={"field": "title_options", "option": option},
                )
            if value not in TITLE_ALIGNMENTS:
                raise ChartValidationError(
                    f'Unknown title position "{value}". Valid positions are : {", ".join(TITLE_ALIGNMENTS)}.',
                    details={"field": "title_options", "option": option},
                )
        elif option == "color":
            _check_style_color(value, subject="title")
        elif option == "font-size":
            _check_font_size(value, subject="title")
        else:
            raise ChartValidationError(
                f'Unknown title option "{option}". Valid options are : text-align, color, font-size.',
                details={"field": "title_options", "option": option},
            )


def _check_style_color(value: Any, *, subject: str) -> None:
    field = f"{subject}s_options" if subject == "label" else f"{subject}_options"
    if not isinstance(value, str):
        raise ChartValidationError(
            f"The {subject} color must be a string ({type_name(value)} given)",
            details={"field": field, "option": "color"},
        )
    if not _STYLE_COLOR_RE.fullmatch(value):
        raise ChartValidationError(
            f'The {subject} color must be a hexadecimal value ("{value}" given).',
            details={"field": field, "option": "color"},
        )


def _check_font_size(value: Any, *, subject: str) -> None:
    if not is_numeric(value):
        field = f"{subject}s_options" if subject == "label" else f"{subject}_options"
        raise ChartValidationError(
            f"The {subject} font size must be numeric ({type_name(value)} given).",
            details={"field": field, "option": "font-size"},
        )
