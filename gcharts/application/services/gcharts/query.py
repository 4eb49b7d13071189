"""查询串片段拼装。

Image Charts 的 URL 由一串 `&key=value` 片段组成，顺序与分隔符都有意义：
- 片段内部的多值用 `,` 连接，多组之间用 `|` 连接；
- 复合样式参数（chdls / chts）按"槽位"拼接，缺失的前置槽位留空。
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Any
from urllib.parse import quote_plus

from gcharts.domain.option_store import OptionStore


def format_value(value: Any) -> str:
    """把单个值转成查询串文本（None -> ""，整值浮点去掉小数部分）。"""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, OptionStore):
        return ",".join(format_value(v) for v in value)
    if isinstance(value, (float, Decimal)):
        return format_number(float(value))
    return str(value)


def format_number(value: float) -> str:
    if value != value or value in (float("inf"), float("-inf")):
        return str(value).upper()
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return format(value, ".14G")


def to_float(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def is_set(value: Any) -> bool:
    """弱类型意义上的"有值"：None、空串、"0"、0 与空容器都算未设置。"""

    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def urlencode(text: str) -> str:
    """表单编码：空格转 `+`，除字母数字与 `-_.` 外一律百分号编码。"""

    return quote_plus(text, safe="").replace("~", "%7E")


def join_values(values: Iterable[Any], separator: str = ",") -> str:
    return separator.join(format_value(v) for v in values)


def multi_dimensional_to_string(groups: Iterable[OptionStore | Iterable[Any]]) -> str:
    """两层结构转字符串：组内逗号分隔，组间竖线分隔。"""

    rendered = []
    for group in groups:
        if isinstance(group, OptionStore):
            rendered.append(join_values(group.to_list()))
        else:
            rendered.append(join_values(group))
    return "|".join(rendered)


class CompositeParam:
    """按槽位拼接的复合参数，例如 `chts=<color>,<font-size>,<align>`。

    第一个出现的字段负责"开启"参数：前面每缺一个槽位补一个逗号；
    之后出现的字段只追加 `,<value>`。是否已开启用显式的布尔值记录。
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.opened = False
        self._text = ""

    def add(self, slot: int, value: Any) -> CompositeParam:
        if self.opened:
            self._text += "," + format_value(value)
        else:
            self._text = "," * slot + format_value(value)
            self.opened = True
        return self

    def value(self) -> str:
        return self._text


class QueryBuilder:
    """按调用顺序累积 `key=value` 片段，最终以 `?` / `&` 拼到基础地址后。"""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url
        self._fragments: list[tuple[str, str]] = []

    def add(self, key: str, value: Any) -> QueryBuilder:
        text = value if isinstance(value, str) else format_value(value)
        self._fragments.append((key, text))
        return self

    def add_composite(self, param: CompositeParam) -> QueryBuilder:
        if param.opened:
            self._fragments.append((param.name, param.value()))
        return self

    def fragments(self) -> list[tuple[str, str]]:
        return list(self._fragments)

    def to_url(self) -> str:
        query = "&".join(f"{key}={value}" for key, value in self._fragments)
        return f"{self.base_url}?{query}"
