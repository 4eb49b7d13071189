"""有序选项容器（Option Store）。

图表的每一组选项（标签、颜色、边距、填充、标题样式……）都保存在一个
`OptionStore` 中：键唯一、保留插入顺序，插入顺序即序列化顺序。
容器本身不做任何校验，校验由图表构建器的 setter 负责。
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any


class OptionStore:
    """有序 key -> value 容器，value 可以是数字、字符串或嵌套的 OptionStore。

    - 传入 Mapping 时保留原键；
    - 传入其他可迭代对象时按位置生成 0..n-1 的整数键。
    """

    __slots__ = ("_items",)

    def __init__(self, initial: Mapping[Any, Any] | Iterable[Any] | None = None) -> None:
        self._items: dict[Any, Any] = {}
        self.replace(initial)

    def replace(self, initial: Mapping[Any, Any] | Iterable[Any] | None) -> OptionStore:
        if initial is None:
            items: dict[Any, Any] = {}
        elif isinstance(initial, OptionStore):
            items = dict(initial.to_items())
        elif isinstance(initial, Mapping):
            items = dict(initial.items())
        elif isinstance(initial, (str, bytes)):
            raise TypeError("OptionStore expects a mapping or a sequence of values, not a string")
        else:
            items = dict(enumerate(initial))
        self._items = items
        return self

    def get(self, key: Any, default: Any = None) -> Any:
        return self._items.get(key, default)

    def is_empty(self) -> bool:
        return not self._items

    def keys(self) -> list[Any]:
        return list(self._items.keys())

    def to_list(self) -> list[Any]:
        return list(self._items.values())

    def to_items(self) -> list[tuple[Any, Any]]:
        return list(self._items.items())

    def to_dict(self) -> dict[Any, Any]:
        return dict(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items.values())

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OptionStore):
            return self.to_items() == other.to_items()
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OptionStore({self._items!r})"
