"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: builtins.py
@DateTime: 2026-10-16
@Docs: Built-in formatters and the canonical value renderer.
内置格式化器与统一取值渲染函数。

Rendering never depends on the process locale, and braces inside values are
kept verbatim because values are substituted after template parsing.
渲染结果不受进程 locale 影响；值在模板解析之后才被代入，值中的花括号原样保留。
"""

import threading
from collections.abc import Iterable, Iterator, Mapping, Sized
from contextlib import contextmanager
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any

from veritas.formatting.base import ValueFormatter

NULL_TEXT = "null"
SELF_COLLECTION_TEXT = "(this Collection)"
SELF_MAP_TEXT = "(this Map)"

_local = threading.local()


@contextmanager
def _rendering(container: Any) -> Iterator[bool]:
    """Track containers on the current render stack; yield True when already on it."""
    active: set[int] | None = getattr(_local, "active", None)
    if active is None:
        active = _local.active = set()
    key = id(container)
    if key in active:
        yield True
        return
    active.add(key)
    try:
        yield False
    finally:
        active.discard(key)


class BoolFormatter(ValueFormatter[bool]):
    """Formatter for bool values.
    布尔类型格式化器。
    """

    def format(self, value: bool) -> str:
        return "true" if value else "false"


class FloatFormatter(ValueFormatter[float]):
    """Formatter for float values (shortest round-trip text).
    浮点数格式化器（最短往返文本）。
    """

    def format(self, value: float) -> str:
        return repr(value)


class DecimalFormatter(ValueFormatter[Decimal]):
    """Formatter for Decimal values.
    Decimal 类型格式化器。
    """

    def format(self, value: Decimal) -> str:
        if not value.is_finite():
            return str(value)
        exponent = value.as_tuple().exponent
        if isinstance(exponent, int) and exponent < 0:
            return format(value, "f").rstrip("0").rstrip(".")
        return str(value)


class DatetimeFormatter(ValueFormatter[datetime]):
    """Formatter for datetime values; a zero UTC offset is written as ``Z``.
    日期时间格式化器；零时区偏移写作 ``Z``。
    """

    def format(self, value: datetime) -> str:
        text = value.isoformat()
        if value.utcoffset() == timedelta(0) and text.endswith("+00:00"):
            return f"{text[:-6]}Z"
        return text


class DateFormatter(ValueFormatter[date]):
    """Formatter for date values.
    日期格式化器。
    """

    def format(self, value: date) -> str:
        return value.isoformat()


class EnumFormatter(ValueFormatter[Enum]):
    """Formatter for Enum members (renders the member value).
    枚举格式化器（渲染成员值）。
    """

    def format(self, value: Enum) -> str:
        return render_value(value.value)


class MappingFormatter(ValueFormatter[Mapping[Any, Any]]):
    """Formatter for mappings: ``{k=v, k2=v2}``.
    映射格式化器：``{k=v, k2=v2}``。

    A mapping that contains itself renders the inner occurrence as ``(this Map)``.
    包含自身的映射中，内部出现处渲染为 ``(this Map)``。
    """

    def format(self, value: Mapping[Any, Any]) -> str:
        with _rendering(value) as nested:
            if nested:
                return SELF_MAP_TEXT
            items = ", ".join(f"{render_value(k)}={render_value(v)}" for k, v in value.items())
            return f"{{{items}}}"


class CollectionFormatter(ValueFormatter[Iterable[Any]]):
    """Formatter for sized iterables: ``[a, b]``.
    集合格式化器：``[a, b]``。

    A collection that contains itself renders the inner occurrence as ``(this Collection)``.
    包含自身的集合中，内部出现处渲染为 ``(this Collection)``。
    """

    def format(self, value: Iterable[Any]) -> str:
        with _rendering(value) as nested:
            if nested:
                return SELF_COLLECTION_TEXT
            return f"[{', '.join(render_value(v) for v in value)}]"


# Order matters: bool before int-like checks, datetime before date.
_FORMATTERS: tuple[tuple[type, ValueFormatter[Any]], ...] = (
    (bool, BoolFormatter()),
    (float, FloatFormatter()),
    (Decimal, DecimalFormatter()),
    (datetime, DatetimeFormatter()),
    (date, DateFormatter()),
    (Enum, EnumFormatter()),
    (Mapping, MappingFormatter()),
)
_COLLECTION_FORMATTER = CollectionFormatter()


def render_value(value: Any) -> str:
    """Render a value as diagnostic message text.
    将值渲染为诊断消息文本。

    Args:
        value: Any value; None renders as ``null``.
            任意值；None 渲染为 ``null``。
    Returns:
        str: Rendered text.
            渲染后的文本。

    Examples:
        >>> render_value(None)
        'null'
        >>> render_value(["x", "y"])
        '[x, y]'
    """
    if value is None:
        return NULL_TEXT
    if isinstance(value, str):
        return value
    for kind, formatter in _FORMATTERS:
        if isinstance(value, kind):
            return formatter.format(value)
    if isinstance(value, (bytes, bytearray)):
        return str(value)
    if isinstance(value, Iterable) and isinstance(value, Sized):
        return _COLLECTION_FORMATTER.format(value)
    return str(value)
