"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-16
@Docs: Value formatters for diagnostic messages.
诊断消息取值格式化器。
"""

from veritas.formatting.base import ValueFormatter
from veritas.formatting.builtins import (
    NULL_TEXT,
    SELF_COLLECTION_TEXT,
    SELF_MAP_TEXT,
    BoolFormatter,
    CollectionFormatter,
    DateFormatter,
    DatetimeFormatter,
    DecimalFormatter,
    EnumFormatter,
    FloatFormatter,
    MappingFormatter,
    render_value,
)

__all__ = [
    "NULL_TEXT",
    "SELF_COLLECTION_TEXT",
    "SELF_MAP_TEXT",
    "BoolFormatter",
    "CollectionFormatter",
    "DateFormatter",
    "DatetimeFormatter",
    "DecimalFormatter",
    "EnumFormatter",
    "FloatFormatter",
    "MappingFormatter",
    "ValueFormatter",
    "render_value",
]
