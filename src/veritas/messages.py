"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: messages.py
@DateTime: 2026-10-16
@Docs: Diagnostic message templates keyed by failure kind.
按失败类型索引的诊断消息模板。

Placeholders are positional: ``{0}`` entity label, ``{1}`` first field label,
``{2}`` second field label or first value, then values in declaration order.
占位符按位置绑定：``{0}`` 实体标签，``{1}`` 第一个字段标签，
``{2}`` 第二个字段标签或第一个值，其后按声明顺序为取值。
"""

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from veritas.formatting import render_value

FIELD_PREFIX = 'Assertion failed for field: "{0}#{1}";\t'
FIELDS_PREFIX = 'Assertion failed for fields: "{0}#{1}" and "{0}#{2}";\t'


class FailureKind(StrEnum):
    """Closed set of assertion failure kinds.
    断言失败类型（封闭集合）。
    """

    NOT_NULL = "notNull"
    NULL = "null"
    XOR_NULL = "xorNull"
    XOR_NOT_NULL = "xorNotNull"
    OR_NULL = "orNull"
    OR_NOT_NULL = "orNotNull"
    BLANK = "blank"
    NOT_BLANK = "notBlank"
    EMPTY_STRING = "emptyString"
    NOT_EMPTY_STRING = "notEmptyString"
    WITHIN_MAX_LENGTH = "withinMaxLength"
    NOT_WITHIN_MAX_LENGTH = "notWithinMaxLength"
    MATCHES = "matches"
    NOT_MATCHES = "notMatches"
    EMPTY_COLLECTION = "emptyCollection"
    NOT_EMPTY_COLLECTION = "notEmptyCollection"
    CONTAINS_ALL = "containsAll"
    CONTAINS_ANY = "containsAny"
    CONTAINS_NONE = "containsNone"
    MATCHES_ALL = "matchesAll"
    MATCHES_ANY = "matchesAny"
    MATCHES_NONE = "matchesNone"
    EQUAL = "equal"
    NOT_EQUAL = "notEqual"
    EQUAL_STRING = "equalString"
    NOT_EQUAL_STRING = "notEqualString"
    EQUAL_DATE = "equalDateWithTolerance"
    NOT_EQUAL_DATE = "notEqualDateWithTolerance"
    EQUAL_WITH_ERROR = "equalWithError"
    NOT_EQUAL_WITH_ERROR = "notEqualWithError"
    GREATER_THAN = "greaterThan"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"


_TWO_FIELD_KINDS = frozenset(
    {
        FailureKind.XOR_NULL,
        FailureKind.XOR_NOT_NULL,
        FailureKind.OR_NULL,
        FailureKind.OR_NOT_NULL,
    }
)

_BODIES: dict[FailureKind, str] = {
    FailureKind.NOT_NULL: "Expected object to be non-null.",
    FailureKind.NULL: "Expected object to be null.",
    FailureKind.XOR_NULL: "Expected exactly 1 object to be null.",
    FailureKind.XOR_NOT_NULL: "Expected exactly 1 object to be non-null.",
    FailureKind.OR_NULL: "Expected either object to be null.",
    FailureKind.OR_NOT_NULL: "Expected either object to be non-null.",
    FailureKind.BLANK: 'Expected string["{2}"] to be blank, empty, or null.',
    FailureKind.NOT_BLANK: "Expected string to not be blank, empty, or null.",
    FailureKind.EMPTY_STRING: 'Expected string["{2}"] to be empty, or null.',
    FailureKind.NOT_EMPTY_STRING: "Expected string to not be empty, or null.",
    FailureKind.WITHIN_MAX_LENGTH: 'Expected string["{2}"] length[{3}] to be within length[{4}].',
    FailureKind.NOT_WITHIN_MAX_LENGTH: 'Expected string["{2}"] length[{3}] to exceed length[{4}].',
    FailureKind.MATCHES: 'Expected string["{2}"] to match pattern["{3}"].',
    FailureKind.NOT_MATCHES: 'Expected string["{2}"] to not match pattern["{3}"].',
    FailureKind.EMPTY_COLLECTION: "Expected collection[{2}] to be empty, or null.",
    FailureKind.NOT_EMPTY_COLLECTION: "Expected collection to not be empty, or null.",
    FailureKind.CONTAINS_ALL: "Expected collection[{2}] to contain all values of collection[{3}].",
    FailureKind.CONTAINS_ANY: "Expected collection[{2}] to contain any values of collection[{3}].",
    FailureKind.CONTAINS_NONE: "Expected collection[{2}] to contain no values of collection[{3}].",
    FailureKind.MATCHES_ALL: "Expected collection[{2}] to match all values.",
    FailureKind.MATCHES_ANY: "Expected collection[{2}] to match any values.",
    FailureKind.MATCHES_NONE: "Expected collection[{2}] to match no values.",
    FailureKind.EQUAL: "Actual[{2}]  Expected[{3}].",
    FailureKind.NOT_EQUAL: "Actual[{2}]  Expected[{3}].",
    FailureKind.EQUAL_STRING: 'Actual["{2}"]  Expected["{3}"].',
    FailureKind.NOT_EQUAL_STRING: 'Actual["{2}"]  Expected["{3}"].',
    FailureKind.EQUAL_DATE: "Actual[{2}]  [{4} s]  Expected[{3}].",
    FailureKind.NOT_EQUAL_DATE: "Actual[{2}]  [{4} s]  Expected[{3}].",
    FailureKind.EQUAL_WITH_ERROR: "Actual[{2}]  [{4}]  Expected[{3}].",
    FailureKind.NOT_EQUAL_WITH_ERROR: "Actual[{2}]  [{4}]  Expected[{3}].",
    FailureKind.GREATER_THAN: "Expected actual[{2}] with error[{4}] to be greater than bound[{3}].",
    FailureKind.GREATER_THAN_OR_EQUAL: "Expected actual[{2}] with error[{4}] to be greater than or equal to bound[{3}].",
    FailureKind.LESS_THAN: "Expected actual[{2}] with error[{4}] to be less than bound[{3}].",
    FailureKind.LESS_THAN_OR_EQUAL: "Expected actual[{2}] with error[{4}] to be less than or equal to bound[{3}].",
}

TEMPLATES: Mapping[FailureKind, str] = MappingProxyType(
    {kind: (FIELDS_PREFIX if kind in _TWO_FIELD_KINDS else FIELD_PREFIX) + body for kind, body in _BODIES.items()}
)


def template_for(kind: FailureKind | str) -> str:
    """Return the full template for a failure kind.
    返回失败类型对应的完整模板。

    Args:
        kind: Failure kind or its key (e.g. ``"blank"``).
            失败类型或其键（例如 ``"blank"``）。
    Returns:
        str: Template text including the field prefix.
            含字段前缀的模板文本。
    Raises:
        ValueError: When the key is unknown.
            键未知时抛出。
    """
    return TEMPLATES[FailureKind(kind)]


def format_message(kind: FailureKind | str, entity: Any, *args: Any) -> str:
    """Format a diagnostic message.
    格式化诊断消息。

    Every argument is rendered with render_value before substitution, so None
    becomes ``null`` and braces inside values are kept as-is.
    所有参数先经 render_value 渲染再代入：None 变为 ``null``，值中的花括号原样保留。

    Args:
        kind: Failure kind.
            失败类型。
        entity: Entity label (slot ``{0}``).
            实体标签（``{0}``）。
        *args: Field labels then values, in slot order.
            字段标签及取值（按槽位顺序）。
    Returns:
        str: Formatted message.
            格式化后的消息。

    Examples:
        >>> format_message(FailureKind.NOT_NULL, "User", "name")
        'Assertion failed for field: "User#name";\\tExpected object to be non-null.'
    """
    rendered = [render_value(entity), *(render_value(a) for a in args)]
    return template_for(kind).format(*rendered)
