"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: equality.py
@DateTime: 2026-10-16
@Docs: Equality predicates, including tolerance-based date and float checks.
相等性谓词（含带容差的日期与浮点比较）。
"""

from collections.abc import Collection
from datetime import UTC, datetime, timedelta
from typing import Any

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_SECOND = timedelta(seconds=1)


def is_equal_object(actual: Any, expected: Any) -> bool:
    """Return True if both are None, or expected equals actual.
    两者均为 None，或 expected 等于 actual 时返回 True。
    """
    if expected is None:
        return actual is None
    return bool(expected == actual)


def is_equal_collection(actual: Collection[Any] | None, expected: Collection[Any] | None) -> bool:
    """Element-wise equality under the container's own equality.
    按容器自身的相等语义逐元素比较。
    """
    return is_equal_object(actual, expected)


def is_equal_string(actual: str | None, expected: str | None, case_sensitive: bool = True) -> bool:
    """String equality, case-sensitive or not.
    字符串相等（可选大小写敏感）。

    Args:
        actual: Actual string.
            实际字符串。
        expected: Expected string.
            期望字符串。
        case_sensitive: Compare case-sensitively (default True).
            是否区分大小写（默认 True）。

    Case-insensitive comparison works character by character, so ``"ß"`` does not
    equal ``"SS"``.
    忽略大小写时逐字符比较，因此 ``"ß"`` 不等于 ``"SS"``。
    """
    if expected is None:
        return actual is None
    if actual is None:
        return False
    if case_sensitive:
        return expected == actual
    if len(expected) != len(actual):
        return False
    return all(_same_char_ignoring_case(e, a) for e, a in zip(expected, actual))


def _same_char_ignoring_case(left: str, right: str) -> bool:
    return left == right or left.upper() == right.upper() or left.lower() == right.lower()


def epoch_seconds(value: datetime) -> int:
    """Whole seconds since the Unix epoch, floored.
    距 Unix 纪元的整秒数（向下取整）。

    Naive datetimes are read as civil time at offset zero.
    无时区的 datetime 按零时区偏移解释。
    """
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=UTC)
    return (value - _EPOCH) // _SECOND


def is_equal_date_with_tolerance(actual: datetime | None, expected: datetime | None, tolerance: int) -> bool:
    """Return True if two datetimes differ by at most tolerance whole seconds.
    两个 datetime 相差不超过 tolerance 整秒时返回 True。

    Args:
        actual: Actual datetime.
            实际时间。
        expected: Expected datetime.
            期望时间。
        tolerance: Allowed difference in seconds (non-negative).
            允许的秒数差（非负）。
    Returns:
        bool: True when both are None; False when exactly one is None.
            两者均为 None 返回 True；仅一个为 None 返回 False。
    """
    if expected is None:
        return actual is None
    if actual is None:
        return False
    return abs(epoch_seconds(expected) - epoch_seconds(actual)) <= tolerance


def is_equal_with_error(actual: float, expected: float, epsilon: float) -> bool:
    """Return True if ``|actual - expected| <= epsilon``.
    ``|actual - expected| <= epsilon`` 时返回 True。
    """
    return abs(expected - actual) <= epsilon
