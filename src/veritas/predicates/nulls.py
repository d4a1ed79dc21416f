"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: nulls.py
@DateTime: 2026-10-16
@Docs: Nullability predicates.
空值判定谓词。
"""

from typing import Any


def is_null(actual: Any) -> bool:
    """Return True if the value is absent.
    值缺失（None）时返回 True。
    """
    return actual is None


def xor_null(actual1: Any, actual2: Any) -> bool:
    """Return True if exactly one of the values is absent.
    恰好一个值缺失时返回 True。
    """
    return (actual1 is None) ^ (actual2 is None)


def or_null(actual1: Any, actual2: Any) -> bool:
    """Return True if at least one of the values is absent.
    至少一个值缺失时返回 True。
    """
    return actual1 is None or actual2 is None


def or_not_null(actual1: Any, actual2: Any) -> bool:
    """Return True if at least one of the values is present.
    至少一个值存在时返回 True。
    """
    return actual1 is not None or actual2 is not None
