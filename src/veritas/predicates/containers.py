"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: containers.py
@DateTime: 2026-10-16
@Docs: Collection containment and matching predicates.
集合包含与匹配谓词。
"""

from collections.abc import Callable, Collection
from typing import Any

from veritas.predicates.strings import is_empty

type Matcher = Callable[[Any], bool]


def contains_all_values(actual: Collection[Any] | None, expected: Collection[Any] | None) -> bool:
    """Return True if actual contains every value of expected.
    actual 包含 expected 的全部值时返回 True。

    Edge rules / 边界规则:
        - actual empty: True only if expected is empty too.
          actual 为空：仅当 expected 也为空时返回 True。
        - expected empty: True.
          expected 为空：返回 True。
    """
    if is_empty(actual):
        return is_empty(expected)
    if is_empty(expected):
        return True
    return all(v in actual for v in expected)


def contains_any_values(actual: Collection[Any] | None, expected: Collection[Any] | None) -> bool:
    """Return True if actual shares at least one value with expected.
    actual 与 expected 至少共享一个值时返回 True。

    Empty inputs follow the same edge rules as contains_all_values.
    空输入的边界规则与 contains_all_values 相同。
    """
    if is_empty(actual):
        return is_empty(expected)
    if is_empty(expected):
        return True
    return any(v in expected for v in actual)


def contains_no_values(actual: Collection[Any] | None, expected: Collection[Any] | None) -> bool:
    """Negation of contains_any_values.
    contains_any_values 的取反。
    """
    return not contains_any_values(actual, expected)


def matches_all_values(actual: Collection[Any] | None, matcher: Matcher | None) -> bool:
    """Return True if the matcher holds for every element.
    matcher 对所有元素成立时返回 True。

    Empty collections and a missing matcher both yield True.
    空集合或缺失 matcher 时返回 True。
    """
    if is_empty(actual) or matcher is None:
        return True
    return all(matcher(v) for v in actual)


def matches_any_values(actual: Collection[Any] | None, matcher: Matcher | None) -> bool:
    """Return True if the matcher holds for at least one element.
    matcher 对至少一个元素成立时返回 True。

    Empty collections and a missing matcher both yield True.
    空集合或缺失 matcher 时返回 True。
    """
    if is_empty(actual) or matcher is None:
        return True
    return any(matcher(v) for v in actual)


def matches_no_values(actual: Collection[Any] | None, matcher: Matcher | None) -> bool:
    """Negation of matches_any_values (so an empty collection yields False).
    matches_any_values 的取反（因此空集合返回 False）。
    """
    return not matches_any_values(actual, matcher)
