"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: ordering.py
@DateTime: 2026-10-16
@Docs: Ordering predicates with a tolerance.
带容差的大小比较谓词。
"""


def is_greater_than_with_error(actual: float, bound: float, epsilon: float) -> bool:
    """``actual - epsilon > bound``."""
    return actual - epsilon > bound


def is_greater_than_or_equal_with_error(actual: float, bound: float, epsilon: float) -> bool:
    """``actual + epsilon >= bound``."""
    return actual + epsilon >= bound


def is_less_than_with_error(actual: float, bound: float, epsilon: float) -> bool:
    """``actual + epsilon < bound``."""
    return actual + epsilon < bound


def is_less_than_or_equal_with_error(actual: float, bound: float, epsilon: float) -> bool:
    """``actual - epsilon <= bound``."""
    return actual - epsilon <= bound
