"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-16
@Docs: Pure predicate primitives consumed by the checker.
校验器使用的纯谓词原语。
"""

from veritas.predicates.containers import (
    Matcher,
    contains_all_values,
    contains_any_values,
    contains_no_values,
    matches_all_values,
    matches_any_values,
    matches_no_values,
)
from veritas.predicates.equality import (
    epoch_seconds,
    is_equal_collection,
    is_equal_date_with_tolerance,
    is_equal_object,
    is_equal_string,
    is_equal_with_error,
)
from veritas.predicates.nulls import is_null, or_not_null, or_null, xor_null
from veritas.predicates.ordering import (
    is_greater_than_or_equal_with_error,
    is_greater_than_with_error,
    is_less_than_or_equal_with_error,
    is_less_than_with_error,
)
from veritas.predicates.strings import is_blank, is_empty, is_within_max_length, matches

__all__ = [
    "Matcher",
    "contains_all_values",
    "contains_any_values",
    "contains_no_values",
    "epoch_seconds",
    "is_blank",
    "is_empty",
    "is_equal_collection",
    "is_equal_date_with_tolerance",
    "is_equal_object",
    "is_equal_string",
    "is_equal_with_error",
    "is_greater_than_or_equal_with_error",
    "is_greater_than_with_error",
    "is_less_than_or_equal_with_error",
    "is_less_than_with_error",
    "is_null",
    "is_within_max_length",
    "matches",
    "matches_all_values",
    "matches_any_values",
    "matches_no_values",
    "or_not_null",
    "or_null",
    "xor_null",
]
