"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: strings.py
@DateTime: 2026-10-16
@Docs: String shape predicates.
字符串形态谓词。

Absent strings satisfy the emptiness family (empty/blank/max length) and never
match a pattern.
缺失字符串满足空值类判定（空/空白/最大长度），且永远不匹配正则。
"""

import re
from collections.abc import Sized

_BLANK = re.compile(r"^\s*$", re.DOTALL)


def is_empty(actual: Sized | None) -> bool:
    """Return True if the value is None or has length 0.
    值为 None 或长度为 0 时返回 True。

    Works for strings and collections alike.
    同时适用于字符串与集合。
    """
    return actual is None or len(actual) == 0


def is_blank(actual: str | None) -> bool:
    """Return True if the string is None, empty or whitespace only.
    字符串为 None、空串或仅含空白字符时返回 True。
    """
    return actual is None or _BLANK.fullmatch(actual) is not None


def is_within_max_length(actual: str | None, max_length: int) -> bool:
    """Return True if the string is None or no longer than max_length.
    字符串为 None 或长度不超过 max_length 时返回 True。
    """
    if actual is None:
        return True
    return len(actual) <= max_length


def matches(actual: str | None, pattern: str | re.Pattern[str]) -> bool:
    """Return True if the whole string matches the regular expression.
    整个字符串匹配正则表达式时返回 True。

    Args:
        actual: String under test (None never matches).
            待校验字符串（None 永不匹配）。
        pattern: Regex text or compiled pattern.
            正则文本或已编译的正则。

    Raises:
        re.error: When the pattern is malformed.
            正则表达式非法时抛出。
    """
    if actual is None:
        return False
    return re.fullmatch(pattern, actual) is not None
