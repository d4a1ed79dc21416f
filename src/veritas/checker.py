"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: checker.py
@DateTime: 2026-10-16
@Docs: Fluent checker that accumulates assertion failures for one entity.
针对单个实体累积断言失败的流式校验器。

Every assertion is evaluated eagerly. A failure records one formatted message
and, when a correlation value is given, that value. ``throwing`` raises one
composite failure built from everything recorded, or returns when nothing
failed.
每个断言立即求值。失败时记录一条格式化消息，若提供了关联值则一并记录。
``throwing`` 根据累积内容构造并抛出一个组合异常；没有失败时正常返回。

Examples:
        >>> from veritas import CompositeError, for_checking
        >>> for_checking("User").if_not_blank("name", "alice", 1).throwing(CompositeError)
"""

import inspect
import logging
import re
from collections.abc import Callable, Collection, Sized
from datetime import datetime
from typing import Any, Generic, Self, TypeVar

from veritas import predicates
from veritas.config import VeritasConfig, default_config
from veritas.exceptions import CheckerFinalizedError, CompositeError
from veritas.messages import FailureKind, format_message
from veritas.predicates import Matcher

log = logging.getLogger(__name__)

S = TypeVar("S")

type ErrorFactory = Callable[..., BaseException]


def entity_label(entity: Any) -> str:
    """Return the label used for an entity in messages.
    返回实体在消息中使用的标签。

    Args:
        entity: A class (its name is used), a string (used verbatim), or any object (its type name is used).
            类（使用类名）、字符串（原样使用）或任意对象（使用其类型名）。
    """
    if isinstance(entity, str):
        return entity
    if isinstance(entity, type):
        return entity.__name__
    return type(entity).__name__


def _accepts_values(factory: ErrorFactory) -> bool:
    """Check whether the factory can be called with (messages, values).
    检查工厂是否可以以 (messages, values) 两个位置参数调用。
    """
    try:
        sig = inspect.signature(factory)
    except (TypeError, ValueError):
        return False
    try:
        sig.bind([], [])
    except TypeError:
        return False
    return True


class Checker(Generic[S]):
    """
    Fluent assertion accumulator for one entity.
    单个实体的流式断言累积器。

    ``S`` is the type of the optional correlation value each assertion takes.
    ``S`` 为每个断言可选关联值的类型。

    Args:
        entity: Entity under check (class, label, or instance).
            被校验实体（类、标签或实例）。
        config: Configuration (defaults to the process-wide one).
            配置（默认使用进程级配置）。
    """

    def __init__(self, entity: Any, *, config: VeritasConfig | None = None) -> None:
        self._entity = entity_label(entity)
        self._config = config or default_config()
        self._messages: list[str] = []
        self._values: list[S] = []
        self._finalized = False

    def __repr__(self) -> str:
        return f"Checker({self._entity!r}, failures={len(self._messages)})"

    @property
    def entity(self) -> str:
        return self._entity

    @property
    def messages(self) -> list[str]:
        """Recorded messages (copy).
        已记录的消息（副本）。
        """
        return list(self._messages)

    @property
    def values(self) -> list[S]:
        """Recorded correlation values (copy).
        已记录的关联值（副本）。
        """
        return list(self._values)

    @property
    def has_failures(self) -> bool:
        return bool(self._messages)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _ensure_open(self) -> None:
        if self._finalized:
            raise CheckerFinalizedError(self._entity)

    def _check(self, holds: bool, kind: FailureKind, args: tuple[Any, ...], value: S | None) -> Self:
        """Record a failure unless the assertion holds.
        断言不成立时记录失败。

        Args:
            holds: Whether the assertion holds.
                断言是否成立。
            kind: Failure kind used to pick the template.
                用于选择模板的失败类型。
            args: Field labels then values, in template slot order.
                字段标签及取值（按模板槽位顺序）。
            value: Correlation value (None is not recorded).
                关联值（None 不会被记录）。
        """
        self._ensure_open()
        if holds:
            return self
        message = format_message(kind, self._entity, *args)
        self._messages.append(message)
        if value is not None:
            self._values.append(value)
        if self._config.log_failures:
            log.debug("assertion failed: %s", message)
        return self

    # nullability

    def if_null(self, field: str, actual: Any, value: S | None = None) -> Self:
        """Assert that ``actual`` is None.
        断言 ``actual`` 为 None。
        """
        return self._check(predicates.is_null(actual), FailureKind.NULL, (field,), value)

    def if_not_null(self, field: str, actual: Any, value: S | None = None) -> Self:
        """Assert that ``actual`` is not None.
        断言 ``actual`` 不为 None。
        """
        return self._check(not predicates.is_null(actual), FailureKind.NOT_NULL, (field,), value)

    def if_xor_null(self, field1: str, actual1: Any, field2: str, actual2: Any, value: S | None = None) -> Self:
        """Assert that exactly one of the two values is None.
        断言两个值中恰好一个为 None。
        """
        holds = predicates.xor_null(actual1, actual2)
        return self._check(holds, FailureKind.XOR_NULL, (field1, field2), value)

    def if_xor_not_null(self, field1: str, actual1: Any, field2: str, actual2: Any, value: S | None = None) -> Self:
        """Assert that it is not the case that exactly one value is None.
        断言并非恰好一个值为 None。
        """
        holds = not predicates.xor_null(actual1, actual2)
        return self._check(holds, FailureKind.XOR_NOT_NULL, (field1, field2), value)

    def if_or_null(self, field1: str, actual1: Any, field2: str, actual2: Any, value: S | None = None) -> Self:
        """Assert that at least one of the two values is None.
        断言两个值中至少一个为 None。
        """
        holds = predicates.or_null(actual1, actual2)
        return self._check(holds, FailureKind.OR_NULL, (field1, field2), value)

    def if_or_not_null(self, field1: str, actual1: Any, field2: str, actual2: Any, value: S | None = None) -> Self:
        """Assert that at least one of the two values is not None.
        断言两个值中至少一个不为 None。
        """
        holds = predicates.or_not_null(actual1, actual2)
        return self._check(holds, FailureKind.OR_NOT_NULL, (field1, field2), value)

    # strings

    def if_blank(self, field: str, actual: str | None, value: S | None = None) -> Self:
        """Assert that the string is None, empty, or whitespace only.
        断言字符串为 None、空串或仅含空白。
        """
        return self._check(predicates.is_blank(actual), FailureKind.BLANK, (field, actual), value)

    def if_not_blank(self, field: str, actual: str | None, value: S | None = None) -> Self:
        """Assert that the string has at least one non-whitespace character.
        断言字符串至少含一个非空白字符。
        """
        return self._check(not predicates.is_blank(actual), FailureKind.NOT_BLANK, (field,), value)

    def if_empty(self, field: str, actual: Sized | None, value: S | None = None) -> Self:
        """Assert that the string or collection is None or empty.
        断言字符串或集合为 None 或为空。

        Strings (and None) use the string template; other values use the collection template.
        字符串（及 None）使用字符串模板，其他值使用集合模板。
        """
        kind = FailureKind.EMPTY_STRING if _is_text(actual) else FailureKind.EMPTY_COLLECTION
        return self._check(predicates.is_empty(actual), kind, (field, actual), value)

    def if_not_empty(self, field: str, actual: Sized | None, value: S | None = None) -> Self:
        """Assert that the string or collection is neither None nor empty.
        断言字符串或集合既不为 None 也不为空。
        """
        kind = FailureKind.NOT_EMPTY_STRING if _is_text(actual) else FailureKind.NOT_EMPTY_COLLECTION
        return self._check(not predicates.is_empty(actual), kind, (field,), value)

    def if_within_max_length(self, field: str, actual: str | None, max_length: int, value: S | None = None) -> Self:
        """Assert that the string is None or at most ``max_length`` long.
        断言字符串为 None 或长度不超过 ``max_length``。
        """
        holds = predicates.is_within_max_length(actual, max_length)
        args = (field, actual, _length(actual), max_length)
        return self._check(holds, FailureKind.WITHIN_MAX_LENGTH, args, value)

    def if_not_within_max_length(
        self, field: str, actual: str | None, max_length: int, value: S | None = None
    ) -> Self:
        """Assert that the string is longer than ``max_length``.
        断言字符串长度超过 ``max_length``。
        """
        holds = not predicates.is_within_max_length(actual, max_length)
        args = (field, actual, _length(actual), max_length)
        return self._check(holds, FailureKind.NOT_WITHIN_MAX_LENGTH, args, value)

    def if_matches(
        self, field: str, actual: str | None, pattern: str | re.Pattern[str], value: S | None = None
    ) -> Self:
        """Assert that the whole string matches ``pattern``.
        断言整个字符串匹配 ``pattern``。

        Raises:
            re.error: When the pattern is malformed.
                正则表达式非法时抛出。
        """
        holds = predicates.matches(actual, pattern)
        return self._check(holds, FailureKind.MATCHES, (field, actual, _pattern_text(pattern)), value)

    def if_not_matches(
        self, field: str, actual: str | None, pattern: str | re.Pattern[str], value: S | None = None
    ) -> Self:
        """Assert that the string does not fully match ``pattern``.
        断言字符串不完整匹配 ``pattern``。
        """
        holds = not predicates.matches(actual, pattern)
        return self._check(holds, FailureKind.NOT_MATCHES, (field, actual, _pattern_text(pattern)), value)

    # collections

    def if_contains_all_values(
        self, field: str, actual: Collection[Any] | None, expected: Collection[Any] | None, value: S | None = None
    ) -> Self:
        """Assert that ``actual`` contains every value of ``expected``.
        断言 ``actual`` 包含 ``expected`` 的全部值。
        """
        holds = predicates.contains_all_values(actual, expected)
        return self._check(holds, FailureKind.CONTAINS_ALL, (field, actual, expected), value)

    def if_contains_any_values(
        self, field: str, actual: Collection[Any] | None, expected: Collection[Any] | None, value: S | None = None
    ) -> Self:
        """Assert that ``actual`` contains at least one value of ``expected``.
        断言 ``actual`` 至少包含 ``expected`` 的一个值。
        """
        holds = predicates.contains_any_values(actual, expected)
        return self._check(holds, FailureKind.CONTAINS_ANY, (field, actual, expected), value)

    def if_contains_no_values(
        self, field: str, actual: Collection[Any] | None, expected: Collection[Any] | None, value: S | None = None
    ) -> Self:
        """Assert that ``actual`` contains no value of ``expected``.
        断言 ``actual`` 不包含 ``expected`` 的任何值。
        """
        holds = predicates.contains_no_values(actual, expected)
        return self._check(holds, FailureKind.CONTAINS_NONE, (field, actual, expected), value)

    def if_matches_all_values(
        self, field: str, actual: Collection[Any] | None, matcher: Matcher | None, value: S | None = None
    ) -> Self:
        """Assert that ``matcher`` holds for every element.
        断言 ``matcher`` 对所有元素成立。

        Exceptions raised by ``matcher`` propagate.
        ``matcher`` 抛出的异常会直接向上传播。
        """
        holds = predicates.matches_all_values(actual, matcher)
        return self._check(holds, FailureKind.MATCHES_ALL, (field, actual), value)

    def if_matches_any_values(
        self, field: str, actual: Collection[Any] | None, matcher: Matcher | None, value: S | None = None
    ) -> Self:
        """Assert that ``matcher`` holds for at least one element.
        断言 ``matcher`` 对至少一个元素成立。
        """
        holds = predicates.matches_any_values(actual, matcher)
        return self._check(holds, FailureKind.MATCHES_ANY, (field, actual), value)

    def if_matches_no_values(
        self, field: str, actual: Collection[Any] | None, matcher: Matcher | None, value: S | None = None
    ) -> Self:
        """Assert that ``matcher`` holds for no element.
        断言 ``matcher`` 对任何元素都不成立。

        An empty collection fails this assertion.
        空集合会使该断言失败。
        """
        holds = predicates.matches_no_values(actual, matcher)
        return self._check(holds, FailureKind.MATCHES_NONE, (field, actual), value)

    # equality

    def if_equal(self, field: str, actual: Any, expected: Any, value: S | None = None) -> Self:
        """Assert that ``actual`` equals ``expected``.
        断言 ``actual`` 等于 ``expected``。
        """
        holds = predicates.is_equal_object(actual, expected)
        return self._check(holds, FailureKind.EQUAL, (field, actual, expected), value)

    def if_not_equal(self, field: str, actual: Any, expected: Any, value: S | None = None) -> Self:
        """Assert that ``actual`` differs from ``expected``.
        断言 ``actual`` 不等于 ``expected``。
        """
        holds = not predicates.is_equal_object(actual, expected)
        return self._check(holds, FailureKind.NOT_EQUAL, (field, actual, expected), value)

    def if_equal_string(
        self,
        field: str,
        actual: str | None,
        expected: str | None,
        case_sensitive: bool = True,
        value: S | None = None,
    ) -> Self:
        """Assert that two strings are equal.
        断言两个字符串相等。

        Args:
            field: Field label.
                字段标签。
            actual: Actual string.
                实际字符串。
            expected: Expected string.
                期望字符串。
            case_sensitive: Compare case-sensitively (default True).
                是否区分大小写（默认 True）。
            value: Correlation value recorded on failure.
                失败时记录的关联值。
        """
        holds = predicates.is_equal_string(actual, expected, case_sensitive)
        return self._check(holds, FailureKind.EQUAL_STRING, (field, actual, expected), value)

    def if_not_equal_string(
        self,
        field: str,
        actual: str | None,
        expected: str | None,
        case_sensitive: bool = True,
        value: S | None = None,
    ) -> Self:
        """Assert that two strings differ.
        断言两个字符串不相等。
        """
        holds = not predicates.is_equal_string(actual, expected, case_sensitive)
        return self._check(holds, FailureKind.NOT_EQUAL_STRING, (field, actual, expected), value)

    def if_equal_collection(
        self, field: str, actual: Collection[Any] | None, expected: Collection[Any] | None, value: S | None = None
    ) -> Self:
        """Assert that two collections are equal element-wise.
        断言两个集合逐元素相等。
        """
        holds = predicates.is_equal_collection(actual, expected)
        return self._check(holds, FailureKind.EQUAL, (field, actual, expected), value)

    def if_not_equal_collection(
        self, field: str, actual: Collection[Any] | None, expected: Collection[Any] | None, value: S | None = None
    ) -> Self:
        """Assert that two collections differ.
        断言两个集合不相等。
        """
        holds = not predicates.is_equal_collection(actual, expected)
        return self._check(holds, FailureKind.NOT_EQUAL, (field, actual, expected), value)

    def if_equal_date(
        self,
        field: str,
        actual: datetime | None,
        expected: datetime | None,
        tolerance: int,
        value: S | None = None,
    ) -> Self:
        """Assert that two datetimes are within ``tolerance`` whole seconds.
        断言两个 datetime 相差不超过 ``tolerance`` 整秒。

        Naive datetimes are read as civil time at offset zero.
        无时区 datetime 按零时区偏移解释。
        """
        holds = predicates.is_equal_date_with_tolerance(actual, expected, tolerance)
        return self._check(holds, FailureKind.EQUAL_DATE, (field, actual, expected, tolerance), value)

    def if_not_equal_date(
        self,
        field: str,
        actual: datetime | None,
        expected: datetime | None,
        tolerance: int,
        value: S | None = None,
    ) -> Self:
        """Assert that two datetimes are more than ``tolerance`` seconds apart.
        断言两个 datetime 相差超过 ``tolerance`` 秒。
        """
        holds = not predicates.is_equal_date_with_tolerance(actual, expected, tolerance)
        return self._check(holds, FailureKind.NOT_EQUAL_DATE, (field, actual, expected, tolerance), value)

    def if_equal_with_error(
        self, field: str, actual: float, expected: float, epsilon: float, value: S | None = None
    ) -> Self:
        """Assert that ``|actual - expected| <= epsilon``.
        断言 ``|actual - expected| <= epsilon``。
        """
        holds = predicates.is_equal_with_error(actual, expected, epsilon)
        return self._check(holds, FailureKind.EQUAL_WITH_ERROR, (field, actual, expected, epsilon), value)

    def if_not_equal_with_error(
        self, field: str, actual: float, expected: float, epsilon: float, value: S | None = None
    ) -> Self:
        """Assert that ``|actual - expected| > epsilon``.
        断言 ``|actual - expected| > epsilon``。
        """
        holds = not predicates.is_equal_with_error(actual, expected, epsilon)
        return self._check(holds, FailureKind.NOT_EQUAL_WITH_ERROR, (field, actual, expected, epsilon), value)

    # ordering

    def if_greater_than(
        self, field: str, actual: float, bound: float, epsilon: float = 0.0, value: S | None = None
    ) -> Self:
        """Assert that ``actual - epsilon > bound``.
        断言 ``actual - epsilon > bound``。
        """
        holds = predicates.is_greater_than_with_error(actual, bound, epsilon)
        return self._check(holds, FailureKind.GREATER_THAN, (field, actual, bound, epsilon), value)

    def if_greater_than_or_equal(
        self, field: str, actual: float, bound: float, epsilon: float = 0.0, value: S | None = None
    ) -> Self:
        """Assert that ``actual + epsilon >= bound``.
        断言 ``actual + epsilon >= bound``。
        """
        holds = predicates.is_greater_than_or_equal_with_error(actual, bound, epsilon)
        return self._check(holds, FailureKind.GREATER_THAN_OR_EQUAL, (field, actual, bound, epsilon), value)

    def if_less_than(
        self, field: str, actual: float, bound: float, epsilon: float = 0.0, value: S | None = None
    ) -> Self:
        """Assert that ``actual + epsilon < bound``.
        断言 ``actual + epsilon < bound``。
        """
        holds = predicates.is_less_than_with_error(actual, bound, epsilon)
        return self._check(holds, FailureKind.LESS_THAN, (field, actual, bound, epsilon), value)

    def if_less_than_or_equal(
        self, field: str, actual: float, bound: float, epsilon: float = 0.0, value: S | None = None
    ) -> Self:
        """Assert that ``actual - epsilon <= bound``.
        断言 ``actual - epsilon <= bound``。
        """
        holds = predicates.is_less_than_or_equal_with_error(actual, bound, epsilon)
        return self._check(holds, FailureKind.LESS_THAN_OR_EQUAL, (field, actual, bound, epsilon), value)

    # finalize

    def throwing(self, factory: ErrorFactory, *, with_values: bool | None = None) -> None:
        """Raise the failure built by ``factory`` if any assertion failed.
        若有断言失败，则抛出由 ``factory`` 构造的异常。

        The checker is finalized afterwards either way.
        无论是否抛出，调用后校验器都进入结束状态。

        Args:
            factory: Callable taking ``(messages)`` or ``(messages, values)`` and returning an exception.
                接收 ``(messages)`` 或 ``(messages, values)`` 并返回异常的可调用对象。
            with_values: Pass the values too. None means detect from the factory signature:
                any factory that can bind two positional arguments receives the values,
                including one whose optional second parameter means something else
                (e.g. ``def f(messages, hint=None)``). Pass False for such factories.
                是否同时传入关联值；None 表示根据工厂签名自动判断：凡能绑定两个位置参数的工厂
                都会收到关联值，包括第二个可选参数含义不同的工厂（如 ``def f(messages, hint=None)``），
                此类工厂请显式传入 False。

        ``CompositeError`` factories (and subclasses) are joined with this checker's
        ``config.line_separator``.
        ``CompositeError`` 工厂（及其子类）使用本校验器 ``config.line_separator`` 连接消息。

        Raises:
            BaseException: Whatever ``factory`` returns, when at least one assertion failed.
                至少一个断言失败时，抛出 ``factory`` 返回的异常。
            CheckerFinalizedError: When the checker was already finalized.
                校验器已结束时抛出。
        """
        self._ensure_open()
        self._finalized = True
        if not self._messages:
            return
        if with_values is None:
            with_values = _accepts_values(factory)
        messages = list(self._messages)
        kwargs: dict[str, Any] = {}
        if isinstance(factory, type) and issubclass(factory, CompositeError):
            kwargs["line_separator"] = self._config.line_separator
        if with_values:
            error = factory(messages, list(self._values), **kwargs)
        else:
            error = factory(messages, **kwargs)
        log.debug("raising %s for %s with %d failure(s)", type(error).__name__, self._entity, len(messages))
        raise error


def for_checking(entity: Any, *, config: VeritasConfig | None = None) -> Checker[Any]:
    """Open a checker for one entity.
    为单个实体创建校验器。

    Args:
        entity: Entity under check (class, label, or instance).
            被校验实体（类、标签或实例）。
        config: Configuration (optional).
            配置（可选）。

    Returns:
        Checker: A fresh, open checker.
            新建的校验器。

    Examples:
        >>> checker: Checker[int] = for_checking("Order")
        >>> checker.if_not_null("id", None, 7).values
        [7]
    """
    return Checker(entity, config=config)


def _is_text(value: Any) -> bool:
    return value is None or isinstance(value, str)


def _length(value: str | None) -> int:
    return len(value) if value is not None else 0


def _pattern_text(pattern: str | re.Pattern[str]) -> str:
    if isinstance(pattern, re.Pattern):
        return pattern.pattern
    return pattern
