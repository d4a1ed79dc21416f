"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-10-16
@Docs: Verifier error hierarchy and the composite failure.
校验异常体系与组合异常。
"""

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from veritas.config import default_config
from veritas.schemas import FailureReport

S = TypeVar("S")


class VeritasError(Exception):
    """
    Verifier error.
    校验异常基类。

    Attributes:
        message: Error message.
        message: 错误消息。
        status_code: HTTP status code.
        status_code: HTTP 状态码。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        error_code: str = "veritas_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.error_code = error_code


class CheckerFinalizedError(VeritasError):
    """
    Raised when a checker is used after ``throwing`` was called.
    校验器在调用 ``throwing`` 之后仍被使用时抛出。
    """

    def __init__(self, entity: str) -> None:
        super().__init__(
            message=f"Checker for {entity} is already finalized / {entity} 的校验器已结束",
            status_code=500,
            details={"entity": entity},
            error_code="checker_finalized",
        )


class CompositeError(VeritasError, Generic[S]):
    """
    Composite failure carrying one message per violated assertion.
    组合异常：每个违反的断言对应一条消息。

    Args:
        items: Ordered messages, or a mapping message -> nested exception
            (nested exceptions become suppressed causes in iteration order).
            有序消息列表，或 消息 -> 嵌套异常 的映射（嵌套异常按迭代顺序作为被抑制原因附加）。
        values: Ordered correlation values (optional).
            有序关联值（可选）。
        status_code: HTTP status code (default 422).
            HTTP 状态码（默认 422）。
        error_code: Stable error code.
            稳定错误码。
        line_separator: Separator joining the messages (defaults to the process-wide config).
            消息连接分隔符（默认使用进程级配置）。

    Examples:
        >>> exc = CompositeError(["a", "b"], [1])
        >>> str(exc)
        'a\\nb'
        >>> exc.values
        [1]
    """

    def __init__(
        self,
        items: Iterable[str] | Mapping[str, BaseException],
        values: Iterable[S] | None = None,
        *,
        status_code: int = 422,
        error_code: str = "composite_failure",
        line_separator: str | None = None,
    ) -> None:
        causes: list[BaseException] = []
        if isinstance(items, Mapping):
            messages = [str(k) for k in items.keys()]
            causes = list(items.values())
        else:
            messages = [str(m) for m in items]
        if line_separator is None:
            line_separator = default_config().line_separator
        super().__init__(
            message=self.joiner(messages, line_separator),
            status_code=status_code,
            error_code=error_code,
        )
        self.line_separator = line_separator
        self.messages: list[str] = messages
        self.values: list[S] = list(values) if values is not None else []
        self.suppressed: list[BaseException] = []
        for cause in causes:
            self.add_suppressed(cause)

    @staticmethod
    def joiner(messages: Iterable[str], line_separator: str | None = None) -> str:
        """Join messages with a line separator.
        使用行分隔符连接消息。

        Args:
            messages: Messages to join.
                待连接的消息。
            line_separator: Separator (None means the configured one).
                分隔符（None 表示使用配置值）。
        Returns:
            str: Joined text.
                连接后的文本。
        """
        if line_separator is None:
            line_separator = default_config().line_separator
        return line_separator.join(messages)

    def add_suppressed(self, exc: BaseException) -> None:
        """Attach a nested failure as a suppressed cause.
        将嵌套异常作为被抑制原因附加。
        """
        self.suppressed.append(exc)

    def merger(self, other: "CompositeError[Any]") -> "CompositeError[Any]":
        """Merge two composites into one holding both joined messages.
        合并两个组合异常，新异常包含两者的合并消息。

        Args:
            other: Composite to merge with.
                要合并的组合异常。
        Returns:
            CompositeError: New composite with ``[self.message, other.message]``.
                消息为 ``[self.message, other.message]`` 的新组合异常。
        """
        return CompositeError([self.message, other.message], line_separator=self.line_separator)

    def merger_with_causes(self, other: "CompositeError[Any]") -> "CompositeError[Any]":
        """Merge two composites, keeping both originals as suppressed causes.
        合并两个组合异常，并将两个原异常作为被抑制原因保留。

        Args:
            other: Composite to merge with.
                要合并的组合异常。
        Returns:
            CompositeError: New composite carrying both originals in ``suppressed``.
                ``suppressed`` 中包含两个原异常的新组合异常。
        """
        merged = self.merger(other)
        merged.add_suppressed(self)
        merged.add_suppressed(other)
        return merged

    def to_report(self) -> FailureReport:
        """Return a serializable report of this failure.
        返回该异常的可序列化报告。
        """
        return FailureReport(
            message=self.message,
            messages=list(self.messages),
            values=list(self.values),
            error_code=self.error_code,
        )
