"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: base.py
@DateTime: 2026-10-16
@Docs: Formatter protocol for rendering values into diagnostic messages.
诊断消息取值格式化器协议。
"""

from typing import Protocol, TypeVar

T_contra = TypeVar("T_contra", contravariant=True)


class ValueFormatter(Protocol[T_contra]):
    """Formatter protocol for rendering a value as message text.
    将值渲染为消息文本的协议。
    """

    def format(self, value: T_contra) -> str:
        """Format a value into a string.
        将值格式化为字符串。

        Args:
            value: The value to format (never None; absence is handled by the caller).
                要格式化的值（不会是 None，缺失值由调用方处理）。
        Returns:
            The formatted string representation of the value.
                值的格式化字符串表示。
        """
        ...
