"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schemas.py
@DateTime: 2026-10-16
@Docs: Serializable views of validation failures.
校验失败的可序列化视图。
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic_core import to_jsonable_python


class FailureReport(BaseModel):
    """
    Failure report.
    校验失败报告。

    Attributes:
        message: Joined message (one failure per line).
        message: 合并后的消息（每行一个失败）。
        messages: Individual failure messages, in order.
        messages: 各条失败消息（保持顺序）。
        values: Correlation values, in failure order.
        values: 关联值（按失败顺序）。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    model_config = ConfigDict(frozen=True)

    message: str
    messages: list[str] = Field(default_factory=list)
    values: list[Any] = Field(default_factory=list)
    error_code: str = "composite_failure"

    @field_serializer("values", when_used="json")
    def serialize_values(self, values: list[Any]) -> list[Any]:
        """Values pydantic cannot encode fall back to ``str(value)``.
        pydantic 无法编码的关联值回退为 ``str(value)``。
        """
        return [to_jsonable_python(v, fallback=str) for v in values]
