"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_schemas.py
@DateTime: 2026-10-16
@Docs: Tests for the failure report schema.
失败报告模型测试。
"""

import pytest
from pydantic import ValidationError

from veritas.schemas import FailureReport


class TestFailureReport:
    """Tests for FailureReport.
    FailureReport 测试。
    """

    def test_defaults(self) -> None:
        report = FailureReport(message="m")
        assert report.messages == []
        assert report.values == []
        assert report.error_code == "composite_failure"

    def test_dump_json_mode(self) -> None:
        report = FailureReport(message="a\nb", messages=["a", "b"], values=[1, "x"])
        assert report.model_dump(mode="json") == {
            "message": "a\nb",
            "messages": ["a", "b"],
            "values": [1, "x"],
            "error_code": "composite_failure",
        }

    def test_is_frozen(self) -> None:
        report = FailureReport(message="m")
        with pytest.raises(ValidationError):
            report.message = "other"  # type: ignore[misc]

    def test_message_required(self) -> None:
        with pytest.raises(ValidationError):
            FailureReport()  # type: ignore[call-arg]

    def test_opaque_values_fall_back_to_str(self) -> None:
        """Values pydantic cannot encode dump as str / 无法编码的关联值以 str 输出。"""

        class Token:
            def __str__(self) -> str:
                return "token-1"

        token = Token()
        report = FailureReport(message="m", messages=["m"], values=[token, 3])
        assert report.model_dump(mode="json")["values"] == ["token-1", 3]
        assert report.model_dump()["values"] == [token, 3]
