"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_exceptions.py
@DateTime: 2026-10-16
@Docs: Tests for exceptions.py module.
exceptions.py 模块测试。
"""

import pytest

from veritas.config import default_config
from veritas.exceptions import CheckerFinalizedError, CompositeError, VeritasError
from veritas.schemas import FailureReport


class TestVeritasError:
    """Tests for VeritasError.
    VeritasError 测试。
    """

    def test_attributes(self) -> None:
        """All attributes assigned correctly / 所有属性正确赋值。"""
        exc = VeritasError(
            message="test error",
            status_code=422,
            details={"key": "val"},
            error_code="custom_error",
        )
        assert exc.message == "test error"
        assert exc.status_code == 422
        assert exc.details == {"key": "val"}
        assert exc.error_code == "custom_error"

    def test_defaults(self) -> None:
        """Default status_code and error_code / 默认 status_code 和 error_code。"""
        exc = VeritasError(message="msg")
        assert exc.status_code == 400
        assert exc.error_code == "veritas_error"
        assert exc.details is None

    def test_str_returns_message(self) -> None:
        """str(exc) returns message / str(exc) 返回 message 内容。"""
        assert str(VeritasError(message="hello world")) == "hello world"

    def test_message_is_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            VeritasError("positional")  # type: ignore[misc]


class TestSubclasses:
    """Tests for exception subclasses.
    异常子类测试。
    """

    def test_composite_is_veritas_error(self) -> None:
        assert issubclass(CompositeError, VeritasError)

    def test_finalized_error(self) -> None:
        exc = CheckerFinalizedError("User")
        assert isinstance(exc, VeritasError)
        assert exc.error_code == "checker_finalized"
        assert exc.details == {"entity": "User"}
        assert "User" in exc.message


class TestCompositeError:
    """Tests for CompositeError.
    CompositeError 测试。
    """

    def test_messages_only(self) -> None:
        exc = CompositeError(["a", "b"])
        assert exc.messages == ["a", "b"]
        assert exc.values == []
        assert exc.message == "a\nb"
        assert str(exc) == "a\nb"
        assert exc.status_code == 422
        assert exc.error_code == "composite_failure"

    def test_messages_and_values(self) -> None:
        exc: CompositeError[int] = CompositeError(["a", "b"], [1, 2])
        assert exc.values == [1, 2]

    def test_order_is_preserved(self) -> None:
        messages = [f"m{i}" for i in range(10)]
        assert CompositeError(messages).messages == messages

    def test_mapping_attaches_suppressed_in_order(self) -> None:
        """Mapping values become suppressed causes / 映射值作为被抑制原因附加。"""
        first = ValueError("first")
        second = KeyError("second")
        exc = CompositeError({"one": first, "two": second})
        assert exc.messages == ["one", "two"]
        assert exc.suppressed == [first, second]

    def test_add_suppressed(self) -> None:
        exc = CompositeError(["a"])
        cause = RuntimeError("x")
        exc.add_suppressed(cause)
        assert exc.suppressed == [cause]

    def test_merger(self) -> None:
        left = CompositeError(["a", "b"])
        right = CompositeError(["c"])
        merged = left.merger(right)
        assert merged.messages == ["a\nb", "c"]
        assert merged.message == "a\nb\nc"
        assert merged.suppressed == []

    def test_merger_with_causes(self) -> None:
        left = CompositeError(["a"])
        right = CompositeError(["b"])
        merged = left.merger_with_causes(right)
        assert merged.messages == ["a", "b"]
        assert merged.suppressed == [left, right]

    def test_merger_with_causes_equal_messages(self) -> None:
        """Equal messages keep both entries and both causes / 消息相同时保留两条消息与两个原因。"""
        left = CompositeError(["a"])
        right = CompositeError(["a"])
        merged = left.merger_with_causes(right)
        assert merged.messages == ["a", "a"]
        assert merged.suppressed == [left, right]

    def test_explicit_line_separator(self) -> None:
        exc = CompositeError(["a", "b"], line_separator="\r\n")
        assert exc.message == "a\r\nb"
        assert exc.line_separator == "\r\n"
        assert exc.merger(CompositeError(["c"])).message == "a\r\nb\r\nc"

    def test_joiner_uses_configured_separator(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERITAS_LINE_SEPARATOR", "\\r\\n")
        default_config.cache_clear()
        assert CompositeError(["a", "b"]).message == "a\r\nb"

    def test_to_report(self) -> None:
        report = CompositeError(["a", "b"], [7]).to_report()
        assert isinstance(report, FailureReport)
        assert report.message == "a\nb"
        assert report.messages == ["a", "b"]
        assert report.values == [7]
        assert report.error_code == "composite_failure"

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(CompositeError) as exc_info:
            raise CompositeError(["boom"])
        assert exc_info.value.messages == ["boom"]
