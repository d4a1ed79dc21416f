"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_packaging.py
@DateTime: 2026-10-16
@Docs: Tests for packaging, __all__ exports, and pip-readiness.
打包、__all__ 导出与 pip 就绪性测试。
"""

import importlib
import tomllib
from pathlib import Path

import pytest


class TestAllExports:
    """Tests for __all__ exports.
    __all__ 导出测试。
    """

    @pytest.mark.parametrize("module", ["veritas", "veritas.predicates", "veritas.formatting"])
    def test_every_name_importable(self, module: str) -> None:
        """Every name in __all__ can be successfully imported / __all__ 中每个名字都能成功导入。"""
        mod = importlib.import_module(module)
        for name in mod.__all__:
            obj = getattr(mod, name, None)
            assert obj is not None, f"{name} is in __all__ but not importable / {name} 在 __all__ 中但无法导入"

    def test_contrib_imports_without_side_effects(self) -> None:
        """The contrib module imports lazily / contrib 模块延迟导入 fastapi。"""
        mod = importlib.import_module("veritas.contrib.fastapi")
        assert callable(mod.install_exception_handlers)


class TestPyTyped:
    """Tests for py.typed marker.
    py.typed 标记文件测试。
    """

    def test_py_typed_exists(self) -> None:
        """py.typed marker file exists / py.typed 标记文件存在。"""
        pkg_dir = Path(__file__).parent.parent / "src" / "veritas"
        assert (pkg_dir / "py.typed").exists()


class TestExtrasKeys:
    """Tests for pyproject.toml extras.
    pyproject.toml extras 测试。
    """

    def test_extras_keys_present(self) -> None:
        """All expected extras keys exist / 所有预期的 extras 键存在。"""
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        extras = data.get("project", {}).get("optional-dependencies", {})
        for key in ("fastapi", "full", "test"):
            assert key in extras, f"extras key '{key}' missing / extras 键 '{key}' 缺失"


class TestFriendlyMissingDependency:
    """Missing fastapi surfaces as VeritasError.
    缺少 fastapi 时抛出 VeritasError。
    """

    def test_missing_backend_is_not_module_not_found(self) -> None:
        from unittest.mock import patch

        from veritas.contrib.fastapi import handlers
        from veritas.exceptions import CompositeError, VeritasError

        with patch.object(
            handlers,
            "_load_json_response",
            side_effect=VeritasError(message="Missing optional dependency: fastapi", error_code="missing_dependency"),
        ):
            coro = handlers.composite_error_handler(None, CompositeError(["a"]))  # type: ignore[arg-type]
            with pytest.raises(VeritasError) as exc_info:
                coro.send(None)
            assert exc_info.value.error_code == "missing_dependency"
            assert not isinstance(exc_info.value, ModuleNotFoundError)
