"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-10-16
@Docs: Shared test fixtures for the veritas test suite.
测试套件的公共 fixtures。
"""

from collections.abc import Iterator
from typing import Any

import pytest

from veritas.checker import Checker, for_checking
from veritas.config import default_config

ENTITY = "VerifierTest"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop VERITAS_* variables and reset the cached process config.
    清除 VERITAS_* 环境变量并重置进程级配置缓存。
    """
    monkeypatch.delenv("VERITAS_LINE_SEPARATOR", raising=False)
    monkeypatch.delenv("VERITAS_LOG_FAILURES", raising=False)
    default_config.cache_clear()
    yield
    default_config.cache_clear()


@pytest.fixture
def checker() -> Checker[Any]:
    """A fresh checker labelled ``VerifierTest``.
    标签为 ``VerifierTest`` 的新校验器。
    """
    return for_checking(ENTITY)


def field_prefix(field: str) -> str:
    """Expected single-field message prefix.
    预期的单字段消息前缀。
    """
    return f'Assertion failed for field: "{ENTITY}#{field}";\t'


def fields_prefix(field1: str, field2: str) -> str:
    """Expected two-field message prefix.
    预期的双字段消息前缀。
    """
    return f'Assertion failed for fields: "{ENTITY}#{field1}" and "{ENTITY}#{field2}";\t'
