"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-16
@Docs: Package exports for veritas.
veritas 包导出定义。
"""

from veritas.checker import Checker, entity_label, for_checking
from veritas.config import VeritasConfig, default_config, resolve_config
from veritas.exceptions import CheckerFinalizedError, CompositeError, VeritasError
from veritas.formatting import ValueFormatter, render_value
from veritas.messages import TEMPLATES, FailureKind, format_message, template_for
from veritas.schemas import FailureReport

__all__ = [
    "Checker",
    "for_checking",
    "entity_label",
    "VeritasError",
    "CompositeError",
    "CheckerFinalizedError",
    "FailureReport",
    "FailureKind",
    "TEMPLATES",
    "template_for",
    "format_message",
    "ValueFormatter",
    "render_value",
    "VeritasConfig",
    "resolve_config",
    "default_config",
]
