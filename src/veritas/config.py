"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-10-16
@Docs: Verifier configuration helpers.
校验器配置助手。

Configuration can be passed as function parameters or through environment
variables.
配置可以通过函数参数或环境变量传入。

Environment variables / 环境变量:
        - VERITAS_LINE_SEPARATOR:
            Separator used to join composite failure messages (default: "\\n").
            Escape sequences such as "\\r\\n" are accepted.
            组合异常消息的连接分隔符（默认 "\\n"），支持 "\\r\\n" 等转义写法。
        - VERITAS_LOG_FAILURES:
            Log every recorded assertion failure at DEBUG level (default: off).
            是否以 DEBUG 级别记录每个断言失败（默认关闭）。

Examples:
        >>> from veritas.config import resolve_config
        >>> cfg = resolve_config(line_separator="\\n")
        >>> cfg.line_separator
        '\\n'
"""

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_LINE_SEPARATOR = "\n"

_TRUTHY = {"1", "true", "yes", "y", "t", "on"}
_FALSY = {"0", "false", "no", "n", "f", "off"}
_ESCAPES = {"\\r": "\r", "\\n": "\n", "\\t": "\t"}


@dataclass(frozen=True, slots=True)
class VeritasConfig:
    """Verifier configuration.

    校验器配置。

    Attributes:
        line_separator: Separator joining composite failure messages.
            组合异常消息的连接分隔符。
        log_failures: Whether each recorded failure is logged at DEBUG level.
            是否以 DEBUG 级别记录每个失败。
    """

    line_separator: str = DEFAULT_LINE_SEPARATOR
    log_failures: bool = False


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _unescape(value: str) -> str:
    """Expand backslash escapes used to write separators in env vars.
    展开环境变量中分隔符的反斜杠转义。

    Args:
        value: Raw value, e.g. ``\\r\\n``.
            原始值，例如 ``\\r\\n``。

    Returns:
        str: Expanded value.
            展开后的值。
    """
    for raw, real in _ESCAPES.items():
        value = value.replace(raw, real)
    return value


def _parse_bool(value: str | None, default: bool) -> bool:
    """Parse a boolean flag from text.
    从文本解析布尔开关。

    Args:
        value: Raw text (None means unset).
            原始文本（None 表示未设置）。
        default: Value used when the text is unset or unrecognized.
            未设置或无法识别时使用的默认值。
    """
    if value is None:
        return default
    raw = value.strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


def resolve_config(
    *,
    line_separator: str | None = None,
    log_failures: bool | None = None,
    env_prefix: str = "VERITAS",
) -> VeritasConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

     Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_LINE_SEPARATOR`, `{env_prefix}_LOG_FAILURES`
           环境变量：`{env_prefix}_LINE_SEPARATOR`、`{env_prefix}_LOG_FAILURES`
        3) defaults / 默认值

    Args:
        line_separator: Separator joining composite failure messages.
            组合异常消息的连接分隔符。
        log_failures: Log each recorded failure at DEBUG level.
            是否以 DEBUG 级别记录每个失败。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 VERITAS）。

    Returns:
        A VeritasConfig instance.
            返回 VeritasConfig 配置实例。

    Examples:
        >>> resolve_config(log_failures=True).log_failures
        True
    """
    if line_separator is None:
        env_sep = _env_get(f"{env_prefix}_LINE_SEPARATOR")
        line_separator = _unescape(env_sep) if env_sep else DEFAULT_LINE_SEPARATOR
    if log_failures is None:
        log_failures = _parse_bool(_env_get(f"{env_prefix}_LOG_FAILURES"), False)
    return VeritasConfig(line_separator=line_separator, log_failures=log_failures)


@lru_cache(maxsize=1)
def default_config() -> VeritasConfig:
    """Return the process-wide configuration resolved from the environment.
    返回从环境变量解析的进程级配置（仅解析一次）。

    Call ``default_config.cache_clear()`` after changing the environment.
    修改环境变量后调用 ``default_config.cache_clear()`` 重新解析。
    """
    return resolve_config()
