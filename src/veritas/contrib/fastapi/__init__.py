"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-16
@Docs: FastAPI contrib (exception handlers for veritas failures).
FastAPI 贡献层（veritas 异常处理器）。
"""

from veritas.contrib.fastapi.handlers import (
    composite_error_handler,
    install_exception_handlers,
    veritas_error_handler,
)

__all__ = ["composite_error_handler", "install_exception_handlers", "veritas_error_handler"]
