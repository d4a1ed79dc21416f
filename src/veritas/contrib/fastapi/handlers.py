"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: handlers.py
@DateTime: 2026-10-16
@Docs: Exception handlers turning veritas failures into JSON responses.
将 veritas 异常转换为 JSON 响应的异常处理器。
"""

from typing import TYPE_CHECKING, Any

from veritas.exceptions import CompositeError, VeritasError

if TYPE_CHECKING:
    from fastapi import FastAPI, Request
    from fastapi.responses import JSONResponse


def _load_json_response() -> Any:
    try:
        from fastapi.responses import JSONResponse

        return JSONResponse
    except Exception as exc:  # pragma: no cover / 覆盖忽略
        raise VeritasError(
            message="Missing optional dependency: fastapi. Install extras: fastapi / 缺少可选依赖 fastapi，请安装: fastapi",
            status_code=500,
            details={"error": str(exc)},
            error_code="missing_dependency",
        ) from exc


async def composite_error_handler(request: "Request", exc: CompositeError[Any]) -> "JSONResponse":
    """
    Render a composite failure as a FailureReport body.
    将组合异常渲染为 FailureReport 响应体。

    Args:
        request: Incoming request.
            请求对象。
        exc: Composite failure.
            组合异常。

    Returns:
        JSONResponse: Response with ``exc.status_code`` and the report as body.
            状态码为 ``exc.status_code``、响应体为报告的 JSON 响应。
    """
    json_response = _load_json_response()
    return json_response(status_code=exc.status_code, content=exc.to_report().model_dump(mode="json"))


async def veritas_error_handler(request: "Request", exc: VeritasError) -> "JSONResponse":
    """
    Render any other veritas error as ``{message, error_code, details}``.
    将其他 veritas 异常渲染为 ``{message, error_code, details}``。
    """
    json_response = _load_json_response()
    content = {"message": exc.message, "error_code": exc.error_code, "details": exc.details}
    return json_response(status_code=exc.status_code, content=content)


def install_exception_handlers(app: "FastAPI") -> None:
    """
    Register the veritas exception handlers on a FastAPI app.
    在 FastAPI 应用上注册 veritas 异常处理器。

    Args:
        app: FastAPI application.
            FastAPI 应用。

    Examples:
        >>> app = FastAPI()
        >>> install_exception_handlers(app)
    """
    app.add_exception_handler(CompositeError, composite_error_handler)
    app.add_exception_handler(VeritasError, veritas_error_handler)
