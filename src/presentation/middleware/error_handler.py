"""Error Handler Middleware"""
from __future__ import annotations

from typing import Any, Callable

from src.domain.proxy.constants import HttpStatus
from src.domain.proxy.errors import ApiError
from src.domain.proxy.value_objects import LogContext
from src.presentation.middleware.cors import add_cors_headers
from src.presentation.middleware.logging import get_request_logger, log_exception


def with_error_handler(
    handler: Callable[[], dict[str, Any]],
    context: LogContext,
) -> dict[str, Any]:
    """
    ハンドラを実行し、結果またはエラーを CORS 付きレスポンスに変換

    - 正常: 200 + ハンドラの戻り値
    - ApiError: エラーのステータスコード + error/details
    - その他の例外: 500 + requestId
    """
    try:
        return add_cors_headers(HttpStatus.OK, handler())
    except ApiError as exc:
        get_request_logger(context).warning(
            "api_error", message=exc.message, status_code=exc.status_code
        )
        return add_cors_headers(exc.status_code, exc.to_dict())
    except Exception as exc:
        log_exception(context, "unhandled_error", exc)
        return add_cors_headers(
            HttpStatus.INTERNAL_ERROR,
            {
                "error": "Internal Server Error",
                "requestId": context.request_id,
            },
        )


def handle_validation_error(
    context: LogContext, message: str, details: Any = None
) -> dict[str, Any]:
    """バリデーションエラー (400)"""
    get_request_logger(context).warning("validation_error", message=message, details=details)
    return add_cors_headers(
        HttpStatus.BAD_REQUEST,
        ApiError(HttpStatus.BAD_REQUEST, message, details).to_dict(),
    )


def handle_authorization_error(
    context: LogContext, message: str = "Unauthorized"
) -> dict[str, Any]:
    """認可エラー (401)"""
    get_request_logger(context).warning("authorization_error", message=message)
    return add_cors_headers(HttpStatus.UNAUTHORIZED, {"error": message})


def handle_not_found_error(context: LogContext, resource: str) -> dict[str, Any]:
    """リソース未検出エラー (404)"""
    get_request_logger(context).warning("resource_not_found", resource=resource)
    return add_cors_headers(HttpStatus.NOT_FOUND, {"error": f"{resource} not found"})
