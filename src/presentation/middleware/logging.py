"""Logging Middleware"""
from __future__ import annotations

import logging
from typing import Any, Optional

import structlog

from src.domain.proxy.value_objects import LogContext
from src.infrastructure.config import Settings, get_settings

logger = structlog.get_logger()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    構造化ログを設定

    12-Factor App の Logs 原則に従い、
    JSON ログを stdout (CloudWatch Logs) にイベントストリームとして出力する。
    """
    settings = settings or get_settings()
    if settings.enable_detailed_logging:
        level = logging.DEBUG
    else:
        # DEBUG は詳細ログ有効時のみ
        configured = logging.getLevelName(settings.log_level.upper())
        level = max(logging.INFO, configured) if isinstance(configured, int) else logging.INFO

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.enable_detailed_logging:
        processors.append(structlog.processors.format_exc_info)
    processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
    )


def bind_request(context: LogContext) -> None:
    """呼び出しごとのリクエスト情報を contextvars にバインド"""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**context.to_log_fields())


def get_request_logger(context: LogContext) -> Any:
    """LogContext をバインドしたロガーを取得"""
    return logger.bind(**context.to_log_fields())


def log_exception(
    context: LogContext,
    message: str,
    error: BaseException,
    **data: Any,
) -> None:
    """例外をエラーログに出力 (スタックトレースは詳細ログ有効時のみ)"""
    log = get_request_logger(context)
    fields: dict[str, Any] = {
        "error_message": str(error),
        "error_name": type(error).__name__,
        **data,
    }
    if get_settings().enable_detailed_logging:
        fields["exc_info"] = error
    log.error(message, **fields)
