"""
SPFx Footer Gateway Lambda Handler

SharePoint フッター拡張 (チャットウィジェット) 用の HTTP ゲートウェイ。
API Gateway (REST / HTTP API) のプロキシ統合で呼び出される。

ルーティング:
- OPTIONS *        CORS プリフライト
- GET /health      ヘルスチェック
- /graph/*         Microsoft Graph プロキシ (未実装)
- /sharepoint/*    SharePoint REST プロキシ (未実装)
"""
from __future__ import annotations

import json
from typing import Any

import structlog

from src.domain.proxy.constants import HttpMethod, HttpStatus
from src.domain.proxy.value_objects import LogContext
from src.infrastructure.config import validate_config
from src.presentation.api.request import current_timestamp, extract_request_context
from src.presentation.middleware.cors import add_cors_headers, handle_preflight
from src.presentation.middleware.error_handler import with_error_handler
from src.presentation.middleware.logging import bind_request, configure_logging

_logging_configured = False
logger = structlog.get_logger()

PLACEHOLDER_HINT = "Implement after App Registration setup"


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    # 設定不備はレスポンスに変換せず、呼び出しエラーとして Lambda に返す
    validate_config()
    _configure_logging_once()

    request = extract_request_context(event)
    log_context = LogContext.from_request(request)
    bind_request(log_context)

    logger.info(
        "request_received",
        method=request.method,
        path=request.path,
        source_ip=request.source_ip,
    )

    if request.method == HttpMethod.OPTIONS.value:
        return handle_preflight()

    path = request.path.lower()

    if path == "/health":
        return with_error_handler(handle_health, log_context)

    if path.startswith("/graph"):
        return handle_graph_request(request.path, log_context)

    if path.startswith("/sharepoint"):
        return handle_sharepoint_request(request.path, log_context)

    logger.warning("route_not_found", path=request.path)
    return add_cors_headers(
        HttpStatus.NOT_FOUND,
        {"error": "Route not found", "path": request.path},
    )


def handle_health() -> dict:
    """ヘルスチェック"""
    return {
        "status": "healthy",
        "timestamp": current_timestamp(),
    }


def handle_graph_request(path: str, context: LogContext) -> dict:
    """Graph API リクエスト"""

    def handle() -> dict:
        # TODO: App Registration 後に GraphGateway へディスパッチする
        logger.info("graph_request_received")
        return {
            "message": "Graph API endpoint - not yet implemented",
            "path": path,
            "hint": PLACEHOLDER_HINT,
        }

    return with_error_handler(handle, context)


def handle_sharepoint_request(path: str, context: LogContext) -> dict:
    """SharePoint REST API リクエスト"""

    def handle() -> dict:
        # TODO: siteUrl / エンドポイントを抽出して SharePointGateway へディスパッチする
        logger.info("sharepoint_request_received")
        return {
            "message": "SharePoint API endpoint - not yet implemented",
            "path": path,
            "hint": PLACEHOLDER_HINT,
        }

    return with_error_handler(handle, context)


def _configure_logging_once() -> None:
    """コールドスタート時に一度だけログを設定"""
    global _logging_configured
    if not _logging_configured:
        configure_logging()
        _logging_configured = True


# ローカルテスト用
if __name__ == "__main__":
    test_event = {
        "httpMethod": "GET",
        "path": "/health",
        "headers": {},
        "requestContext": {
            "requestId": "local-test",
            "requestTimeEpoch": 1700000000000,
            "identity": {"sourceIp": "127.0.0.1"},
        },
    }

    result = lambda_handler(test_event, None)
    print(json.dumps(result, indent=2))
