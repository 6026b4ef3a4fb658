"""CORS Middleware"""
from __future__ import annotations

import json
from typing import Any, Optional

from src.domain.proxy import constants
from src.domain.proxy.constants import ContentType, HttpMethod, HttpStatus
from src.infrastructure.config import get_settings

ALLOWED_METHODS = ",".join(
    method.value
    for method in (
        HttpMethod.GET,
        HttpMethod.POST,
        HttpMethod.PUT,
        HttpMethod.DELETE,
        HttpMethod.PATCH,
        HttpMethod.OPTIONS,
    )
)


def cors_headers() -> dict[str, str]:
    """SPFx オリジン向けの CORS ヘッダー"""
    return {
        constants.ALLOW_ORIGIN: get_settings().spfx_origin,
        constants.ALLOW_METHODS: ALLOWED_METHODS,
        constants.ALLOW_HEADERS: constants.CORS_ALLOWED_HEADERS,
        constants.ALLOW_CREDENTIALS: "true",
        constants.MAX_AGE: str(constants.CORS_MAX_AGE_SECONDS),
        constants.CONTENT_TYPE_HEADER: ContentType.JSON.value,
    }


def add_cors_headers(
    status_code: int = HttpStatus.OK,
    body: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Lambda プロキシレスポンスを CORS ヘッダー付きで作成"""
    return {
        "statusCode": int(status_code),
        "headers": cors_headers(),
        "body": json.dumps(body if body is not None else {}, ensure_ascii=False),
        "isBase64Encoded": False,
    }


def handle_preflight() -> dict[str, Any]:
    """OPTIONS プリフライトへの応答"""
    return add_cors_headers(HttpStatus.OK, {"message": "OK"})
