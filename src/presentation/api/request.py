"""
API Gateway Event Helpers

REST API (payload v1) と HTTP API (payload v2) の両方のイベント形式から
リクエスト情報を取り出す。
"""
from __future__ import annotations

import base64
import binascii
import json
import random
import string
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from src.domain.proxy.constants import BEARER_SCHEME
from src.domain.proxy.value_objects import RequestContext

_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def _format_timestamp(moment: datetime) -> str:
    """ISO-8601 (UTC, ミリ秒, Z 表記)"""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def current_timestamp() -> str:
    """現在時刻の ISO-8601 文字列"""
    return _format_timestamp(datetime.now(timezone.utc))


def generate_correlation_id() -> str:
    """相関 ID を生成 (<epoch ms>-<base36 9文字>)"""
    suffix = "".join(random.choices(_BASE36_ALPHABET, k=9))
    return f"{int(time.time() * 1000)}-{suffix}"


def extract_request_context(event: dict) -> RequestContext:
    """API Gateway イベントからリクエスト情報を抽出"""
    request_context = event.get("requestContext") or {}
    http_context = request_context.get("http") or {}
    identity = request_context.get("identity") or {}

    method = event.get("httpMethod") or http_context.get("method") or ""
    path = event.get("path") or event.get("rawPath") or "/"

    epoch_ms = request_context.get("requestTimeEpoch") or request_context.get("timeEpoch")
    if epoch_ms:
        seconds, millis = divmod(int(epoch_ms), 1000)
        moment = datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(milliseconds=millis)
        timestamp = _format_timestamp(moment)
    else:
        timestamp = current_timestamp()

    return RequestContext(
        request_id=request_context.get("requestId") or generate_correlation_id(),
        method=method.upper(),
        path=path,
        timestamp=timestamp,
        source_ip=identity.get("sourceIp") or http_context.get("sourceIp") or "",
    )


def get_header(event: dict, name: str) -> Optional[str]:
    """ヘッダーを大文字小文字を区別せずに取得"""
    headers = event.get("headers") or {}
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def extract_bearer_token(auth_header: Optional[str]) -> Optional[str]:
    """Authorization ヘッダーから Bearer トークンを取り出す"""
    if not auth_header:
        return None
    parts = auth_header.split(" ")
    if len(parts) == 2 and parts[0].lower() == BEARER_SCHEME.lower():
        return parts[1]
    return None


def get_request_body(event: dict) -> Optional[Any]:
    """リクエストボディを JSON として解析 (不正な場合は None)"""
    raw = event.get("body")
    if not raw:
        return None
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw).decode("utf-8")
        return json.loads(raw)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError):
        return None
