"""Shared pytest fixtures"""
from typing import Any, Callable, Optional

import pytest

from src.infrastructure.config import get_settings

GATEWAY_ENV_KEYS = (
    "ENVIRONMENT",
    "SPFX_ORIGIN",
    "AWS_REGION",
    "AZURE_TENANT_ID",
    "AZURE_CLIENT_ID",
    "FUNCTION_TIMEOUT",
    "ENABLE_DETAILED_LOGGING",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """環境変数と設定キャッシュをテストごとにリセット"""
    for key in GATEWAY_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api_gateway_event() -> Callable[..., dict]:
    """API Gateway (REST API) プロキシイベントのファクトリ"""

    def build(
        method: str = "GET",
        path: str = "/health",
        headers: Optional[dict[str, str]] = None,
        body: Optional[str] = None,
        **overrides: Any,
    ) -> dict:
        event = {
            "resource": "/{proxy+}",
            "path": path,
            "httpMethod": method,
            "headers": headers or {},
            "queryStringParameters": None,
            "pathParameters": None,
            "body": body,
            "isBase64Encoded": False,
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "abc123",
                "protocol": "HTTP/1.1",
                "httpMethod": method,
                "path": f"/prod{path}",
                "stage": "prod",
                "requestId": "req-0001",
                "requestTime": "14/Nov/2023:22:13:20 +0000",
                "requestTimeEpoch": 1700000000000,
                "identity": {
                    "sourceIp": "203.0.113.10",
                    "userAgent": "pytest",
                },
            },
        }
        event.update(overrides)
        return event

    return build
