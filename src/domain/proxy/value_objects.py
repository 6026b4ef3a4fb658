"""Gateway Value Objects"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class RequestContext:
    """API Gateway イベントから抽出したリクエスト情報"""

    request_id: str
    method: str
    path: str
    timestamp: str
    source_ip: str = ""


@dataclass(frozen=True)
class LogContext:
    """構造化ログのコンテキスト"""

    request_id: str
    operation: str
    timestamp: str
    user_id: Optional[str] = None
    path: Optional[str] = None
    method: Optional[str] = None

    @classmethod
    def from_request(cls, request: RequestContext) -> "LogContext":
        return cls(
            request_id=request.request_id,
            operation=f"{request.method} {request.path}",
            timestamp=request.timestamp,
            path=request.path,
            method=request.method,
        )

    def to_log_fields(self) -> dict[str, Any]:
        """structlog にバインドするフィールド"""
        fields = {
            "request_id": self.request_id,
            "operation": self.operation,
            "request_time": self.timestamp,
        }
        if self.user_id:
            fields["user_id"] = self.user_id
        return fields


@dataclass
class TokenValidationResult:
    """ユーザートークン検証結果"""

    valid: bool
    claims: dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
