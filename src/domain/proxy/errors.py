"""Gateway Errors"""
from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """
    HTTP ステータスを伴う API エラー

    error_handler ミドルウェアでステータスコード付きのレスポンスに変換される。
    """

    def __init__(self, status_code: int, message: str, details: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ConfigurationError(Exception):
    """必須設定の欠落エラー"""

    pass
