"""Error Handler Middleware Unit Tests"""
import json

import pytest
from structlog.testing import capture_logs

from src.domain.proxy.errors import ApiError
from src.domain.proxy.value_objects import LogContext
from src.presentation.middleware.error_handler import (
    handle_authorization_error,
    handle_not_found_error,
    handle_validation_error,
    with_error_handler,
)


@pytest.fixture
def log_context() -> LogContext:
    return LogContext(
        request_id="req-0001",
        operation="GET /graph/me",
        timestamp="2023-11-14T22:13:20.000Z",
    )


class TestWithErrorHandler:
    """with_error_handler のテスト"""

    def test_success(self, log_context: LogContext):
        """正常: ハンドラの戻り値が 200 で返る"""
        response = with_error_handler(lambda: {"status": "healthy"}, log_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {"status": "healthy"}
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"

    def test_api_error(self, log_context: LogContext):
        """異常: ApiError はそのステータスコードに変換される"""
        # Arrange
        def handler():
            raise ApiError(403, "Forbidden site", {"site": "hr"})

        # Act
        with capture_logs() as logs:
            response = with_error_handler(handler, log_context)

        # Assert
        assert response["statusCode"] == 403
        assert json.loads(response["body"]) == {
            "error": "Forbidden site",
            "details": {"site": "hr"},
        }
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["status_code"] == 403
        assert logs[0]["request_id"] == "req-0001"

    def test_api_error_without_details(self, log_context: LogContext):
        """異常: details が無い場合はボディから省略される"""
        def handler():
            raise ApiError(500, "Service account authentication not yet configured.")

        response = with_error_handler(handler, log_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {
            "error": "Service account authentication not yet configured."
        }

    def test_unhandled_error(self, log_context: LogContext):
        """異常: 想定外の例外は 500 + requestId"""
        # Arrange
        def handler():
            raise RuntimeError("boom")

        # Act
        with capture_logs() as logs:
            response = with_error_handler(handler, log_context)

        # Assert
        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {
            "error": "Internal Server Error",
            "requestId": "req-0001",
        }
        assert logs[0]["event"] == "unhandled_error"
        assert logs[0]["log_level"] == "error"
        assert logs[0]["error_name"] == "RuntimeError"
        assert logs[0]["error_message"] == "boom"
        assert "exc_info" not in logs[0]

    def test_unhandled_error_with_detailed_logging(
        self, log_context: LogContext, monkeypatch: pytest.MonkeyPatch
    ):
        """正常: 詳細ログ有効時はスタックトレースを含める"""
        monkeypatch.setenv("ENABLE_DETAILED_LOGGING", "true")

        def handler():
            raise KeyError("missing")

        with capture_logs() as logs:
            with_error_handler(handler, log_context)

        assert isinstance(logs[0]["exc_info"], KeyError)

    def test_unserializable_result(self, log_context: LogContext):
        """異常: シリアライズできない戻り値も 500 に変換される"""
        with capture_logs() as logs:
            response = with_error_handler(lambda: {"value": object()}, log_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["error"] == "Internal Server Error"
        assert logs[0]["error_name"] == "TypeError"


class TestErrorResponses:
    """個別エラーレスポンスのテスト"""

    def test_validation_error(self, log_context: LogContext):
        """異常: 400 + error/details"""
        response = handle_validation_error(log_context, "siteUrl is required", {"field": "siteUrl"})

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {
            "error": "siteUrl is required",
            "details": {"field": "siteUrl"},
        }

    def test_authorization_error_default_message(self, log_context: LogContext):
        """異常: 401 + Unauthorized"""
        response = handle_authorization_error(log_context)

        assert response["statusCode"] == 401
        assert json.loads(response["body"]) == {"error": "Unauthorized"}

    def test_not_found_error(self, log_context: LogContext):
        """異常: 404 + '<resource> not found'"""
        with capture_logs() as logs:
            response = handle_not_found_error(log_context, "List")

        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {"error": "List not found"}
        assert logs[0]["resource"] == "List"
