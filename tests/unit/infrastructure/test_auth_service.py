"""AuthService Unit Tests"""
import asyncio

import pytest
from structlog.testing import capture_logs

from src.domain.proxy.errors import ApiError
from src.domain.proxy.value_objects import LogContext
from src.infrastructure.auth import SERVICE_ACCOUNT_NOT_CONFIGURED, AuthService


@pytest.fixture
def log_context() -> LogContext:
    return LogContext(request_id="req-auth", operation="GET /graph/me", timestamp="t")


class TestAuthService:
    """App Registration 前の AuthService のテスト"""

    def test_service_account_token_not_configured(self, log_context: LogContext):
        """異常: サービスアカウントトークンは未設定エラー"""
        service = AuthService()

        with capture_logs() as logs:
            with pytest.raises(ApiError) as exc_info:
                asyncio.run(service.get_service_account_token(log_context))

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == SERVICE_ACCOUNT_NOT_CONFIGURED
        assert logs[0]["event"] == "service_account_token_requested"

    def test_validate_user_token_is_invalid(self, log_context: LogContext):
        """異常: ユーザートークンは常に無効"""
        result = asyncio.run(AuthService().validate_user_token("eyJ...", log_context))

        assert result.valid is False
        assert result.error == "Invalid token"
        assert result.claims == {}

    def test_clear_cache(self):
        """正常: キャッシュは空のままクリアできる"""
        service = AuthService()

        service.clear_cache()

        assert service.cached_token_count == 0
