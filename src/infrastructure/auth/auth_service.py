"""Azure AD Auth Service"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.gateways import ITokenProvider
from src.domain.proxy.constants import HttpStatus
from src.domain.proxy.errors import ApiError
from src.domain.proxy.value_objects import LogContext, TokenValidationResult

logger = structlog.get_logger()

SERVICE_ACCOUNT_NOT_CONFIGURED = (
    "Service account authentication not yet configured. Set up App Registration first."
)


@dataclass
class CachedToken:
    """キャッシュ済みトークン"""
    token: str
    expires_at: float


class AuthService(ITokenProvider):
    """
    Azure AD 認証サービス

    App Registration のセットアップ完了までは仮実装:
    - サービスアカウントトークンの取得は常に ApiError(500)
    - ユーザートークンの検証は常に無効
    """

    def __init__(self) -> None:
        self._token_cache: dict[str, CachedToken] = {}

    async def get_service_account_token(self, context: LogContext) -> str:
        """
        サービスアカウントトークンを取得

        TODO: App Registration 後に client credentials フロー
        (Secrets Manager から資格情報を取得) とキャッシュを実装する。
        """
        logger.info("service_account_token_requested", request_id=context.request_id)
        raise ApiError(HttpStatus.INTERNAL_ERROR, SERVICE_ACCOUNT_NOT_CONFIGURED)

    async def validate_user_token(
        self, token: str, context: LogContext
    ) -> TokenValidationResult:
        """SPFx から渡されたユーザートークンを検証"""
        logger.debug("validating_user_token", request_id=context.request_id)
        logger.warning(
            "token_validation_failed",
            request_id=context.request_id,
            error="Token validation not yet implemented",
        )
        return TokenValidationResult(valid=False, error="Invalid token")

    def clear_cache(self) -> None:
        """トークンキャッシュをクリア"""
        self._token_cache.clear()

    @property
    def cached_token_count(self) -> int:
        return len(self._token_cache)
