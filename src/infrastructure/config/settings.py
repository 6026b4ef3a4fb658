"""Application Settings"""
from functools import lru_cache
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings

from src.domain.proxy.errors import ConfigurationError

REQUIRED_KEYS = ("environment",)


class Settings(BaseSettings):
    """
    ゲートウェイ設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    # Service
    service_name: str = "spfx-footer-gateway"
    environment: str = "prod"
    log_level: str = "INFO"

    # CORS (SPFx のテナントオリジン)
    spfx_origin: str = "*"

    # AWS
    aws_region: str = "us-east-1"

    # Azure / Microsoft 365 (App Registration 後に設定)
    # client secret は Secrets Manager 側で管理する
    azure_tenant_id: Optional[str] = None
    azure_client_id: Optional[str] = None

    # Lambda
    function_timeout: int = 30

    # Feature flags
    enable_detailed_logging: bool = False

    class Config:
        env_prefix = ""
        env_file = ".env"
        case_sensitive = False

    @property
    def is_production(self) -> bool:
        return self.environment == "prod"


@lru_cache()
def get_settings() -> Settings:
    """
    設定のシングルトンインスタンスを取得

    型変換に失敗した環境変数は ConfigurationError として報告する。
    """
    try:
        return Settings()
    except ValidationError as exc:
        invalid_keys = sorted({str(error["loc"][0]).upper() for error in exc.errors() if error["loc"]})
        raise ConfigurationError(
            f"Invalid environment variables: {', '.join(invalid_keys)}"
        ) from exc


def validate_config(settings: Optional[Settings] = None) -> None:
    """必須設定の検証"""
    settings = settings or get_settings()
    missing_keys = [key for key in REQUIRED_KEYS if not getattr(settings, key)]

    if missing_keys:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(k.upper() for k in missing_keys)}"
        )
