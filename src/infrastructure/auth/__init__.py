"""Auth implementations"""
from src.infrastructure.auth.auth_service import AuthService, SERVICE_ACCOUNT_NOT_CONFIGURED

__all__ = ["AuthService", "SERVICE_ACCOUNT_NOT_CONFIGURED"]
