"""Gateway Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from src.domain.proxy.value_objects import LogContext, TokenValidationResult


class ITokenProvider(ABC):
    """
    Token Provider Interface

    Azure AD のサービスアカウントトークン取得と
    SPFx から渡されるユーザートークンの検証を抽象化する。
    """

    @abstractmethod
    async def get_service_account_token(self, context: LogContext) -> str:
        """サービスアカウントのアクセストークンを取得"""
        pass

    @abstractmethod
    async def validate_user_token(
        self, token: str, context: LogContext
    ) -> TokenValidationResult:
        """ユーザートークンを検証"""
        pass


class IGraphGateway(ABC):
    """
    Microsoft Graph Gateway Interface

    Graph API との通信を抽象化する。
    """

    @abstractmethod
    async def get_current_user(self, context: LogContext) -> dict[str, Any]:
        """現在のユーザー情報を取得"""
        pass

    @abstractmethod
    async def get_user_by_id(self, user_id: str, context: LogContext) -> dict[str, Any]:
        """ID でユーザーを取得"""
        pass

    @abstractmethod
    async def list_users(
        self,
        context: LogContext,
        filter: Optional[str] = None,
        top: Optional[int] = None,
    ) -> dict[str, Any]:
        """ユーザー一覧を取得"""
        pass


class ISharePointGateway(ABC):
    """
    SharePoint REST Gateway Interface

    SPFx からのパススルートークンで SharePoint REST API を呼び出す。
    """

    @abstractmethod
    async def get_list_items(
        self,
        site_url: str,
        list_id: str,
        context: LogContext,
        token: Optional[str] = None,
    ) -> dict[str, Any]:
        """リストアイテムを取得"""
        pass

    @abstractmethod
    async def get_site_info(
        self, site_url: str, context: LogContext, token: Optional[str] = None
    ) -> dict[str, Any]:
        """サイト情報を取得"""
        pass

    @abstractmethod
    async def get_lists(
        self, site_url: str, context: LogContext, token: Optional[str] = None
    ) -> dict[str, Any]:
        """リスト一覧を取得"""
        pass
