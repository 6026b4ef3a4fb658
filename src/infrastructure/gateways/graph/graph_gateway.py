"""Microsoft Graph Gateway Implementation"""
from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

import httpx

from src.application.ports.gateways import IGraphGateway, ITokenProvider
from src.domain.proxy.constants import (
    AUTHORIZATION_HEADER,
    BEARER_SCHEME,
    CONTENT_TYPE_HEADER,
    ContentType,
    GRAPH_BASE_URL,
    GRAPH_ME_ENDPOINT,
    GRAPH_USERS_ENDPOINT,
)
from src.domain.proxy.value_objects import LogContext
from src.infrastructure.gateways.base_http_gateway import BaseHttpGateway

# encodeURIComponent 互換の非エスケープ文字
_URI_COMPONENT_SAFE = "-_.!~*'()"


class GraphGateway(BaseHttpGateway, IGraphGateway):
    """
    Microsoft Graph Gateway

    サービスアカウントトークン (client credentials) で Graph API を呼び出す。
    トークンは ITokenProvider から取得する。
    """

    service_label = "Graph API"
    failure_message = "Failed to call Microsoft Graph API"

    def __init__(
        self,
        token_provider: ITokenProvider,
        base_url: str = GRAPH_BASE_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self._token_provider = token_provider
        self.base_url = base_url.rstrip("/")

    async def _request(
        self,
        method: str,
        endpoint: str,
        context: LogContext,
        body: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        token = await self._token_provider.get_service_account_token(context)
        headers = {
            AUTHORIZATION_HEADER: f"{BEARER_SCHEME} {token}",
            CONTENT_TYPE_HEADER: ContentType.JSON.value,
        }
        return await self._send(
            method, f"{self.base_url}{endpoint}", endpoint, context, headers, body
        )

    async def get_current_user(self, context: LogContext) -> dict[str, Any]:
        return await self._request("GET", GRAPH_ME_ENDPOINT, context)

    async def get_user_by_id(self, user_id: str, context: LogContext) -> dict[str, Any]:
        return await self._request("GET", f"{GRAPH_USERS_ENDPOINT}/{user_id}", context)

    async def list_users(
        self,
        context: LogContext,
        filter: Optional[str] = None,
        top: Optional[int] = None,
    ) -> dict[str, Any]:
        """$filter / $top 付きでユーザー一覧を取得"""
        return await self._request("GET", build_users_endpoint(filter, top), context)


def build_users_endpoint(filter: Optional[str] = None, top: Optional[int] = None) -> str:
    """ユーザー一覧エンドポイントのクエリを組み立てる"""
    params = []
    if filter:
        params.append(f"$filter={quote(filter, safe=_URI_COMPONENT_SAFE)}")
    if top:
        params.append(f"$top={top}")

    endpoint = GRAPH_USERS_ENDPOINT
    if params:
        endpoint += "?" + "&".join(params)
    return endpoint
