"""SharePoint REST Gateway Implementation"""
from __future__ import annotations

from typing import Any, Optional

from src.application.ports.gateways import ISharePointGateway
from src.domain.proxy.constants import (
    AUTHORIZATION_HEADER,
    BEARER_SCHEME,
    CONTENT_TYPE_HEADER,
    ContentType,
    HttpStatus,
    SHAREPOINT_REST_ENDPOINT,
)
from src.domain.proxy.errors import ApiError
from src.domain.proxy.value_objects import LogContext
from src.infrastructure.gateways.base_http_gateway import BaseHttpGateway


class SharePointGateway(BaseHttpGateway, ISharePointGateway):
    """
    SharePoint REST Gateway

    SPFx から渡されたユーザートークンをそのまま転送する (パススルー)。
    """

    service_label = "SharePoint API"
    failure_message = "Failed to call SharePoint REST API"

    @staticmethod
    def _validate_token(token: Optional[str]) -> None:
        # TODO: JWT の署名・有効期限・スコープ検証 (App Registration 後)
        if not token or not token.strip():
            raise ApiError(HttpStatus.UNAUTHORIZED, "No authorization token provided")

    async def _request(
        self,
        site_url: str,
        method: str,
        endpoint: str,
        context: LogContext,
        token: Optional[str] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        headers = {
            CONTENT_TYPE_HEADER: ContentType.JSON.value,
            "Accept": ContentType.JSON.value,
        }
        if token is not None:
            self._validate_token(token)
            headers[AUTHORIZATION_HEADER] = f"{BEARER_SCHEME} {token}"

        url = f"{site_url.rstrip('/')}{SHAREPOINT_REST_ENDPOINT}{endpoint}"
        return await self._send(method, url, endpoint, context, headers, body)

    async def get_list_items(
        self,
        site_url: str,
        list_id: str,
        context: LogContext,
        token: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            site_url, "GET", f"/web/lists('{list_id}')/items", context, token
        )

    async def get_site_info(
        self, site_url: str, context: LogContext, token: Optional[str] = None
    ) -> dict[str, Any]:
        return await self._request(site_url, "GET", "/web", context, token)

    async def get_lists(
        self, site_url: str, context: LogContext, token: Optional[str] = None
    ) -> dict[str, Any]:
        return await self._request(site_url, "GET", "/web/lists", context, token)
