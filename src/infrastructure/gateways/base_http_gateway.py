"""Base HTTP Gateway (httpx)"""
from __future__ import annotations

from typing import Any, Optional

import httpx
import structlog

from src.domain.proxy.constants import HttpStatus
from src.domain.proxy.errors import ApiError
from src.domain.proxy.value_objects import LogContext
from src.infrastructure.config import get_settings

logger = structlog.get_logger()


class BaseHttpGateway:
    """
    Microsoft 365 系 REST API 呼び出しの共通処理

    - 非 2xx は ApiError (上流のステータスを維持)
    - 通信・デコード失敗は ApiError(500)
    """

    # ログ・エラーメッセージ用のサービス名
    service_label = "HTTP API"
    failure_message = "Failed to call HTTP API"

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout if timeout is not None else get_settings().function_timeout
        self._transport = transport

    async def _send(
        self,
        method: str,
        url: str,
        endpoint: str,
        context: LogContext,
        headers: dict[str, str],
        body: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        log = logger.bind(
            request_id=context.request_id,
            operation=context.operation,
            endpoint=endpoint,
            method=method,
        )

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.request(method, url, headers=headers, json=body)

            if not response.is_success:
                error_data = self._error_payload(response)
                log.warning(
                    "upstream_api_error",
                    service=self.service_label,
                    status_code=response.status_code,
                    reason=response.reason_phrase,
                    error_data=error_data,
                )
                raise ApiError(
                    response.status_code,
                    f"{self.service_label} returned {response.reason_phrase}",
                    error_data,
                )

            data = response.json()
            log.info("upstream_api_call_succeeded", service=self.service_label)
            return data

        except ApiError:
            raise
        except (httpx.HTTPError, ValueError, TypeError) as exc:
            log.error(
                "upstream_api_call_failed",
                service=self.service_label,
                error_message=str(exc),
                error_name=type(exc).__name__,
            )
            raise ApiError(
                HttpStatus.INTERNAL_ERROR,
                self.failure_message,
                {"endpoint": endpoint, "originalError": str(exc)},
            ) from exc

    @staticmethod
    def _error_payload(response: httpx.Response) -> Any:
        """エラーレスポンスの JSON (解析できなければ空 dict)"""
        try:
            return response.json()
        except ValueError:
            return {}
