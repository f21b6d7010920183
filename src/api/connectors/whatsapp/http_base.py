"""Cliente HTTP assíncrono com retry para os conectores da camada API.

Retry com backoff exponencial para 429, 5xx, timeout e falha de conexão,
exceto quando a chamada pede `retry=False` (envios não idempotentes).
Demais respostas (inclusive 4xx) são devolvidas ao chamador sem retry.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RATE_LIMIT_STATUS = 429
SERVER_ERROR_MIN_STATUS = 500


@dataclass
class HttpClientConfig:
    """Timeout, retries e headers aplicados a toda requisição."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 2.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Falha de transporte ou erro devolvido pelo provedor.

    Attributes:
        status_code: Status HTTP ou código de erro do provedor
        is_retryable: Se uma nova tentativa pode ter sucesso. Só o loop de
            retry do HttpClient age sobre ele; em erros Meta é informativo
        details: Corpo de erro do provedor, quando houver
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable
        self.details = details


def is_retryable_status(status_code: int) -> bool:
    return status_code == RATE_LIMIT_STATUS or status_code >= SERVER_ERROR_MIN_STATUS


class HttpClient:
    """Cliente HTTP genérico; um AsyncClient por tentativa."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
        *,
        retry: bool = True,
    ) -> httpx.Response:
        return await self._request("POST", url, json=json, headers=headers, retry=retry)

    async def get(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        return await self._request("GET", url, headers=headers)

    async def _send_once(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None,
        headers: dict[str, str],
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
        except (httpx.TimeoutException, httpx.ConnectError) as exc:
            raise HttpError("http_connection_error", is_retryable=True) from exc

        if is_retryable_status(response.status_code):
            body = _json_or_none(response)
            raise HttpError(
                "http_retryable_status",
                status_code=response.status_code,
                is_retryable=True,
                details=body,
            )
        return response

    async def _request(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        retry: bool = True,
    ) -> httpx.Response:
        max_retries = self._config.max_retries if retry else 0
        merged_headers = {**self._config.default_headers, **(headers or {})}
        attempt = 0
        while True:
            try:
                return await self._send_once(method, url, json, merged_headers)
            except HttpError as exc:
                if not exc.is_retryable or attempt >= max_retries:
                    raise
                logger.info(
                    "http_retry_scheduled",
                    extra={
                        "method": method,
                        "attempt": attempt + 1,
                        "status_code": exc.status_code,
                    },
                )
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
                attempt += 1


def _json_or_none(response: httpx.Response) -> dict[str, Any] | None:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    await asyncio.sleep(min((2**attempt) * base, max_seconds))
