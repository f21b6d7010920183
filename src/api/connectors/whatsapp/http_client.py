"""Cliente da WhatsApp Cloud API sobre o HttpClient.

Adiciona a autenticação Bearer e converte respostas de erro em HttpError:
objeto `error` da Graph API (status_code = código Meta) ou qualquer status
>= 400 (status_code = status HTTP); details guarda o corpo original.

O envio de mensagem é feito uma única vez; só a consulta do número
(teste de credencial) usa o retry do HttpClient. O is_retryable de erros
Meta apenas classifica a falha para quem chama.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.whatsapp.meta_errors import parse_meta_error
from api.connectors.whatsapp.meta_logging import log_meta_error, log_success

if TYPE_CHECKING:
    import httpx

    from config.settings import WhatsAppSettings

logger = logging.getLogger(__name__)

HTTP_ERROR_MIN_STATUS = 400


def bearer_headers(access_token: str) -> dict[str, str]:
    """Headers de autenticação.

    Raises:
        ValueError: Token vazio (credencial não configurada)
    """
    token = (access_token or "").strip()
    if not token:
        raise ValueError(
            "access_token is required. Check that WHATSAPP_ACCESS_TOKEN is configured."
        )
    return {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}


class WhatsAppHttpClient(HttpClient):
    """Chamadas da credencial whatsAppApi: envio de mensagem e consulta do número."""

    async def send_message(
        self,
        endpoint: str,
        access_token: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """POST em `{phone_number_id}/messages`.

        Raises:
            ValueError: Token vazio
            HttpError: Falha de rede, status >= 400 ou erro Meta (sem retry)
        """
        response = await self.post(
            endpoint,
            json=payload,
            headers=bearer_headers(access_token),
            retry=False,
        )
        return self._graph_body(response, "POST", endpoint)

    async def fetch_phone_number(self, endpoint: str, access_token: str) -> dict[str, Any]:
        """GET em `{phone_number_id}`; usado para testar a credencial."""
        response = await self.get(endpoint, headers=bearer_headers(access_token))
        return self._graph_body(response, "GET", endpoint)

    @staticmethod
    def _graph_body(response: httpx.Response, method: str, endpoint: str) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError as exc:
            logger.error(
                "whatsapp_response_invalid_json",
                extra={"method": method, "status_code": response.status_code},
            )
            raise HttpError("invalid JSON response", status_code=response.status_code) from exc

        meta_error = parse_meta_error(body)
        if meta_error is not None:
            log_meta_error(meta_error, method, endpoint)
            raise HttpError(
                f"Meta API error: {meta_error.error_type} ({meta_error.error_code})",
                status_code=meta_error.error_code,
                is_retryable=not meta_error.is_permanent,
                details=body,
            )

        if response.status_code >= HTTP_ERROR_MIN_STATUS:
            logger.error(
                "whatsapp_http_error_status",
                extra={"method": method, "status_code": response.status_code},
            )
            raise HttpError(
                f"HTTP error {response.status_code}",
                status_code=response.status_code,
                details=body if isinstance(body, dict) else None,
            )

        log_success(method, endpoint, response.status_code)
        return body


def create_whatsapp_http_client(settings: WhatsAppSettings | None = None) -> WhatsAppHttpClient:
    """Cliente com timeout e retries vindos de WhatsAppSettings."""
    if settings is None:
        from config.settings import get_whatsapp_settings

        settings = get_whatsapp_settings()
    return WhatsAppHttpClient(
        HttpClientConfig(
            timeout_seconds=settings.request_timeout_seconds,
            max_retries=settings.max_retries,
        )
    )
