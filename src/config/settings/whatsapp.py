"""Credenciais e endpoints da WhatsApp Cloud API (Graph API).

Variáveis de ambiente (prefixo WHATSAPP_): ACCESS_TOKEN, PHONE_NUMBER_ID,
WEBHOOK_VERIFY_TOKEN, API_VERSION, API_BASE_URL,
REQUEST_TIMEOUT_SECONDS e MAX_RETRIES.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from config.settings.env import env_float, env_int, env_str

GRAPH_API_VERSION = "v21.0"
GRAPH_API_BASE_URL = "https://graph.facebook.com"


@dataclass(frozen=True)
class WhatsAppSettings:
    """Credencial `whatsAppApi` usada pelos nodes.

    Attributes:
        access_token: Token permanente (Bearer)
        phone_number_id: Número remetente no Meta Business
        webhook_verify_token: Token do handshake GET do webhook
        api_version: Versão da Graph API na URL
        api_base_url: Host da Graph API
        request_timeout_seconds: Timeout por tentativa HTTP
        max_retries: Tentativas extras do teste de credencial (429/5xx/rede)
    """

    access_token: str = ""
    phone_number_id: str = ""
    webhook_verify_token: str = ""
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    @property
    def api_endpoint(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    def get_phone_number_endpoint(self, phone_number_id: str | None = None) -> str:
        """`{api_endpoint}/{phone_number_id}`; consultado no teste de credenciais.

        Raises:
            ValueError: Sem phone_number_id informado nem configurado
        """
        number_id = phone_number_id or self.phone_number_id
        if not number_id:
            raise ValueError("phone_number_id is required")
        return f"{self.api_endpoint}/{number_id}"

    def get_messages_endpoint(self, phone_number_id: str | None = None) -> str:
        """`{api_endpoint}/{phone_number_id}/messages`, destino dos envios."""
        return self.get_phone_number_endpoint(phone_number_id) + "/messages"

    def validate(self) -> list[str]:
        """Problemas de configuração; lista vazia quando tudo está OK."""
        checks = (
            (not self.phone_number_id, "WHATSAPP_PHONE_NUMBER_ID not configured"),
            (not self.access_token, "WHATSAPP_ACCESS_TOKEN not configured"),
            (self.request_timeout_seconds <= 0, "WHATSAPP_REQUEST_TIMEOUT_SECONDS must be > 0"),
            (self.max_retries < 0, "WHATSAPP_MAX_RETRIES must be >= 0"),
        )
        return [message for failed, message in checks if failed]


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """WhatsAppSettings lida do ambiente uma vez por processo."""
    return WhatsAppSettings(
        access_token=env_str("WHATSAPP_ACCESS_TOKEN"),
        phone_number_id=env_str("WHATSAPP_PHONE_NUMBER_ID"),
        webhook_verify_token=env_str("WHATSAPP_WEBHOOK_VERIFY_TOKEN"),
        api_version=env_str("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=env_str("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=env_float("WHATSAPP_REQUEST_TIMEOUT_SECONDS", 30.0),
        max_retries=env_int("WHATSAPP_MAX_RETRIES", 3),
    )
