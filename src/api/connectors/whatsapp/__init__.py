"""Borda com a WhatsApp Cloud API: cliente Graph API e webhook.

Único ponto de IO de rede do serviço.
"""

from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import WhatsAppHttpClient, bearer_headers, create_whatsapp_http_client
from .meta_errors import WhatsAppApiError, is_permanent_error, parse_meta_error

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "WhatsAppApiError",
    "WhatsAppHttpClient",
    "bearer_headers",
    "create_whatsapp_http_client",
    "is_permanent_error",
    "parse_meta_error",
]
