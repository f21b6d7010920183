"""Logs das chamadas à Graph API.

Segmentos numéricos da URL (phone_number_id) são mascarados; token e
corpo da mensagem nunca entram no log.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta_errors import WhatsAppApiError

logger = logging.getLogger(__name__)

_NUMERIC_SEGMENT = re.compile(r"/\d+(?=/|$)")


def redact_endpoint(endpoint: str) -> str:
    """`.../v21.0/1234/messages` -> `.../v21.0/{id}/messages`."""
    return _NUMERIC_SEGMENT.sub("/{id}", endpoint)


def log_meta_error(meta_error: WhatsAppApiError, method: str, endpoint: str) -> None:
    logger.warning(
        "whatsapp_api_error",
        extra={
            "method": method,
            "endpoint": redact_endpoint(endpoint),
            "error_type": meta_error.error_type,
            "error_code": meta_error.error_code,
            "is_permanent": meta_error.is_permanent,
        },
    )


def log_success(method: str, endpoint: str, status_code: int) -> None:
    logger.debug(
        "whatsapp_request_succeeded",
        extra={
            "method": method,
            "endpoint": redact_endpoint(endpoint),
            "status_code": status_code,
        },
    )
