"""Objeto `error` das respostas da Graph API e sua classificação.

Formato devolvido pela Meta:
    {"error": {"message": "...", "type": "OAuthException", "code": 190,
               "error_subcode": 463, "fbtrace_id": "..."}}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# 190 token expirado; 131026 destinatário sem WhatsApp;
# 131047 fora da janela de 24h; 132000 template com parâmetros errados
PERMANENT_ERROR_CODES = frozenset({100, 190, 400, 401, 403, 404, 413, 131026, 131047, 132000})
PERMANENT_ERROR_TYPES = frozenset({"OAuthException", "InvalidRequest"})

# limites de envio da Cloud API; mesmo com type OAuthException valem retry
THROTTLING_ERROR_CODES = frozenset({4, 80007, 130429, 131056})


@dataclass(frozen=True)
class WhatsAppApiError:
    error_type: str
    error_code: int
    error_message: str
    is_permanent: bool
    error_subcode: int | None = None
    fbtrace_id: str | None = None


def is_permanent_error(error_code: int, error_type: str) -> bool:
    """False para throttling; True para códigos/tipos que não mudam com retry."""
    if error_code in THROTTLING_ERROR_CODES:
        return False
    return error_code in PERMANENT_ERROR_CODES or error_type in PERMANENT_ERROR_TYPES


def _as_int(value: Any, default: int | None) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def parse_meta_error(response_data: Any) -> WhatsAppApiError | None:
    """WhatsAppApiError quando a resposta traz um objeto `error`; senão None."""
    error = response_data.get("error") if isinstance(response_data, dict) else None
    if not isinstance(error, dict) or not error:
        return None

    error_type = str(error.get("type") or "unknown")
    error_code = _as_int(error.get("code"), 0) or 0
    return WhatsAppApiError(
        error_type=error_type,
        error_code=error_code,
        error_message=str(error.get("message") or "unknown error"),
        is_permanent=is_permanent_error(error_code, error_type),
        error_subcode=_as_int(error.get("error_subcode"), None),
        fbtrace_id=error.get("fbtrace_id"),
    )
