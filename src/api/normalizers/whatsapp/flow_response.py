"""Extrator de respostas de WhatsApp Flows (nfm_reply).

Responsabilidades:
- Localizar a mensagem em entry[0].changes[0].value.messages[0]
- Copiar id, from e timestamp da mensagem
- Decodificar interactive.nfm_reply.response_json

Nunca levanta exceção: mensagem ausente resulta em success=False sem erro
(mensagem vazia `{}` conta como encontrada);
falhas inesperadas vão para o campo `error`, preservando o que já foi lido.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from app.protocols.models import FlowExtractionResult
from config.logging import log_fallback

logger = logging.getLogger(__name__)


def _first(container: Any, key: str) -> Any:
    """Retorna container[key][0] ou None se ausente/vazio."""
    if not isinstance(container, Mapping):
        return None
    items = container.get(key)
    if not isinstance(items, list) or not items:
        return None
    return items[0]


def _locate_message(envelope: Any) -> Any:
    change = _first(_first(envelope, "entry"), "changes")
    if not isinstance(change, Mapping):
        return None
    return _first(change.get("value"), "messages")


def _decode_response_json(raw: Any) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        log_fallback(logger, "flow_response_json", reason="json_decode_error")
        return raw


def extract_flow_response(envelope: Any) -> FlowExtractionResult:
    """Extrai a resposta de Flow de um envelope de webhook.

    Args:
        envelope: Payload bruto do webhook (JSON-like)

    Returns:
        FlowExtractionResult construído uma única vez
    """
    fields: dict[str, Any] = {}

    try:
        message = _locate_message(envelope)
        if message is not None:
            fields["message_id"] = message.get("id")
            fields["from_number"] = message.get("from")
            fields["timestamp"] = message.get("timestamp")
            fields["success"] = True

            interactive = message.get("interactive")
            nfm_reply = interactive.get("nfm_reply") if interactive else None
            if nfm_reply:
                raw = nfm_reply.get("response_json")
                fields["flow_token"] = raw
                fields["flow_data"] = _decode_response_json(raw)
    except Exception as exc:
        logger.warning(
            "flow_response_extraction_failed",
            extra={"error_type": type(exc).__name__},
        )
        fields["error"] = f"Extraction error: {exc}"

    return FlowExtractionResult(**fields)
