"""Decodificação do corpo POST do webhook."""

from __future__ import annotations

import json
from typing import Any


class WebhookRequestError(ValueError):
    pass


class InvalidJsonError(WebhookRequestError):
    """Corpo não é JSON ou não é um objeto no topo."""


def parse_webhook_body(raw_body: bytes | str | None) -> dict[str, Any]:
    """Envelope do webhook como dict; corpo vazio vira `{}`.

    Raises:
        InvalidJsonError: `invalid_json` ou `payload_not_object`
    """
    if not raw_body:
        return {}
    try:
        envelope = json.loads(raw_body)
    except (UnicodeDecodeError, ValueError) as exc:
        raise InvalidJsonError("invalid_json") from exc
    if isinstance(envelope, dict):
        return envelope
    raise InvalidJsonError("payload_not_object")
