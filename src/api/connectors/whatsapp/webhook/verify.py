"""Handshake de verificação do webhook (GET com hub.mode/hub.verify_token)."""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SUBSCRIBE_MODE = "subscribe"


class WebhookChallengeError(ValueError):
    """Handshake recusado (token ausente, divergente ou modo inválido)."""


@dataclass(frozen=True, slots=True)
class WebhookChallenge:
    """Parâmetros `hub.*` enviados pela Meta na verificação."""

    mode: str | None = None
    verify_token: str | None = None
    challenge: str | None = None

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> WebhookChallenge:
        return cls(
            mode=params.get("hub.mode"),
            verify_token=params.get("hub.verify_token"),
            challenge=params.get("hub.challenge"),
        )


def verify_webhook_challenge(
    challenge: WebhookChallenge,
    expected_token: str | None,
) -> str:
    """Confere o handshake contra o webhook_verify_token configurado.

    Raises:
        WebhookChallengeError: `missing_verify_token` se nada configurado,
            `verification_failed` se modo ou token não conferem

    Returns:
        Valor de hub.challenge a devolver como texto puro ("" se ausente)
    """
    if not expected_token:
        raise WebhookChallengeError("missing_verify_token")

    token_ok = hmac.compare_digest(
        (challenge.verify_token or "").encode("utf-8"),
        expected_token.encode("utf-8"),
    )
    if challenge.mode != SUBSCRIBE_MODE or not token_ok:
        raise WebhookChallengeError("verification_failed")

    return challenge.challenge or ""
