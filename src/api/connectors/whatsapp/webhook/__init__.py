"""Webhook WhatsApp: verificação do challenge e parsing do corpo."""

from .receive import InvalidJsonError, WebhookRequestError, parse_webhook_body
from .verify import WebhookChallenge, WebhookChallengeError, verify_webhook_challenge

__all__ = [
    "InvalidJsonError",
    "WebhookChallenge",
    "WebhookChallengeError",
    "WebhookRequestError",
    "parse_webhook_body",
    "verify_webhook_challenge",
]
