"""Webhook do WhatsApp montado em /webhook/whatsapp.

GET responde ao handshake da Meta (hub.challenge em texto puro).
POST recebe o envelope e devolve a resposta de Flow extraída da
primeira mensagem; envelopes sem mensagem retornam `flow.success = false`.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.whatsapp.webhook import (
    InvalidJsonError,
    WebhookChallenge,
    WebhookChallengeError,
    parse_webhook_body,
    verify_webhook_challenge,
)
from api.normalizers.whatsapp import extract_flow_response
from app.observability import correlation_id_from_headers, correlation_scope
from config.settings import get_whatsapp_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _plain_text(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


@router.get("/")
async def verify_webhook(request: Request) -> Response:
    challenge = WebhookChallenge.from_query(request.query_params)
    try:
        answer = verify_webhook_challenge(
            challenge,
            get_whatsapp_settings().webhook_verify_token,
        )
    except WebhookChallengeError as exc:
        logger.warning("webhook_verification_failed", extra={"reason": str(exc)})
        return _plain_text("Forbidden", status.HTTP_403_FORBIDDEN)

    logger.info("webhook_verified", extra={"hub_mode": challenge.mode})
    return _plain_text(answer, status.HTTP_200_OK)


@router.post("/", response_model=None)
async def receive_webhook(request: Request) -> Response | dict[str, Any]:
    with correlation_scope(correlation_id_from_headers(request.headers)) as correlation_id:
        raw_body = await request.body()
        try:
            envelope = parse_webhook_body(raw_body)
        except InvalidJsonError as exc:
            logger.warning("webhook_json_invalid", extra={"error": str(exc)})
            return _plain_text("Bad Request", status.HTTP_400_BAD_REQUEST)

        result = extract_flow_response(envelope)
        logger.info(
            "webhook_received",
            extra={"payload_size": len(raw_body), "flow_response": result.success},
        )
        return {
            "status": "received",
            "correlation_id": correlation_id,
            "flow": result.to_dict(),
        }
