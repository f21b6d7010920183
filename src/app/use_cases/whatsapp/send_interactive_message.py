"""Use case para envio de mensagens interativas (botões, lista, Flow)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import InteractiveMessageSpec
    from app.protocols.ports import (
        MessageSpecValidatorProtocol,
        OutboundSenderProtocol,
        PayloadBuilderProtocol,
    )

logger = logging.getLogger(__name__)


def first_message_id(response: dict[str, Any]) -> str | None:
    """Extrai messages[0].id da resposta da Graph API (None se ausente)."""
    messages = response.get("messages") if isinstance(response, dict) else None
    if not isinstance(messages, list) or not messages:
        return None
    first = messages[0]
    return first.get("id") if isinstance(first, dict) else None


class SendInteractiveMessageUseCase:
    """Orquestra validação, build e envio de uma mensagem interativa.

    Erros de validação e de transporte propagam para o chamador,
    que decide entre abortar o lote ou registrar o item como falho.
    """

    def __init__(
        self,
        validator: MessageSpecValidatorProtocol,
        builder: PayloadBuilderProtocol,
        sender: OutboundSenderProtocol,
    ) -> None:
        self._validator = validator
        self._builder = builder
        self._sender = sender

    async def execute(self, spec: InteractiveMessageSpec) -> dict[str, Any]:
        """Valida, monta o payload e envia.

        Returns:
            JSON de resposta da Graph API

        Raises:
            ValidationError: Se a especificação violar limites estruturais
            HttpError: Se o envio falhar
        """
        self._validator.validate_message_spec(spec)
        payload = self._builder.build_full_payload(spec)
        response = await self._sender.send(payload)

        logger.info(
            "interactive_message_sent",
            extra={
                "interactive_type": str(spec.kind),
                "message_id": first_message_id(response),
            },
        )
        return response
