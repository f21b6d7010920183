"""Adapters concretos para WhatsApp (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.http_client import create_whatsapp_http_client
from api.normalizers.whatsapp import extract_fields, extract_flow_response
from api.payload_builders.whatsapp.factory import build_full_payload
from api.validators.whatsapp.validator_dispatcher import WhatsAppMessageValidator
from app.protocols.ports import (
    CredentialTesterProtocol,
    FlowResponseExtractorProtocol,
    MessageSpecValidatorProtocol,
    OutboundSenderProtocol,
    PayloadBuilderProtocol,
)
from config.settings import get_whatsapp_settings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import (
        FieldExtractionSpec,
        FlowExtractionResult,
        InteractiveMessageSpec,
    )
    from app.protocols.ports import WhatsAppHttpClientProtocol
    from config.settings import WhatsAppSettings

logger = logging.getLogger(__name__)


class GraphApiPayloadBuilder(PayloadBuilderProtocol):
    """Builder de payload para Graph API."""

    def build_full_payload(self, spec: InteractiveMessageSpec) -> dict[str, Any]:
        return build_full_payload(spec)


class GraphApiMessageValidator(MessageSpecValidatorProtocol):
    """Validador de mensagens interativas usando limites do Graph API."""

    def __init__(self) -> None:
        self._validator = WhatsAppMessageValidator()

    def validate_message_spec(self, spec: InteractiveMessageSpec) -> None:
        self._validator.validate_message_spec(spec)


class _GraphApiCredentialUser:
    """Base dos adapters que usam a credencial whatsAppApi.

    Settings e cliente são resolvidos a cada chamada quando não injetados,
    para refletir a configuração atual do ambiente.
    """

    def __init__(
        self,
        settings: WhatsAppSettings | None = None,
        http_client: WhatsAppHttpClientProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._http_client = http_client

    def _resolve(self) -> tuple[WhatsAppSettings, WhatsAppHttpClientProtocol]:
        whatsapp = self._settings or get_whatsapp_settings()
        return whatsapp, self._http_client or create_whatsapp_http_client(whatsapp)


class GraphApiOutboundSender(_GraphApiCredentialUser, OutboundSenderProtocol):
    async def send(self, payload: dict[str, Any]) -> dict[str, Any]:
        whatsapp, http_client = self._resolve()
        try:
            return await http_client.send_message(
                endpoint=whatsapp.get_messages_endpoint(),
                access_token=whatsapp.access_token,
                payload=payload,
            )
        except Exception as exc:
            logger.error("whatsapp_send_failed", extra={"error_type": type(exc).__name__})
            raise


class GraphApiCredentialTester(_GraphApiCredentialUser, CredentialTesterProtocol):
    async def test(self) -> dict[str, Any]:
        """GET no phone_number_id configurado.

        Raises:
            ValueError: phone_number_id ou access_token vazios
            HttpError: Graph API recusou a credencial
        """
        whatsapp, http_client = self._resolve()
        response = await http_client.fetch_phone_number(
            endpoint=whatsapp.get_phone_number_endpoint(),
            access_token=whatsapp.access_token,
        )
        logger.info("whatsapp_credentials_verified")
        return response


class GraphApiFlowResponseExtractor(FlowResponseExtractorProtocol):
    """Extrator de respostas de Flow a partir de envelopes Graph API."""

    def extract(self, envelope: Any) -> FlowExtractionResult:
        return extract_flow_response(envelope)

    def extract_fields(
        self,
        result: FlowExtractionResult,
        fields: Sequence[FieldExtractionSpec],
    ) -> dict[str, Any]:
        return extract_fields(result, fields)
