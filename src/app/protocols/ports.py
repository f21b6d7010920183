"""Portas do core: o que os use cases esperam dos adapters de api/.

As implementações ficam em app/bootstrap/whatsapp_adapters.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import FieldExtractionSpec, FlowExtractionResult, InteractiveMessageSpec


class MessageSpecValidatorProtocol(Protocol):
    """Levanta ValidationError quando a spec viola limites da Cloud API."""

    def validate_message_spec(self, spec: InteractiveMessageSpec) -> None: ...


class PayloadBuilderProtocol(Protocol):
    """Spec -> corpo JSON do POST /messages."""

    def build_full_payload(self, spec: InteractiveMessageSpec) -> dict[str, Any]: ...


class OutboundSenderProtocol(Protocol):
    """Envia o corpo pronto e devolve a resposta da Graph API."""

    async def send(self, payload: dict[str, Any]) -> dict[str, Any]: ...


class CredentialTesterProtocol(Protocol):
    async def test(self) -> dict[str, Any]: ...


class FlowResponseExtractorProtocol(Protocol):
    def extract(self, envelope: Any) -> FlowExtractionResult: ...

    def extract_fields(
        self,
        result: FlowExtractionResult,
        fields: Sequence[FieldExtractionSpec],
    ) -> dict[str, Any]: ...


class WhatsAppHttpClientProtocol(Protocol):
    """Chamadas Graph API da credencial; HttpError em falha."""

    async def send_message(
        self,
        endpoint: str,
        access_token: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]: ...

    async def fetch_phone_number(self, endpoint: str, access_token: str) -> dict[str, Any]: ...
