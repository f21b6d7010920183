"""Contratos canônicos trocados entre app/ e api/.

Modelos imutáveis: construídos uma vez por item e descartados após o uso.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.constants.whatsapp import InteractiveType


@dataclass(frozen=True, slots=True)
class ReplyButton:
    """Botão de resposta rápida."""

    id: str
    title: str


@dataclass(frozen=True, slots=True)
class ListRow:
    """Opção de uma seção de lista interativa."""

    id: str
    title: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class ListSection:
    """Seção de lista interativa (título opcional)."""

    rows: tuple[ListRow, ...]
    title: str | None = None


@dataclass(frozen=True, slots=True)
class ListMenu:
    """Payload da variante lista: rótulo do botão e seções."""

    button_label: str
    sections: tuple[ListSection, ...]


@dataclass(frozen=True, slots=True)
class FlowLaunch:
    """Payload da variante Flow."""

    flow_id: str
    flow_token: str
    cta_text: str
    initial_data: Any = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class InteractiveMessageSpec:
    """Requisição de envio de mensagem interativa.

    Exatamente uma variante é preenchida, conforme `kind`:
    `buttons` (BUTTON), `list_menu` (LIST) ou `flow` (FLOW).

    Attributes:
        to: Telefone do destinatário (normalizado no build)
        kind: Variante interativa
        body: Texto principal (obrigatório)
        header: Texto de cabeçalho opcional
        footer: Texto de rodapé opcional
    """

    to: str
    kind: InteractiveType
    body: str
    header: str | None = None
    footer: str | None = None
    buttons: tuple[ReplyButton, ...] = ()
    list_menu: ListMenu | None = None
    flow: FlowLaunch | None = None


@dataclass(frozen=True, slots=True)
class FlowExtractionResult:
    """Resultado da extração de uma resposta de Flow.

    `flow_token` guarda a string `response_json` bruta, como recebida.
    """

    success: bool = False
    message_id: str | None = None
    from_number: str | None = None
    timestamp: str | None = None
    flow_token: Any = None
    flow_data: Any = field(default_factory=dict)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Representação serializável (chaves no formato do node)."""
        data: dict[str, Any] = {
            "success": self.success,
            "messageId": self.message_id,
            "from": self.from_number,
            "timestamp": self.timestamp,
            "flowToken": self.flow_token,
            "flowData": self.flow_data,
        }
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True, slots=True)
class FieldExtractionSpec:
    """Campo a extrair do resultado de Flow."""

    field_name: str
    json_path: str
    target_type: str = "string"


@dataclass(frozen=True, slots=True)
class NodeItem:
    """Item de entrada de um node: dados do item e parâmetros resolvidos."""

    json: Any = field(default_factory=dict)
    parameters: dict[str, Any] = field(default_factory=dict)


__all__ = [
    "FieldExtractionSpec",
    "FlowExtractionResult",
    "FlowLaunch",
    "InteractiveMessageSpec",
    "ListMenu",
    "ListRow",
    "ListSection",
    "NodeItem",
    "ReplyButton",
]
