"""Factory de wiring para WhatsApp (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.bootstrap.whatsapp_adapters import (
    GraphApiCredentialTester,
    GraphApiFlowResponseExtractor,
    GraphApiMessageValidator,
    GraphApiOutboundSender,
    GraphApiPayloadBuilder,
)
from app.coordinators.whatsapp.nodes import (
    ButtonMessageNode,
    FlowAnalyzeNode,
    FlowSendNode,
    WhatsAppNode,
)
from app.use_cases.whatsapp.analyze_flow_response import AnalyzeFlowResponseUseCase
from app.use_cases.whatsapp.send_interactive_message import SendInteractiveMessageUseCase

if TYPE_CHECKING:
    from app.protocols.ports import OutboundSenderProtocol


def create_send_interactive_use_case(
    sender: OutboundSenderProtocol | None = None,
) -> SendInteractiveMessageUseCase:
    """Cria use case de envio interativo com dependências injetadas."""
    return SendInteractiveMessageUseCase(
        validator=GraphApiMessageValidator(),
        builder=GraphApiPayloadBuilder(),
        sender=sender or GraphApiOutboundSender(),
    )


def create_analyze_flow_use_case() -> AnalyzeFlowResponseUseCase:
    """Cria use case de análise de respostas de Flow."""
    return AnalyzeFlowResponseUseCase(extractor=GraphApiFlowResponseExtractor())


def create_credential_tester() -> GraphApiCredentialTester:
    """Cria o teste de credenciais WhatsApp API."""
    return GraphApiCredentialTester()


def create_node_registry(
    sender: OutboundSenderProtocol | None = None,
) -> dict[str, WhatsAppNode]:
    """Registra os nodes pelo nome usado no host.

    Args:
        sender: Sender outbound alternativo (ex: fake em testes)
    """
    send_use_case = create_send_interactive_use_case(sender)
    nodes: list[WhatsAppNode] = [
        ButtonMessageNode(send_use_case),
        FlowSendNode(send_use_case),
        FlowAnalyzeNode(create_analyze_flow_use_case()),
    ]
    return {node.name: node for node in nodes}
