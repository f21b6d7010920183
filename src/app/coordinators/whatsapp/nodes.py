"""Nodes WhatsApp: convertem parâmetros do host em chamadas de use case.

Cada node processa seus itens em ordem e devolve um item de saída por
item de entrada. A política de falha fica em app.use_cases.item_runner.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.constants.whatsapp import DataSource
from app.domain.node_parameters import (
    ButtonMessageParameters,
    FlowAnalyzeParameters,
    FlowSendParameters,
    parse_parameters,
)
from app.use_cases.item_runner import run_items
from app.use_cases.whatsapp.send_interactive_message import first_message_id

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import NodeItem
    from app.use_cases.whatsapp.analyze_flow_response import AnalyzeFlowResponseUseCase
    from app.use_cases.whatsapp.send_interactive_message import (
        SendInteractiveMessageUseCase,
    )

logger = logging.getLogger(__name__)

BUTTON_MESSAGE_NODE = "whatsAppButtonMessage"
FLOW_SEND_NODE = "whatsAppFlowSend"
FLOW_ANALYZE_NODE = "whatsAppFlowAnalyze"


class WhatsAppNode:
    """Base dos nodes: execução em lote sobre `process_item`."""

    name: str = ""
    reports_provider_body: bool = False

    async def process_item(self, item: NodeItem) -> dict[str, Any]:
        raise NotImplementedError

    async def execute(
        self,
        items: Sequence[NodeItem],
        *,
        continue_on_fail: bool = False,
    ) -> list[dict[str, Any]]:
        """Executa o node sobre todos os itens.

        Raises:
            Exception: Falha do primeiro item inválido, se continue_on_fail=False
        """
        logger.info("node_execution_started", extra={"node": self.name, "item_count": len(items)})
        return await run_items(
            items,
            self.process_item,
            continue_on_fail=continue_on_fail,
            node_name=self.name,
            provider_body_errors=self.reports_provider_body,
        )


class ButtonMessageNode(WhatsAppNode):
    """Envia mensagens com botões de resposta ou lista."""

    name = BUTTON_MESSAGE_NODE
    reports_provider_body = True

    def __init__(self, use_case: SendInteractiveMessageUseCase) -> None:
        self._use_case = use_case

    async def process_item(self, item: NodeItem) -> dict[str, Any]:
        params = parse_parameters(ButtonMessageParameters, item.parameters)
        response = await self._use_case.execute(params.to_message_spec())
        return {
            "success": True,
            "messageId": first_message_id(response),
            "to": params.to,
            "messageType": params.message_type,
            "response": response,
        }


class FlowSendNode(WhatsAppNode):
    """Envia mensagem que abre um WhatsApp Flow."""

    name = FLOW_SEND_NODE

    def __init__(self, use_case: SendInteractiveMessageUseCase) -> None:
        self._use_case = use_case

    async def process_item(self, item: NodeItem) -> dict[str, Any]:
        params = parse_parameters(FlowSendParameters, item.parameters)
        response = await self._use_case.execute(params.to_message_spec())
        return {
            "success": True,
            "messageId": first_message_id(response),
            "to": params.to,
            "flowId": params.flow_id,
            "response": response,
        }


class FlowAnalyzeNode(WhatsAppNode):
    """Analisa respostas de Flow vindas do webhook ou de JSON informado."""

    name = FLOW_ANALYZE_NODE

    def __init__(self, use_case: AnalyzeFlowResponseUseCase) -> None:
        self._use_case = use_case

    async def process_item(self, item: NodeItem) -> dict[str, Any]:
        params = parse_parameters(FlowAnalyzeParameters, item.parameters)
        if params.data_source == DataSource.JSON:
            envelope = params.load_json_data()
        else:
            envelope = item.json
        return self._use_case.execute(envelope, params.to_field_specs())
