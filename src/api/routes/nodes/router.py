"""Endpoints dos nodes: descritores, execução em lote e teste de credenciais.

Endpoints:
- GET /nodes: descritores de nodes e credenciais
- GET /nodes/{name}: descritor de um node
- POST /nodes/{name}/execute: executa o node sobre os itens enviados
- POST /credentials/whatsAppApi/test: valida as credenciais na Graph API

Com continueOnFail=false a primeira falha aborta o lote:
ValidationError -> 422, erro da Graph API -> 502, credencial ausente -> 500.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from api.connectors.whatsapp.http_base import HttpError
from api.normalizers.whatsapp import is_invalid_number
from app.bootstrap import get_node_registry
from app.bootstrap.whatsapp_factory import create_credential_tester
from app.protocols.errors import ValidationError
from app.protocols.models import NodeItem
from config.nodes import (
    CREDENTIAL_KIND,
    NODE_KIND,
    NodeDescriptorError,
    list_node_descriptors,
    load_node_descriptor,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable

router = APIRouter()

logger = logging.getLogger(__name__)

CREDENTIAL_NAME = "whatsAppApi"


class NodeExecutionItem(BaseModel):
    """Item de entrada: dados (`json`) e parâmetros específicos do item."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    data: Any = Field(default_factory=dict, alias="json")
    parameters: dict[str, Any] = Field(default_factory=dict)


class NodeExecutionRequest(BaseModel):
    """Lote enviado pelo host.

    `parameters` vale para todos os itens; parâmetros do item sobrescrevem.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    parameters: dict[str, Any] = Field(default_factory=dict)
    items: list[NodeExecutionItem] = Field(default_factory=lambda: [NodeExecutionItem()])
    continue_on_fail: bool = Field(default=False, alias="continueOnFail")

    def to_node_items(self) -> list[NodeItem]:
        return [
            NodeItem(json=item.data, parameters={**self.parameters, **item.parameters})
            for item in self.items
        ]


def _json_safe(value: Any) -> Any:
    """Troca NaN (número inválido) por None para serialização JSON."""
    if is_invalid_number(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


async def _call_graph_api(operation: Awaitable[Any], *, context: str) -> Any:
    """Executa operação e converte falhas conhecidas em HTTPException."""
    try:
        return await operation
    except ValidationError as exc:
        logger.warning("node_validation_failed", extra={"context": context, "error": str(exc)})
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    except HttpError as exc:
        logger.warning(
            "node_graph_api_failed",
            extra={"context": context, "status_code": exc.status_code},
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"message": str(exc), "error": exc.details},
        ) from exc
    except ValueError as exc:
        logger.error("node_configuration_invalid", extra={"context": context, "error": str(exc)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc


@router.get("/nodes")
async def list_nodes() -> dict[str, Any]:
    """Lista descritores de nodes e credenciais."""
    return {
        "nodes": list_node_descriptors(NODE_KIND),
        "credentials": list_node_descriptors(CREDENTIAL_KIND),
    }


@router.get("/nodes/{name}")
async def get_node(name: str) -> dict[str, Any]:
    """Retorna o descritor de um node ou 404."""
    try:
        return load_node_descriptor(name)
    except NodeDescriptorError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("/nodes/{name}/execute")
async def execute_node(name: str, body: NodeExecutionRequest) -> dict[str, Any]:
    """Executa o node sobre os itens e devolve um item de saída por entrada."""
    node = get_node_registry().get(name)
    if node is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"unknown node: {name}")

    results = await _call_graph_api(
        node.execute(body.to_node_items(), continue_on_fail=body.continue_on_fail),
        context=name,
    )
    return {"items": _json_safe(results)}


@router.post(f"/credentials/{CREDENTIAL_NAME}/test")
async def test_credentials() -> dict[str, Any]:
    """Testa as credenciais WhatsApp (GET no número de telefone)."""
    response = await _call_graph_api(
        create_credential_tester().test(),
        context=CREDENTIAL_NAME,
    )
    return {"status": "ok", "response": response}
