"""Loader dos descritores declarativos de nodes e credenciais.

Carrega YAMLs em `config/nodes/descriptors/` com cache, sem uso de rede.
Os descritores são só metadados de UI do host: nenhuma lógica de runtime.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_DESCRIPTORS_DIR = Path(__file__).resolve().parent / "descriptors"

NODE_KIND = "node"
CREDENTIAL_KIND = "credential"


class NodeDescriptorError(Exception):
    """Erro ao carregar descritor de node."""


def _read_descriptor(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            descriptor = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.error(
            "node_descriptor_yaml_error",
            extra={"path": path.name, "error": str(exc)},
        )
        raise NodeDescriptorError(f"invalid descriptor file: {path.name}") from exc

    if not isinstance(descriptor, dict) or not descriptor.get("name"):
        raise NodeDescriptorError(f"descriptor without name: {path.name}")
    return descriptor


@lru_cache(maxsize=1)
def _load_index() -> dict[str, dict[str, Any]]:
    """Indexa descritores pelo campo `name` (ex: whatsAppFlowSend)."""
    index: dict[str, dict[str, Any]] = {}
    for path in sorted(_DESCRIPTORS_DIR.glob("*.yaml")):
        descriptor = _read_descriptor(path)
        index[descriptor["name"]] = descriptor
    logger.debug("node_descriptors_loaded", extra={"count": len(index)})
    return index


def load_node_descriptor(name: str) -> dict[str, Any]:
    """Retorna o descritor pelo nome.

    Raises:
        NodeDescriptorError: Se nenhum descritor tiver esse nome
    """
    descriptor = _load_index().get(name)
    if descriptor is None:
        raise NodeDescriptorError(f"unknown node: {name}")
    return descriptor


def list_node_descriptors(kind: str = NODE_KIND) -> list[dict[str, Any]]:
    """Lista descritores de um tipo (node ou credential), ordenados por nome."""
    return [d for _, d in sorted(_load_index().items()) if d.get("kind") == kind]


def clear_descriptor_cache() -> None:
    """Limpa cache dos descritores (util em testes)."""
    _load_index.cache_clear()
