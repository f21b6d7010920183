"""Resolução de caminhos com ponto (ex: `flowData.address.city`).

Caminho ausente resolve para None, nunca levanta exceção.
Não há sintaxe de índice (`[0]`); uma chave numérica aplicada a uma
lista é tratada como nome de propriedade (`items.0.id`).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

PATH_SEPARATOR = "."


def _step(current: Any, key: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(key)
    if isinstance(current, list) and key.isascii() and key.isdigit():
        index = int(key)
        return current[index] if index < len(current) else None
    return None


def resolve_path(root: Any, path: str) -> Any:
    """Resolve `path` contra `root`.

    Args:
        root: Valor JSON-like (dict, list, escalar)
        path: Chaves separadas por ponto; vazio retorna o próprio root

    Returns:
        Valor encontrado ou None se algum segmento estiver ausente
    """
    if not path:
        return root

    current = root
    for key in path.split(PATH_SEPARATOR):
        if current is None:
            return None
        current = _step(current, key)
    return current
