"""Interfaces e utilidades base para builders de payload."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Protocol

from app.constants.whatsapp import MessageType

if TYPE_CHECKING:
    from app.protocols.models import InteractiveMessageSpec

_NON_DIGITS = re.compile(r"\D")


class PayloadBuilder(Protocol):
    """Protocolo para builders de payload por variante interativa."""

    def build(self, spec: InteractiveMessageSpec) -> dict[str, Any]:
        """Constrói o bloco `interactive` para a variante.

        Args:
            spec: Requisição de envio

        Returns:
            Payload parcial (será mesclado com base)
        """
        ...


def normalize_recipient(to: str) -> str:
    """Remove todo caractere não numérico do telefone.

    Resultado vazio é aceito; validar formato é papel do chamador.
    """
    return _NON_DIGITS.sub("", to or "")


def build_base_payload(spec: InteractiveMessageSpec) -> dict[str, Any]:
    """Constrói payload base comum a todas as mensagens interativas.

    Args:
        spec: Requisição de envio

    Returns:
        Payload com campos obrigatórios
    """
    return {
        "messaging_product": "whatsapp",
        "to": normalize_recipient(spec.to),
        "type": MessageType.INTERACTIVE.value,
    }
