"""Montagem do corpo completo do POST /messages.

Corpo = campos comuns (messaging_product, to, type) + bloco `interactive`
da variante indicada em spec.kind.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import PayloadBuilder, build_base_payload
from api.payload_builders.whatsapp.interactive import (
    ButtonPayloadBuilder,
    FlowPayloadBuilder,
    ListPayloadBuilder,
)
from app.constants.whatsapp import InteractiveType
from app.protocols.errors import ValidationError

if TYPE_CHECKING:
    from app.protocols.models import InteractiveMessageSpec

BUILDERS: MappingProxyType[InteractiveType, PayloadBuilder] = MappingProxyType(
    {
        InteractiveType.BUTTON: ButtonPayloadBuilder(),
        InteractiveType.LIST: ListPayloadBuilder(),
        InteractiveType.FLOW: FlowPayloadBuilder(),
    }
)


def builder_for(kind: InteractiveType | str) -> PayloadBuilder:
    """Builder registrado para a variante.

    Raises:
        ValidationError: Variante sem builder (ex: "carousel")
    """
    try:
        return BUILDERS[kind]
    except KeyError:
        raise ValidationError(f"unsupported interactive type: {kind}") from None


def build_full_payload(spec: InteractiveMessageSpec) -> dict[str, Any]:
    builder = builder_for(spec.kind)
    return {**build_base_payload(spec), **builder.build(spec)}
