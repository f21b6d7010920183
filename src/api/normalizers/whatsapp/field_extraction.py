"""Pipeline de extração de campos configurados a partir do resultado de Flow."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .coercion import coerce_value
from .json_path import resolve_path

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import FieldExtractionSpec, FlowExtractionResult


def extract_fields(
    result: FlowExtractionResult,
    fields: Sequence[FieldExtractionSpec],
) -> dict[str, Any]:
    """Resolve e converte cada campo configurado.

    O caminho é resolvido contra `result.to_dict()`, então caminhos como
    `flowData.choice` ou `success` são válidos. Nomes repetidos: o último vence.
    """
    root = result.to_dict()
    extracted: dict[str, Any] = {}
    for spec in fields:
        value = resolve_path(root, spec.json_path)
        extracted[spec.field_name] = coerce_value(value, spec.target_type)
    return extracted
