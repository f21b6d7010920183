"""Respostas de WhatsApp Flows (nfm_reply) e extração de campos por caminho.

Somente extração estrutural; nada aqui levanta exceção para o chamador.
"""

from .coercion import coerce_value, is_invalid_number
from .field_extraction import extract_fields
from .flow_response import extract_flow_response
from .json_path import resolve_path

__all__ = [
    "coerce_value",
    "extract_fields",
    "extract_flow_response",
    "is_invalid_number",
    "resolve_path",
]
