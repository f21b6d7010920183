"""Leitura de payloads externos para os modelos de app/protocols."""

from .whatsapp import extract_fields, extract_flow_response

__all__ = ["extract_fields", "extract_flow_response"]
