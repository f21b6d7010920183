"""Corpo JSON das mensagens interativas da Cloud API (button, list, flow)."""

from api.payload_builders.whatsapp.base import (
    PayloadBuilder,
    build_base_payload,
    normalize_recipient,
)
from api.payload_builders.whatsapp.factory import BUILDERS, build_full_payload, builder_for

__all__ = [
    "BUILDERS",
    "PayloadBuilder",
    "build_base_payload",
    "build_full_payload",
    "builder_for",
    "normalize_recipient",
]
